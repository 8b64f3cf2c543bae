"""Tests for extension-exporter."""
