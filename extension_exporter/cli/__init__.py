"""Command line interface for extension-exporter"""
