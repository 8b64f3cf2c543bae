"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from ..api.exceptions import ConfigurationError
from ..models.config import ExportConfig
from ..constants import (
    PROJECT_CONFIG_FILE,
    ENV_CONFIG_PATH,
    ENV_EXPORT_DIR,
    ENV_SITE_ROOT,
    ENV_ADMIN_ROOT,
)

ENV_OVERRIDES = {
    "export_directory": ENV_EXPORT_DIR,
    "site_root": ENV_SITE_ROOT,
    "admin_root": ENV_ADMIN_ROOT,
}


class ConfigService:
    """Builds ExportConfig from a YAML file, the environment and explicit overrides"""

    def __init__(self, config_path: Optional[Path] = None, base_dir: Optional[Path] = None):
        """Initialize config service

        Args:
            config_path: Explicit configuration file
            base_dir: Directory searched for the default config file
        """
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.config_path = self._locate(config_path)
        self.logger = logging.getLogger(self.__class__.__name__)

    def _locate(self, config_path: Optional[Path]) -> Optional[Path]:
        if config_path:
            return Path(config_path)

        env_path = os.environ.get(ENV_CONFIG_PATH)
        if env_path:
            return Path(env_path)

        default_path = self.base_dir / PROJECT_CONFIG_FILE
        return default_path if default_path.exists() else None

    def load_file(self) -> Dict[str, Any]:
        """Load settings from the configuration file

        Returns:
            Settings dict, empty if no file is configured
        """
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid configuration file {self.config_path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {self.config_path} must contain a mapping")

        # Relative paths are relative to the config file
        for key in ENV_OVERRIDES:
            value = data.get(key)
            if value and not Path(str(value)).is_absolute():
                data[key] = str(self.config_path.parent / str(value))

        self.logger.debug(f"Loaded configuration from {self.config_path}")
        return data

    def load_environment(self) -> Dict[str, Any]:
        """Load settings from environment variables"""
        data = {}
        for key, env_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                data[key] = value
        return data

    def load_config(self, **overrides) -> ExportConfig:
        """
        Merge file, environment and explicit settings

        Later sources win; None overrides are ignored.

        Returns:
            Export configuration
        """
        data = self.load_file()
        data.update(self.load_environment())
        data.update({k: v for k, v in overrides.items() if v is not None})

        return ExportConfig.from_dict(data)
