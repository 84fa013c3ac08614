"""Configuration loader and validator."""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from ..utils.exceptions import ConfigurationError

load_dotenv()

OUTPUT_FORMATS = ('json', 'yaml', 'text')

DEFAULT_CONFIG: Dict[str, Any] = {
    'inference': {
        'language': 'generic',
        'max_depth': None,
        'merge_threshold': 0.5,
    },
    'reporting': {
        'output_format': 'json',
    },
    'logging': {
        'level': 'INFO',
        'json_format': False,
    },
}

# environment variable -> (dotted config key, converter)
ENV_OVERRIDES = {
    'JSON2STRUCT_LANGUAGE': ('inference.language', str),
    'JSON2STRUCT_MAX_DEPTH': ('inference.max_depth', int),
    'JSON2STRUCT_MERGE_THRESHOLD': ('inference.merge_threshold', float),
    'JSON2STRUCT_ROOT_NAME': ('inference.root_name', str),
    'JSON2STRUCT_LOG_LEVEL': ('logging.level', str),
}


class ConfigLoader:
    """Load and validate configuration from YAML files and environment variables."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional path to a configuration YAML file; defaults
                are used when omitted
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from defaults, file and environment variables.

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigurationError: If configuration is invalid
        """
        file_config: Dict[str, Any] = {}

        if self.config_path:
            if not self.config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {self.config_path}")

            try:
                with open(self.config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Failed to parse YAML configuration: {e}")

            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    f"Configuration root must be a mapping, got {type(file_config).__name__}"
                )

        self.config = self._merge(copy.deepcopy(DEFAULT_CONFIG), file_config)

        self._override_with_env()
        self._validate()

        return self.config

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge override into base; keys set to None keep None."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _override_with_env(self):
        """Apply JSON2STRUCT_* environment variables on top of file values."""
        for env_var, (key_path, convert) in ENV_OVERRIDES.items():
            raw = os.getenv(env_var)
            if not raw:
                continue
            try:
                self._set_nested(key_path, convert(raw))
            except ValueError:
                raise ConfigurationError(f"Invalid value for {env_var}: {raw!r}")

    def _set_nested(self, key_path: str, value: Any):
        """Set nested dictionary value using dot notation."""
        keys = key_path.split('.')
        d = self.config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value

    def _validate(self):
        """Validate configuration."""
        for section in DEFAULT_CONFIG:
            if not isinstance(self.config.get(section), dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")

        inference = self.config['inference']

        max_depth = inference.get('max_depth')
        if max_depth is not None:
            if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
                raise ConfigurationError(
                    f"inference.max_depth must be a positive integer, got {max_depth!r}"
                )

        threshold = inference.get('merge_threshold')
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)) or not 0 <= threshold <= 1:
            raise ConfigurationError(
                f"inference.merge_threshold must be a number between 0 and 1, got {threshold!r}"
            )

        # root_name is optional; when unset the CLI derives it from the sample file name
        root_name = inference.get('root_name')
        if root_name is not None and not str(root_name).strip():
            raise ConfigurationError("inference.root_name must not be empty when set")

        output_format = self.config['reporting'].get('output_format')
        if output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"reporting.output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {output_format!r}"
            )


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to configuration file

    Returns:
        Loaded configuration dictionary
    """
    loader = ConfigLoader(config_path)
    return loader.load()
