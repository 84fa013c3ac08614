"""Configuration management module."""

from .config_loader import ConfigLoader, load_config

__all__ = ["ConfigLoader", "load_config"]
