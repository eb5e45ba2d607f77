"""Configuration loading and path discovery."""

from .config import Config, ConfigError
from .paths import default_config_path, default_log_dir, default_log_file

__all__ = ["Config", "ConfigError", "default_config_path", "default_log_dir", "default_log_file"]
