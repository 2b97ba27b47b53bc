"""fileignore Infrastructure.

Services used by the loader and the command-line interface:
- ConfigManager: Layered configuration (defaults, YAML files, environment)
- Logger: Structured logging
"""

from .config_manager import ConfigError
from .config_manager import ConfigManager as Config
from .config_manager import ConfigSource, ConfigValue, get_config_manager, set_global_config
from .logger import Logger, LogLevel, configure_logging, get_logger, set_global_logger

__all__ = [
    # Logger exports
    "Logger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_global_logger",
    # ConfigManager exports
    "ConfigSource",
    "ConfigValue",
    "ConfigError",
    "Config",
    "get_config_manager",
    "set_global_config",
]
