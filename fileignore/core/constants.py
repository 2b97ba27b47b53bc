"""
fileignore Core: Constants

This module provides package-wide constants, error codes, rule-line syntax
markers and configuration keys.
"""
from enum import IntEnum

# Version information
FILEIGNORE_VERSION = "1.0.0"


# Error codes (0-9 range)
class ErrorCode(IntEnum):
    """Standardized error codes for fileignore operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Bad path, wrong file name, invalid configuration
    NOT_FOUND = 2  # File or resource doesn't exist
    INTERNAL_ERROR = 6  # Read or decode failure, bug in fileignore


# Rule-line syntax
class Syntax:
    """Markers recognised in an ignore file."""

    COMMENT = "#"
    NEGATION = "!"
    WILDCARD = "*"


# Ignore file defaults
IGNORE_FILE_NAME = ".fileignore"
IGNORE_FILE_ENCODING = "utf-8"


# Configuration keys
class ConfigKey:
    """Configuration key constants (dot-separated paths)."""

    ROOT = "fileignore"

    IGNORE_FILE_NAME = "fileignore.ignore_file.name"
    IGNORE_FILE_ENCODING = "fileignore.ignore_file.encoding"

    LOG_LEVEL = "fileignore.logging.level"
    LOG_FILE = "fileignore.logging.file"


# Default configuration values
DEFAULT_CONFIG = {
    ConfigKey.ROOT: {
        "ignore_file": {
            "name": IGNORE_FILE_NAME,
            "encoding": IGNORE_FILE_ENCODING,
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }
}
