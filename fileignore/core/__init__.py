"""fileignore Core - Shared constants.

Import specific names from submodules:
    from fileignore.core.constants import ErrorCode, IGNORE_FILE_NAME
"""

from fileignore.core import constants

__all__ = [
    "constants",
]
