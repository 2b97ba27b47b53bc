"""fileignore - Decide which paths a .fileignore file excludes.

Public API:
- compile_pattern: Compile one rule line
- RuleSet: Ignore and negation rules built from lines
- load_ignore_file: Build a RuleSet from a .fileignore file
"""

from fileignore.core.constants import FILEIGNORE_VERSION as __version__
from fileignore.core.constants import IGNORE_FILE_NAME
from fileignore.loader import IgnoreFileError, find_ignore_file, load_ignore_file
from fileignore.rules import IgnorePattern, Rule, RuleMatches, RuleSet, compile_pattern

__all__ = [
    "__version__",
    "IGNORE_FILE_NAME",
    "IgnoreFileError",
    "IgnorePattern",
    "Rule",
    "RuleMatches",
    "RuleSet",
    "compile_pattern",
    "find_ignore_file",
    "load_ignore_file",
]
