#!/usr/bin/env python3
"""Loading rule sets from ``.fileignore`` files.

File format:
- A blank line matches nothing and can separate groups of rules
- A line starting with ``#`` is a comment
- ``/`` is the directory separator and may appear anywhere in a rule
- ``*`` matches anything, separators included
- A leading ``!`` negates the rule: a path excluded by another rule is
  included again

Example:
    >>> rules = load_ignore_file("project/.fileignore")
    >>> rules.is_ignored("build/output.o")
    True
"""

from pathlib import Path
from typing import List, Optional, Union

from fileignore.core.constants import IGNORE_FILE_ENCODING, IGNORE_FILE_NAME, ErrorCode
from fileignore.infrastructure.logger import get_logger
from fileignore.rules.ruleset import RuleSet


class IgnoreFileError(Exception):
    """Ignore file cannot be used to build a rule set."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


def read_rule_lines(path: Path, encoding: str = IGNORE_FILE_ENCODING) -> List[str]:
    """Read an ignore file into lines without terminators.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        Lines in file order

    Raises:
        IgnoreFileError: If the file cannot be read or decoded
    """
    try:
        with open(path, "r", encoding=encoding, newline=None) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise IgnoreFileError(
            f"Failed to read the ignore file: {path}", ErrorCode.INTERNAL_ERROR
        ) from e

    return text.split("\n")


def load_ignore_file(
    path: Optional[Union[str, Path]],
    file_name: str = IGNORE_FILE_NAME,
    encoding: str = IGNORE_FILE_ENCODING,
) -> RuleSet:
    """Build a rule set from an ignore file.

    Args:
        path: Path to the ignore file
        file_name: Required name of the file
        encoding: Text encoding of the file

    Returns:
        Rule set compiled from every line of the file

    Raises:
        IgnoreFileError: If the path is missing, does not exist, has the
            wrong file name, or cannot be read
    """
    logger = get_logger()

    if path is None:
        raise IgnoreFileError("The ignore file path cannot be None.")

    ignore_path = Path(path)

    if not ignore_path.exists():
        logger.error("Ignore file not found", path=ignore_path)
        raise IgnoreFileError(f"The ignore file does not exist: {ignore_path}", ErrorCode.NOT_FOUND)

    if ignore_path.name != file_name:
        logger.error("Ignore file has wrong name", path=ignore_path, expected=file_name)
        raise IgnoreFileError(f"The ignore file has an invalid name: {ignore_path.name}")

    with logger.add_context(path=ignore_path):
        try:
            lines = read_rule_lines(ignore_path, encoding)
        except IgnoreFileError as e:
            logger.error("Ignore file unreadable", reason=e.__cause__)
            raise

        rules = RuleSet(lines)
        logger.debug(
            "Loaded ignore file",
            lines=len(lines),
            ignore=len(rules.ignore_rules),
            negation=len(rules.negation_rules),
        )

    return rules


def find_ignore_file(
    start: Union[str, Path] = ".", file_name: str = IGNORE_FILE_NAME
) -> Optional[Path]:
    """Search ``start`` and its parents for an ignore file.

    Args:
        start: Directory to begin the search in
        file_name: Name of the ignore file

    Returns:
        Path of the nearest ignore file, or None if there is none
    """
    directory = Path(start).resolve()

    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / file_name
        if candidate.is_file():
            return candidate

    return None
