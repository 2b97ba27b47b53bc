#!/usr/bin/env python3
r"""Compilation of ignore-file rule lines into path predicates.

A rule line is literal text in which ``*`` stands for any run of characters,
path separators included. Every other character, ``/`` and regex
metacharacters such as ``.`` or ``(`` included, is matched literally.

Compiled patterns are unanchored: a rule matches when it occurs anywhere in
the path, so ``build/`` matches ``src/build/out.o`` and ``*.tmp`` matches
``a.tmpx``.

Example:
    >>> pattern = compile_pattern("*.log")
    >>> pattern.matches("logs/app.log.1")
    True
    >>> compile_pattern("!keep.txt").body
    'keep.txt'
"""

import re
from dataclasses import dataclass

from fileignore.core.constants import Syntax

# Any run of characters, newlines included
_ANY = ".*"


@dataclass(frozen=True)
class IgnorePattern:
    """A compiled rule line.

    Attributes:
        source: The rule line as written
        body: The line with one leading negation marker removed
        regex: Compiled expression, matched against the whole path
    """

    source: str
    body: str
    regex: re.Pattern

    def matches(self, path: str) -> bool:
        """Check if the pattern occurs anywhere in ``path``.

        Args:
            path: Path string to test

        Returns:
            True if path matches
        """
        return self.regex.fullmatch(path) is not None


def strip_negation(line: str) -> str:
    """Remove exactly one leading negation marker, if present."""
    if line.startswith(Syntax.NEGATION):
        return line[len(Syntax.NEGATION):]
    return line


def translate(body: str) -> str:
    """Translate a rule body into a regular expression.

    Literal segments are escaped, each run of ``*`` becomes ``.*`` and the
    result is wrapped in leading and trailing wildcards.

    Args:
        body: Rule text without negation marker

    Returns:
        Regular expression source for a full-string match
    """
    literals = [re.escape(part) for part in body.split(Syntax.WILDCARD)]

    # Adjacent wildcards leave empty segments behind; collapse them
    parts = [_ANY]
    for literal in literals:
        if literal:
            parts.append(literal)
        if parts[-1] != _ANY:
            parts.append(_ANY)

    return "".join(parts)


def compile_pattern(line: str) -> IgnorePattern:
    """Compile one rule line.

    The line may carry a leading ``!``; it is stripped but not recorded,
    the caller decides which rule set the pattern belongs to.

    Args:
        line: Non-blank, non-comment rule line

    Returns:
        Compiled pattern
    """
    body = strip_negation(line)
    regex = re.compile(translate(body), re.DOTALL)
    return IgnorePattern(source=line, body=body, regex=regex)
