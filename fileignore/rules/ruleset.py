#!/usr/bin/env python3
"""Ignore rule sets built from the lines of an ignore file.

A rule set holds two groups of compiled patterns:
- Ignore rules: lines without a prefix
- Negation rules: lines prefixed with ``!``

A path is ignored when any ignore rule matches it and no negation rule
does. Order within a group never changes the outcome; a negation rule
re-includes a path regardless of where it appears in the file.

Example:
    >>> rules = RuleSet(["build/", "!build/keep.txt"])
    >>> rules.is_ignored("build/output.o")
    True
    >>> rules.is_ignored("build/keep.txt")
    False
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from fileignore.core.constants import Syntax
from fileignore.rules.patterns import IgnorePattern, compile_pattern


@dataclass(frozen=True)
class Rule:
    """A compiled rule and the line it came from."""

    pattern: IgnorePattern
    line_number: int

    @property
    def source(self) -> str:
        """Rule line as written."""
        return self.pattern.source

    def matches(self, path: str) -> bool:
        return self.pattern.matches(path)


@dataclass(frozen=True)
class RuleMatches:
    """Rules of a rule set that match one path."""

    ignore: Tuple[Rule, ...]
    negation: Tuple[Rule, ...]

    @property
    def ignored(self) -> bool:
        return bool(self.ignore) and not self.negation


def is_rule_line(line: str) -> bool:
    """Check if a line carries a rule.

    Blank lines and lines starting with ``#`` carry none. The comment marker
    is checked on the raw line, so an indented ``#`` is literal rule text.

    Args:
        line: Raw line from an ignore file

    Returns:
        True if the line should be compiled
    """
    if not line.strip():
        return False
    return not line.startswith(Syntax.COMMENT)


class RuleSet:
    """Immutable set of ignore and negation rules.

    Built once from a sequence of lines; there is no mutation API. Queries
    touch no shared mutable state and may run concurrently.
    """

    __slots__ = ("_ignore_rules", "_negation_rules")

    def __init__(self, lines: Iterable[str] = ()):
        """Compile rule lines.

        Args:
            lines: Decoded lines in file order, blank and comment lines included
        """
        ignore_rules: List[Rule] = []
        negation_rules: List[Rule] = []

        for line_number, line in enumerate(lines, start=1):
            if not is_rule_line(line):
                continue

            rule = Rule(pattern=compile_pattern(line), line_number=line_number)
            if line.startswith(Syntax.NEGATION):
                negation_rules.append(rule)
            else:
                ignore_rules.append(rule)

        self._ignore_rules: Tuple[Rule, ...] = tuple(ignore_rules)
        self._negation_rules: Tuple[Rule, ...] = tuple(negation_rules)

    @property
    def ignore_rules(self) -> Tuple[Rule, ...]:
        """Rules that exclude matching paths, in file order."""
        return self._ignore_rules

    @property
    def negation_rules(self) -> Tuple[Rule, ...]:
        """Rules that re-include matching paths, in file order."""
        return self._negation_rules

    def is_ignored(self, path: str) -> bool:
        """Check if path is ignored.

        Args:
            path: Relative path to check

        Returns:
            True if an ignore rule matches and no negation rule matches
        """
        if not any(rule.matches(path) for rule in self._ignore_rules):
            return False
        return not any(rule.matches(path) for rule in self._negation_rules)

    def get_matching_rules(self, path: str) -> RuleMatches:
        """Get all rules that match the path.

        Args:
            path: Relative path to check

        Returns:
            Matching ignore and negation rules
        """
        return RuleMatches(
            ignore=tuple(rule for rule in self._ignore_rules if rule.matches(path)),
            negation=tuple(rule for rule in self._negation_rules if rule.matches(path)),
        )

    def __len__(self) -> int:
        """Return number of rules."""
        return len(self._ignore_rules) + len(self._negation_rules)

    def __bool__(self) -> bool:
        """Return True if any rules were compiled."""
        return len(self) > 0

    def __repr__(self) -> str:
        return (
            f"RuleSet(ignore={[r.source for r in self._ignore_rules]!r}, "
            f"negation={[r.source for r in self._negation_rules]!r})"
        )
