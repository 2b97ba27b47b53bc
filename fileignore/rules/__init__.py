"""fileignore Rules System.

This module provides ignore-rule compilation and evaluation:
- compile_pattern: Translate one rule line into a path predicate
- RuleSet: Ignore and negation rules evaluated together

Rules decide which relative paths are ignored. A rule line is literal text
with ``*`` wildcards; a leading ``!`` turns it into a negation rule.
"""

from .patterns import IgnorePattern, compile_pattern, strip_negation, translate
from .ruleset import Rule, RuleMatches, RuleSet, is_rule_line

__all__ = [
    # Pattern compilation
    "IgnorePattern",
    "compile_pattern",
    "strip_negation",
    "translate",
    # Rule sets
    "Rule",
    "RuleMatches",
    "RuleSet",
    "is_rule_line",
]
