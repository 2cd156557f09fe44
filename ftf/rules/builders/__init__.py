"""
Rule builders for creating rules with a fluent API.
"""

from ftf.rules.builders.fuzzy import FuzzyRule, FuzzyRuleBuilder
from ftf.rules.builders.regex import RegexRule, RegexRuleBuilder
from ftf.rules.builders.simple import SimpleRule, SimpleRuleBuilder

__all__ = [
    "FuzzyRule",
    "FuzzyRuleBuilder",
    "RegexRule",
    "RegexRuleBuilder",
    "SimpleRule",
    "SimpleRuleBuilder",
]
