"""
ftf Rules - Rule abstraction, builders and registry.
"""

from ftf.rules.base import PriorityOverride, Rule
from ftf.rules.builders import (
    FuzzyRule,
    FuzzyRuleBuilder,
    RegexRule,
    RegexRuleBuilder,
    SimpleRule,
    SimpleRuleBuilder,
)
from ftf.rules.registry import RuleRegistry

__all__ = [
    "FuzzyRule",
    "FuzzyRuleBuilder",
    "PriorityOverride",
    "RegexRule",
    "RegexRuleBuilder",
    "Rule",
    "RuleRegistry",
    "SimpleRule",
    "SimpleRuleBuilder",
]
