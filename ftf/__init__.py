"""
ftf - Fix the last failed shell command.

Inspects a failed invocation (script, output, exit code) and proposes
corrected commands ranked by confidence.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ftf")
except PackageNotFoundError:
    # Package not installed, fallback to pyproject.toml
    __version__ = "0.2.0"

__author__ = "ftf Contributors"

from ftf.core.exceptions import (
    FtfError,
    InvalidPatternError,
    MissingPatternError,
    MissingReplacementError,
    RuleBuildError,
)
from ftf.core.types import Command, CorrectedCommand
from ftf.corrector import Corrector
from ftf.fuzzy import FuzzyMatcher
from ftf.rules import (
    FuzzyRuleBuilder,
    RegexRuleBuilder,
    Rule,
    RuleRegistry,
    SimpleRuleBuilder,
)

__all__ = [
    "Command",
    "CorrectedCommand",
    "Corrector",
    "FtfError",
    "FuzzyMatcher",
    "FuzzyRuleBuilder",
    "InvalidPatternError",
    "MissingPatternError",
    "MissingReplacementError",
    "RegexRuleBuilder",
    "Rule",
    "RuleBuildError",
    "RuleRegistry",
    "SimpleRuleBuilder",
]
