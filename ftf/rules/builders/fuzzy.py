"""
Fuzzy rule builder for approximate pattern matching.

Catches commands that are "close enough" to a known pattern, such as typos.
"""

from __future__ import annotations

from loguru import logger

from ftf.core.exceptions import MissingPatternError, MissingReplacementError
from ftf.core.types import Command
from ftf.fuzzy import FuzzyMatcher, get_matcher
from ftf.rules.builders._base import BuiltRule, RuleBuilder

DEFAULT_THRESHOLD = 20
MIN_THRESHOLD = 0
MAX_THRESHOLD = 100


class FuzzyRule(BuiltRule):
    """Matches when every set target scores above the threshold; proposes a fixed command."""

    def __init__(
        self,
        replacement: str,
        command_pattern: str | None = None,
        output_pattern: str | None = None,
        threshold: int = DEFAULT_THRESHOLD,
        matcher: FuzzyMatcher | None = None,
        **options,
    ) -> None:
        super().__init__(**options)
        self.command_pattern = command_pattern
        self.output_pattern = output_pattern
        self.replacement = replacement
        self.threshold = threshold
        self._matcher = matcher or get_matcher()

    def _fuzzy_matches(self, text: str, pattern: str) -> bool:
        score = self._matcher.fuzzy_match(text, pattern)
        return score is not None and score > self.threshold

    def matches(self, command: Command) -> bool:
        if self.command_pattern is not None and not self._fuzzy_matches(
            command.script, self.command_pattern
        ):
            return False
        if self.output_pattern is not None and not self._fuzzy_matches(
            command.output, self.output_pattern
        ):
            return False
        return True

    def get_new_commands(self, command: Command) -> list[str]:
        return [self.replacement]


class FuzzyRuleBuilder(RuleBuilder):
    """
    Builder for fuzzy rules.

    Example:
        >>> rule = (
        ...     FuzzyRuleBuilder("git_status_typo")
        ...     .match_command("git status")
        ...     .threshold(60)
        ...     .replace("git status")
        ...     .build()
        ... )

    Raises:
        MissingPatternError: From build, when no target was set
        MissingReplacementError: From build, when no replacement was set
    """

    builder_name = "FuzzyRuleBuilder"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._command_pattern: str | None = None
        self._output_pattern: str | None = None
        self._replacement: str | None = None
        self._threshold = DEFAULT_THRESHOLD

    def match_command(self, pattern: str) -> FuzzyRuleBuilder:
        """Set the target the script is compared against."""
        self._command_pattern = pattern
        return self

    def match_output(self, pattern: str) -> FuzzyRuleBuilder:
        """Set the target the output is compared against."""
        self._output_pattern = pattern
        return self

    def threshold(self, threshold: int) -> FuzzyRuleBuilder:
        """Set the minimum score, clamped to [0, 100] (higher = stricter)."""
        self._threshold = max(MIN_THRESHOLD, min(MAX_THRESHOLD, threshold))
        return self

    def replace(self, replacement: str) -> FuzzyRuleBuilder:
        """Set the fixed replacement command."""
        self._replacement = replacement
        return self

    def build(self) -> FuzzyRule:
        """Build the rule."""
        if self._command_pattern is None and self._output_pattern is None:
            logger.warning(f"⚠️ Rule '{self.name}' has no command or output target")
            raise MissingPatternError(self.builder_name, self.name)

        if self._replacement is None:
            logger.warning(f"⚠️ Rule '{self.name}' has no replacement")
            raise MissingReplacementError(self.builder_name, self.name)

        rule = FuzzyRule(
            replacement=self._replacement,
            command_pattern=self._command_pattern,
            output_pattern=self._output_pattern,
            threshold=self._threshold,
            **self._rule_options(),
        )
        logger.debug(f"🔧 Built fuzzy rule: {self.name} (threshold {self._threshold})")
        return rule
