"""
ftf Rules - Registry.

Ordered container of the rules available to one evaluation session.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from loguru import logger

from ftf.rules.base import Rule

if TYPE_CHECKING:
    from ftf.corrector import Corrector


class RuleRegistry:
    """
    Insertion-ordered collection of rules.

    Names are not required to be unique: two rules with the same name both
    fire. Filtering by name (configuration overrides) happens before rules
    are added. The registry is not synchronised, so callers must not add
    rules while a corrector is evaluating.

    Example:
        >>> registry = RuleRegistry()
        >>> registry.add_rule(SimpleRuleBuilder("mkdir_p").replace("mkdir ", "mkdir -p "))
        >>> corrector = registry.into_corrector()
    """

    def __init__(self, rules: Iterable[Rule] | None = None) -> None:
        """
        Initialize the registry.

        Args:
            rules: Optional initial rules, added in order.
        """
        self._rules: list[Rule] = []
        if rules is not None:
            self.add_rules(rules)

    def add_rule(self, rule: Rule) -> None:
        """
        Add a rule at the end of the registry.

        Raises:
            TypeError: If rule is not a Rule instance.
        """
        if not isinstance(rule, Rule):
            raise TypeError(f"Expected a Rule, got {type(rule).__name__}: {rule!r}")
        self._rules.append(rule)
        logger.debug(f"🔧 Registered rule: {rule.name} (priority {rule.priority})")

    def add_rules(self, rules: Iterable[Rule]) -> None:
        """Add several rules, preserving their order."""
        for rule in rules:
            self.add_rule(rule)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def is_empty(self) -> bool:
        """Return True if no rule is registered."""
        return not self._rules

    @property
    def rules(self) -> tuple[Rule, ...]:
        """All rules, in insertion order."""
        return tuple(self._rules)

    def enabled_rules(self) -> list[Rule]:
        """Rules whose `enabled_by_default` is true, in insertion order."""
        return [rule for rule in self._rules if rule.enabled_by_default]

    def into_corrector(self, max_workers: int | None = None) -> Corrector:
        """Wrap this registry in a Corrector."""
        from ftf.corrector import Corrector

        return Corrector(self, max_workers=max_workers)
