"""Tests for RuleRegistry."""

from __future__ import annotations

import pytest

from ftf.core.types import Command
from ftf.corrector import Corrector
from ftf.rules.builders import SimpleRuleBuilder
from ftf.rules.registry import RuleRegistry


def _rule(name: str, enabled: bool = True):
    return SimpleRuleBuilder(name).enabled_by_default(enabled).replace("a", "b")


class TestRuleRegistry:
    """Tests for RuleRegistry."""

    def test_empty(self):
        """Test a new registry."""
        registry = RuleRegistry()

        assert registry.is_empty()
        assert len(registry) == 0
        assert registry.rules == ()

    def test_insertion_order(self):
        """Test that rules keep insertion order."""
        registry = RuleRegistry()
        for name in ["one", "two", "three"]:
            registry.add_rule(_rule(name))

        assert [rule.name for rule in registry] == ["one", "two", "three"]
        assert [rule.name for rule in registry.rules] == ["one", "two", "three"]
        assert not registry.is_empty()

    def test_initial_rules(self):
        """Test construction from an iterable."""
        registry = RuleRegistry([_rule("one"), _rule("two")])

        assert len(registry) == 2

    def test_duplicate_names_kept(self):
        """Test that rules sharing a name are both registered."""
        registry = RuleRegistry([_rule("same"), _rule("same")])

        assert len(registry) == 2

    def test_rejects_non_rules(self):
        """Test type checking on add."""
        with pytest.raises(TypeError):
            RuleRegistry().add_rule("not a rule")

    def test_enabled_rules(self):
        """Test filtering on enabled_by_default."""
        registry = RuleRegistry([_rule("on"), _rule("off", enabled=False), _rule("on2")])

        assert [rule.name for rule in registry.enabled_rules()] == ["on", "on2"]

    def test_rules_snapshot(self):
        """Test that the rules property can't be used to mutate the registry."""
        registry = RuleRegistry([_rule("one")])

        assert isinstance(registry.rules, tuple)

    def test_into_corrector(self):
        """Test wrapping a registry in a corrector."""
        registry = RuleRegistry([_rule("one")])

        corrector = registry.into_corrector(max_workers=2)

        assert isinstance(corrector, Corrector)
        assert corrector.registry is registry
        assert corrector.max_workers == 2
        assert corrector.get_best_correction(Command("a", "err")).script == "b"
