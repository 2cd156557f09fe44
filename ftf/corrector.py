"""
Rule evaluation and command correction engine.

Rules are evaluated in parallel on a thread pool; results are gathered in
registry order, then sorted and deduplicated, so the ranking never depends
on scheduling.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from ftf.core.types import Command, CorrectedCommand
from ftf.rules.base import Rule
from ftf.rules.registry import RuleRegistry
from ftf.utils.logger import log_prefix


def _evaluate_rule(rule: Rule, command: Command) -> list[CorrectedCommand]:
    """Run one rule against a command; empty when skipped or not matching."""
    # Engine-enforced: output-dependent rules never see empty output
    if rule.requires_output and not command.output:
        return []
    if not rule.matches(command):
        return []

    corrections = rule.get_corrected_commands(command)
    logger.debug(f"{log_prefix('🔍')} Rule '{rule.name}' matched with {len(corrections)} correction(s)")
    return corrections


def rank_corrections(corrections: list[CorrectedCommand]) -> list[CorrectedCommand]:
    """
    Sort by priority and drop duplicates.

    The sort is stable, so equal priorities keep their production order.
    Of several equal corrections, the first after sorting (the best ranked)
    survives.
    """
    ranked: list[CorrectedCommand] = []
    seen: set[CorrectedCommand] = set()
    for correction in sorted(corrections, key=lambda c: c.priority):
        if correction in seen:
            continue
        seen.add(correction)
        ranked.append(correction)
    return ranked


class Corrector:
    """
    The command correction engine.

    Owns a registry and evaluates every rule in it against a command.
    Rules must not be added to the registry during an evaluation.

    Example:
        >>> corrector = Corrector(registry)
        >>> best = corrector.get_best_correction(Command("mkdir a/b", "No such file or directory", 1))
    """

    def __init__(self, registry: RuleRegistry | None = None, max_workers: int | None = None) -> None:
        """
        Initialize the corrector.

        Args:
            registry: Rules to evaluate (empty registry if None)
            max_workers: Thread pool size; 1 evaluates serially, None lets
                the executor pick
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        self.registry = registry if registry is not None else RuleRegistry()
        self.max_workers = max_workers

    @property
    def rules(self) -> list[Rule]:
        """Rules enabled by default."""
        return self.registry.enabled_rules()

    def get_corrections(self, command: Command) -> list[CorrectedCommand]:
        """
        Find all corrections for a command, best first.

        Args:
            command: The failed invocation

        Returns:
            Corrections sorted by ascending priority, without duplicates.
            Empty when no rule applies.
        """
        rules = self.registry.rules
        logger.debug(f"Evaluating {len(rules)} rules against {command}")

        if self.max_workers == 1 or len(rules) <= 1:
            results = [_evaluate_rule(rule, command) for rule in rules]
        else:
            with ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="RuleEval"
            ) as executor:
                # map() yields in submission order whatever the completion order
                results = list(executor.map(lambda rule: _evaluate_rule(rule, command), rules))

        corrections = [correction for result in results for correction in result]
        ranked = rank_corrections(corrections)

        logger.debug(
            f"Found {len(ranked)} correction(s) ({len(corrections) - len(ranked)} duplicate(s) dropped)"
        )
        return ranked

    def get_best_correction(self, command: Command) -> CorrectedCommand | None:
        """Return the highest ranked correction, or None."""
        corrections = self.get_corrections(command)
        return corrections[0] if corrections else None
