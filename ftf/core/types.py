"""
ftf Core - Shared value types.
"""

from __future__ import annotations

from dataclasses import dataclass

# Priority assigned to rules that don't declare one (lower = preferred)
DEFAULT_PRIORITY = 1000


@dataclass(frozen=True)
class Command:
    """A failed shell invocation that needs correction."""

    script: str
    output: str = ""
    exit_code: int = 1

    @property
    def script_parts(self) -> list[str]:
        """Script split on whitespace."""
        return self.script.split()

    def __str__(self) -> str:
        return (
            f"Command(script={self.script}, exit_code={self.exit_code}, "
            f"output_len={len(self.output)})"
        )


@dataclass(frozen=True, eq=False)
class CorrectedCommand:
    """
    A proposed fix for a Command.

    Two corrections are equal when their script and side effect match,
    whatever their priority. Ordering only looks at priority, so sorting
    ranks by confidence while equality drives deduplication.
    """

    script: str
    priority: int
    side_effect: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CorrectedCommand):
            return NotImplemented
        return (self.script, self.side_effect) == (other.script, other.side_effect)

    def __hash__(self) -> int:
        return hash((self.script, self.side_effect))

    def __lt__(self, other: CorrectedCommand) -> bool:
        if not isinstance(other, CorrectedCommand):
            return NotImplemented
        return self.priority < other.priority
