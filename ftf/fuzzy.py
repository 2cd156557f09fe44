"""
Fuzzy matching and selection utilities for command corrections.

The scorer aligns a pattern as a subsequence of a choice and rewards
matches on word boundaries, camel-case humps and consecutive runs, in the
spirit of fzf/skim. Scores are unbounded: they rank similarity, they are
not percentages. No alignment (pattern is not a subsequence) means no score.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum, StrEnum

from ftf.core.types import CorrectedCommand

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL123 = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2


class CaseMatching(StrEnum):
    """How letter case is compared."""

    RESPECT = "respect"
    IGNORE = "ignore"
    SMART = "smart"  # Ignore case unless the pattern has an upper-case letter


class _CharClass(IntEnum):
    NON_WORD = 0
    LOWER = 1
    UPPER = 2
    NUMBER = 3


def _char_class(ch: str) -> _CharClass:
    if ch.isupper():
        return _CharClass.UPPER
    if ch.isdigit():
        return _CharClass.NUMBER
    if ch.isalpha():
        return _CharClass.LOWER
    return _CharClass.NON_WORD


def _bonus_for(prev: _CharClass, cur: _CharClass) -> int:
    if prev == _CharClass.NON_WORD and cur != _CharClass.NON_WORD:
        return BONUS_BOUNDARY
    if (prev == _CharClass.LOWER and cur == _CharClass.UPPER) or (
        prev != _CharClass.NUMBER and cur == _CharClass.NUMBER
    ):
        return BONUS_CAMEL123
    if cur == _CharClass.NON_WORD:
        return BONUS_NON_WORD
    return 0


def _fold(text: str) -> str:
    # Lower-case without changing length, indices must line up with the choice
    return "".join(low if len(low := ch.lower()) == 1 else ch for ch in text)


def _is_subsequence(text: str, pattern: str) -> bool:
    it = iter(text)
    return all(ch in it for ch in pattern)


class FuzzyMatcher:
    """
    Subsequence-alignment scorer.

    Stateless once constructed, so one instance can be shared across threads.

    Example:
        >>> matcher = FuzzyMatcher()
        >>> matcher.fuzzy_match("git status", "gst") is not None
        True
        >>> matcher.fuzzy_match("apt update", "git") is None
        True
    """

    def __init__(self, case: CaseMatching = CaseMatching.SMART) -> None:
        self.case = CaseMatching(case)

    def _case_sensitive(self, pattern: str) -> bool:
        if self.case == CaseMatching.RESPECT:
            return True
        if self.case == CaseMatching.IGNORE:
            return False
        return any(ch.isupper() for ch in pattern)

    def fuzzy_match(self, choice: str, pattern: str) -> int | None:
        """Score `pattern` against `choice`, or None if it doesn't align."""
        result = self.fuzzy_indices(choice, pattern)
        return result[0] if result else None

    def fuzzy_indices(self, choice: str, pattern: str) -> tuple[int, list[int]] | None:
        """
        Score `pattern` against `choice` and return the matched positions.

        Args:
            choice: Text searched in
            pattern: Characters to find, in order

        Returns:
            (score, indices into choice), or None if pattern is not a
            subsequence of choice.
        """
        if not pattern:
            return 0, []

        if self._case_sensitive(pattern):
            text, pat = choice, pattern
        else:
            text, pat = _fold(choice), _fold(pattern)

        n, m = len(text), len(pat)
        if m > n or not _is_subsequence(text, pat):
            return None

        bonuses: list[int] = []
        prev_class = _CharClass.NON_WORD
        for ch in choice:
            cur_class = _char_class(ch)
            bonuses.append(_bonus_for(prev_class, cur_class))
            prev_class = cur_class

        # scores[i][j]: best score with pat[i] matched at text[j]
        scores: list[list[int | None]] = [[None] * n for _ in range(m)]
        chunk_bonus: list[list[int]] = [[0] * n for _ in range(m)]
        consecutive: list[list[bool]] = [[False] * n for _ in range(m)]

        for j in range(n):
            if text[j] == pat[0]:
                scores[0][j] = SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER
                chunk_bonus[0][j] = bonuses[j]

        for i in range(1, m):
            prev_row = scores[i - 1]
            row = scores[i]
            best_gapped: int | None = None
            for j in range(n):
                # Best previous match at k <= j - 2, penalised for the gap
                if best_gapped is not None:
                    best_gapped += SCORE_GAP_EXTENSION
                if j >= 2 and prev_row[j - 2] is not None:
                    candidate = prev_row[j - 2] + SCORE_GAP_START
                    if best_gapped is None or candidate > best_gapped:
                        best_gapped = candidate

                if text[j] != pat[i]:
                    continue

                score: int | None = None
                if best_gapped is not None:
                    score = best_gapped + SCORE_MATCH + bonuses[j]
                    chunk_bonus[i][j] = bonuses[j]

                if j >= 1 and prev_row[j - 1] is not None:
                    carried = chunk_bonus[i - 1][j - 1]
                    bonus = max(bonuses[j], BONUS_CONSECUTIVE, carried)
                    run = prev_row[j - 1] + SCORE_MATCH + bonus
                    if score is None or run >= score:
                        score = run
                        chunk_bonus[i][j] = max(carried, bonuses[j])
                        consecutive[i][j] = True

                row[j] = score

        last = scores[m - 1]
        end = None
        for j in range(n):
            if last[j] is not None and (end is None or last[j] > last[end]):
                end = j
        if end is None:
            return None

        indices = [end]
        j = end
        for i in range(m - 1, 0, -1):
            if consecutive[i][j]:
                j -= 1
            else:
                prev_row = scores[i - 1]
                best_k = None
                best_value = None
                for k in range(j - 1):
                    if prev_row[k] is None:
                        continue
                    value = prev_row[k] + SCORE_GAP_START + SCORE_GAP_EXTENSION * (j - k - 2)
                    if best_value is None or value > best_value:
                        best_k, best_value = k, value
                j = best_k
            indices.append(j)
        indices.reverse()

        return last[end], indices

    def find_best_match(
        self, query: str, candidates: Iterable[str]
    ) -> tuple[str, int] | None:
        """
        Find the best fuzzy match for a query among candidates.

        Returns:
            (candidate, score) of the highest scoring candidate, or None.
        """
        best: tuple[str, int] | None = None
        for candidate in candidates:
            score = self.fuzzy_match(candidate, query)
            if score is not None and (best is None or score > best[1]):
                best = (candidate, score)
        return best

    def find_all_matches(
        self, query: str, candidates: Iterable[str], min_score: int
    ) -> list[tuple[str, int]]:
        """Find all candidates scoring at least min_score, best first."""
        matches = []
        for candidate in candidates:
            score = self.fuzzy_match(candidate, query)
            if score is not None and score >= min_score:
                matches.append((candidate, score))
        matches.sort(key=lambda item: item[1], reverse=True)
        return matches


_default_matcher = FuzzyMatcher()


def get_matcher() -> FuzzyMatcher:
    """Get the shared smart-case matcher."""
    return _default_matcher


def fuzzy_find_path(query: str, candidates: Iterable[str]) -> str | None:
    """Find the best match for a path/file among candidates."""
    result = _default_matcher.find_best_match(query, candidates)
    return result[0] if result else None


def filter_by_fuzzy_match(
    query: str, candidates: Iterable[str], min_score: int
) -> list[str]:
    """Filter candidates that fuzzy match a query string, best first."""
    return [
        candidate
        for candidate, _ in _default_matcher.find_all_matches(query, candidates, min_score)
    ]


def select_corrections(
    corrections: Sequence[CorrectedCommand], limit: int | None = None
) -> list[CorrectedCommand]:
    """
    Sort corrections by priority and keep at most `limit` of them.

    Args:
        corrections: Candidate corrections
        limit: Maximum number to keep (None keeps all)

    Returns:
        New list, stably sorted by ascending priority.
    """
    selected = sorted(corrections, key=lambda c: c.priority)
    if limit is not None:
        selected = selected[:limit]
    return selected
