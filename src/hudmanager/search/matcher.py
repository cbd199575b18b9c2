"""Fuzzy scoring of HUD names against a search query."""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import Iterable, List, Protocol, Tuple

Match = Tuple[str, int]


class Matcher(Protocol):
    """Anything that scores candidates against a query.

    Only matching candidates are returned; higher scores are better.
    """

    def match_list(self, query: str, candidates: Iterable[str]) -> List[Match]:
        ...


def _is_subsequence(needle: str, haystack: str) -> bool:
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


class FuzzyMatcher:
    """Case-insensitive subsequence matcher with similarity scoring.

    The query is split on whitespace and every atom must appear in the
    candidate as an ordered subsequence.  Each atom contributes
    ``round(scale * ratio)`` where ``ratio`` is the
    :class:`difflib.SequenceMatcher` similarity, so tighter and more complete
    matches score higher.
    """

    def __init__(self, scale: int = 1000) -> None:
        self._scale = scale

    def score(self, query: str, candidate: str) -> int | None:
        atoms = query.casefold().split()
        if not atoms:
            return None
        folded = candidate.casefold()
        total = 0
        for atom in atoms:
            if not _is_subsequence(atom, folded):
                return None
            ratio = SequenceMatcher(None, atom, folded, autojunk=False).ratio()
            total += round(self._scale * ratio)
        return total

    def match_list(self, query: str, candidates: Iterable[str]) -> List[Match]:
        results: List[Match] = []
        for candidate in candidates:
            score = self.score(query, candidate)
            if score is not None and score > 0:
                results.append((candidate, score))
        results.sort(key=lambda item: (-item[1], item[0]))
        return results


__all__ = ["FuzzyMatcher", "Match", "Matcher"]
