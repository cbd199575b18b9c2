"""Narrow the HUD list to the names most relevant to a query."""

from __future__ import annotations

from typing import Iterable, Optional, Set

from ..config import SEARCH_RELATIVE_THRESHOLD
from ..errors import NoResultsError
from .matcher import FuzzyMatcher, Matcher


def filter_names(
    query: str,
    names: Iterable[str],
    matcher: Optional[Matcher] = None,
    threshold: float = SEARCH_RELATIVE_THRESHOLD,
) -> Optional[Set[str]]:
    """Return the names scoring within *threshold* of the best match.

    ``None`` means no filter applies: the query is blank, or nothing scored
    above zero so there is no best match to compare against.  The cutoff is
    relative to the highest score so it adapts to how specific the query is.
    """

    if not query.split():
        return None

    matcher = matcher or FuzzyMatcher()
    results = matcher.match_list(query, names)
    if not results:
        raise NoResultsError("no results")

    highest = max(score for _, score in results)
    if highest <= 0:
        return None
    return {name for name, score in results if score / highest >= threshold}


class SearchFilter:
    """Bundle a matcher with the relative threshold used by the views."""

    def __init__(self, matcher: Optional[Matcher] = None, threshold: float = SEARCH_RELATIVE_THRESHOLD) -> None:
        self.matcher = matcher or FuzzyMatcher()
        self.threshold = threshold

    def filter(self, query: str, names: Iterable[str]) -> Optional[Set[str]]:
        return filter_names(query, names, self.matcher, self.threshold)


__all__ = ["SearchFilter", "filter_names"]
