from .filter import SearchFilter, filter_names
from .matcher import FuzzyMatcher, Matcher

__all__ = ["FuzzyMatcher", "Matcher", "SearchFilter", "filter_names"]
