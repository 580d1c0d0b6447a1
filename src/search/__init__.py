"""
Search filters derived from code ownership.
"""

from src.search.filters import SearchFilters, build_search_filters

__all__ = [
    "SearchFilters",
    "build_search_filters",
]
