"""
Owner-scoped "find in files" filters.

Builds the `filesToInclude` / `filesToExclude` strings a search tool expects
from the patterns of one owner.
"""

from collections.abc import Sequence

import structlog
from pydantic import BaseModel, Field

from src.codeowners.engine import OwnershipEngine
from src.codeowners.globs import render_exclude_globs, render_include_globs

logger = structlog.get_logger()

GLOB_SEPARATOR = ","


class SearchFilters(BaseModel):
    """Include/exclude filters for a search scoped to one owner."""

    owner: str
    query: str = ""
    include_globs: list[str] = Field(default_factory=list)
    exclude_globs: list[str] = Field(default_factory=list)

    @property
    def files_to_include(self) -> str:
        return GLOB_SEPARATOR.join(self.include_globs)

    @property
    def files_to_exclude(self) -> str:
        return GLOB_SEPARATOR.join(self.exclude_globs)

    def as_search_args(self) -> dict[str, str]:
        """Arguments for a find-in-files command."""
        return {
            "query": self.query,
            "filesToInclude": self.files_to_include,
            "filesToExclude": self.files_to_exclude,
        }

    def summary(self) -> str:
        """Human-readable confirmation of the applied filters."""
        lines = [f'Applied "{self.owner}" file filters']
        if self.query:
            lines.append(f'Preserved query: "{self.query}"')
        lines.append(f"Include: {self.files_to_include}")
        if self.exclude_globs:
            lines.append(f"Exclude: {self.files_to_exclude}")
        return "\n".join(lines)


def build_search_filters(
    engine: OwnershipEngine,
    owner: str,
    query: str = "",
    extra_excludes: Sequence[str] = (),
) -> SearchFilters | None:
    """
    Build search filters for all files of an owner.

    Args:
        engine: Ownership engine holding the current rule file
        owner: Owner token or synthetic owner ("unowned", "owned-by-all")
        query: Search query to carry over unchanged
        extra_excludes: Additional exclude globs supplied by the caller,
            appended after the ownership excludes

    Returns:
        SearchFilters, or None when the owner has no files
    """
    patterns = engine.patterns_for_owner(owner)
    include_globs = render_include_globs(patterns.include_patterns)
    if not include_globs:
        logger.info("no_files_for_owner", owner=owner)
        return None

    exclude_globs = render_exclude_globs(patterns.exclude_patterns)
    exclude_globs.extend(glob for glob in extra_excludes if glob)

    return SearchFilters(
        owner=owner,
        query=query,
        include_globs=include_globs,
        exclude_globs=exclude_globs,
    )
