"""
Rendering of CODEOWNERS patterns as search-tool globs.

The rendering is deliberately coarser than src.codeowners.matcher: an
unanchored directory such as "docs/" renders as the root-relative glob
"docs/**/*" even though the matcher accepts it at any depth. Downstream
search tools rely on exactly this shape.
"""

from collections.abc import Iterable

from src.codeowners.models import MATCH_EVERYTHING


def render_glob(pattern: str) -> str:
    """
    Convert one CODEOWNERS pattern into a search glob.

    Args:
        pattern: CODEOWNERS pattern

    Returns:
        Glob accepted by a "find in files" include/exclude field
    """
    if pattern == "*":
        return MATCH_EVERYTHING

    if pattern.startswith("/"):
        return pattern[1:]

    if pattern.endswith("/"):
        return pattern + MATCH_EVERYTHING

    if pattern.startswith("*."):
        return "**/" + pattern

    return "**/" + pattern


def render_include_globs(patterns: Iterable[str]) -> list[str]:
    """Render include patterns as search globs."""
    return [render_glob(pattern) for pattern in patterns]


def render_exclude_globs(patterns: Iterable[str]) -> list[str]:
    """Render exclude patterns as search globs."""
    return [render_glob(pattern) for pattern in patterns]
