"""
CODEOWNERS pattern matching.

Patterns are classified in a fixed order and the first applicable class
decides the match. Paths must already be workspace-relative and use forward
slashes (see src.codeowners.paths).
"""

from src.core.utils.patterns import has_wildcard, wildcard_match


def is_directory_pattern(pattern: str) -> bool:
    """A trailing slash, or no `*` and no `.`, marks a directory name."""
    return pattern.endswith("/") or ("*" not in pattern and "." not in pattern)


def is_extension_pattern(pattern: str) -> bool:
    return pattern.startswith("*.")


def _matches_directory(path: str, pattern: str) -> bool:
    token = pattern[:-1] if pattern.endswith("/") else pattern

    if token.startswith("/"):
        anchored = token[1:]
        return path == anchored or path.startswith(anchored + "/")

    # Unanchored directory names may appear at any depth
    return path == token or path.startswith(token + "/") or f"/{token}/" in path


def _matches_root_anchored(path: str, pattern: str) -> bool:
    remainder = pattern[1:]
    if has_wildcard(remainder):
        return wildcard_match(path, remainder)
    return path.startswith(remainder)


def matches(path: str, pattern: str) -> bool:
    """
    Check if a normalized file path matches a CODEOWNERS pattern.

    Args:
        path: Workspace-relative path with forward slashes
        pattern: CODEOWNERS pattern (e.g. "*", "docs/", "*.go", "/src/app.ts")

    Returns:
        True if the path matches the pattern
    """
    if pattern == "*":
        return True

    if is_directory_pattern(pattern):
        return _matches_directory(path, pattern)

    if is_extension_pattern(pattern):
        return path.endswith(pattern[1:])

    if pattern.startswith("/"):
        return _matches_root_anchored(path, pattern)

    if has_wildcard(pattern):
        return wildcard_match(path, pattern)

    # Exact path, or a bare file name at any depth
    return path == pattern or path.endswith("/" + pattern)
