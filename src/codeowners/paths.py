"""
Workspace path normalization.

Every matching operation expects workspace-root-relative paths with forward
slashes. These helpers perform that conversion once, at the boundary.
"""

import re
from collections.abc import Sequence

_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:/")


def normalize_path(path: str) -> str:
    """Convert platform separators to forward slashes and drop a leading './'."""
    normalized = path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def is_absolute(path: str) -> bool:
    """True for POSIX absolute paths and Windows drive paths (after normalization)."""
    return path.startswith("/") or bool(_WINDOWS_DRIVE.match(path))


def _upper_drive(path: str) -> str:
    if _WINDOWS_DRIVE.match(path):
        return path[0].upper() + path[1:]
    return path


def _normalize_root(root: str) -> str:
    normalized = _upper_drive(normalize_path(root))
    if normalized != "/":
        normalized = normalized.rstrip("/")
    return normalized


def relative_to_workspace(path: str, roots: Sequence[str]) -> str | None:
    """
    Map a path into the workspace it belongs to.

    Args:
        path: Relative or absolute file path, any separator style
        roots: Absolute workspace root directories

    Returns:
        The path relative to the most specific containing root, the normalized
        path itself when it is already relative, or None when an absolute path
        lies outside every root.
    """
    normalized = normalize_path(path)
    if not is_absolute(normalized):
        return normalized
    normalized = _upper_drive(normalized)

    best: str | None = None
    for root in roots:
        candidate = _normalize_root(root)
        prefix = candidate if candidate.endswith("/") else candidate + "/"
        if normalized == candidate or normalized.startswith(prefix):
            if best is None or len(candidate) > len(best):
                best = candidate

    if best is None:
        return None

    if normalized == best:
        return ""
    prefix = best if best.endswith("/") else best + "/"
    return normalized[len(prefix) :]
