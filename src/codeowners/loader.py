"""
Locating and reading CODEOWNERS files inside workspace roots.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog

logger = structlog.get_logger()

# Probed in this order; the first location found in any root wins
RULE_FILE_LOCATIONS: tuple[str, ...] = (
    ".github/CODEOWNERS",
    "CODEOWNERS",
    "docs/CODEOWNERS",
    ".gitlab/CODEOWNERS",
    ".gitea/CODEOWNERS",
)


@dataclass(frozen=True)
class RuleFile:
    """A located rule file and its decoded text."""

    path: Path
    content: str


def locate_rule_file(
    workspace_roots: Sequence[str | Path],
    locations: Sequence[str] = RULE_FILE_LOCATIONS,
) -> Path | None:
    """
    Find the CODEOWNERS file for a workspace.

    Locations are tried in order, and each location is tried in every root
    before moving on to the next location.

    Args:
        workspace_roots: Workspace root directories
        locations: Candidate paths relative to each root

    Returns:
        Path of the first existing rule file, or None if there is none
    """
    for location in locations:
        for root in workspace_roots:
            candidate = Path(root) / location
            if candidate.is_file():
                return candidate
    return None


def load_rule_file(
    workspace_roots: Sequence[str | Path],
    locations: Sequence[str] = RULE_FILE_LOCATIONS,
) -> RuleFile | None:
    """
    Locate and read the CODEOWNERS file for a workspace.

    Args:
        workspace_roots: Workspace root directories
        locations: Candidate paths relative to each root

    Returns:
        RuleFile instance or None if no readable file was found
    """
    path = locate_rule_file(workspace_roots, locations)
    if path is None:
        logger.warning("codeowners_file_not_found", roots=[str(root) for root in workspace_roots])
        return None

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("codeowners_file_read_failed", path=str(path), error=str(e))
        return None

    logger.info("codeowners_file_loaded", path=str(path))
    return RuleFile(path=path, content=content)
