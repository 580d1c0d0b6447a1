"""
Workspace configuration.
"""

from dataclasses import dataclass, field

from src.codeowners.loader import RULE_FILE_LOCATIONS


@dataclass
class WorkspaceConfig:
    """Workspace roots and the CODEOWNERS locations probed inside them."""

    roots: list[str]
    rule_file_locations: list[str] = field(default_factory=lambda: list(RULE_FILE_LOCATIONS))
