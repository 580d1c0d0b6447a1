"""
CORS configuration for the UI collaborator calling the query API.
"""

from dataclasses import dataclass, field


@dataclass
class CORSConfig:
    """CORS configuration."""

    headers: list[str]
    origins: list[str]
    methods: list[str] = field(default_factory=lambda: ["GET", "POST"])
    allow_credentials: bool = True
