"""
Main configuration class that composes all configs.
"""

import json
import os

from dotenv import load_dotenv

from src.codeowners.loader import RULE_FILE_LOCATIONS
from src.core.config.cors_config import CORSConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.workspace_config import WorkspaceConfig

# Load environment variables from a .env file
load_dotenv()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


def _json_list(name: str, default: list[str]) -> list[str]:
    """Read an environment variable holding a JSON list of strings."""
    raw = os.getenv(name)
    if not raw:
        return list(default)

    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        # Fallback to default values if JSON parsing fails
        return list(default)

    if not isinstance(value, list):
        return list(default)
    return [str(item) for item in value]


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.workspace = WorkspaceConfig(
            roots=_json_list("WORKSPACE_ROOTS", [os.getcwd()]),
            rule_file_locations=_json_list("CODEOWNERS_LOCATIONS", list(RULE_FILE_LOCATIONS)),
        )

        self.cors = CORSConfig(
            headers=_json_list("CORS_HEADERS", ["*"]),
            origins=_json_list("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)8s %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.workspace.roots:
            errors.append("WORKSPACE_ROOTS must list at least one directory")

        if not self.workspace.rule_file_locations:
            errors.append("CODEOWNERS_LOCATIONS must list at least one location")

        if self.logging.level.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
