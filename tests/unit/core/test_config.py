import os
from unittest.mock import patch

import pytest

from src.codeowners.loader import RULE_FILE_LOCATIONS
from src.core.config.settings import Config


class TestConfig:
    def test_defaults(self) -> None:
        """Test defaults when no environment variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.workspace.roots == [os.getcwd()]
        assert config.workspace.rule_file_locations == list(RULE_FILE_LOCATIONS)
        assert config.logging.level == "INFO"
        assert config.logging.file_path is None
        assert config.cors.headers == ["*"]
        assert config.debug is False
        assert config.validate() is True

    def test_workspace_from_environment(self) -> None:
        """Test JSON list parsing of workspace settings."""
        env = {
            "WORKSPACE_ROOTS": '["/work/a", "/work/b"]',
            "CODEOWNERS_LOCATIONS": '["OWNERS"]',
            "DEBUG": "true",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config()

        assert config.workspace.roots == ["/work/a", "/work/b"]
        assert config.workspace.rule_file_locations == ["OWNERS"]
        assert config.debug is True

    def test_invalid_json_falls_back_to_defaults(self) -> None:
        """Test that malformed JSON does not break configuration."""
        with patch.dict(os.environ, {"CODEOWNERS_LOCATIONS": "not json", "CORS_ORIGINS": '{"a": 1}'}, clear=True):
            config = Config()

        assert config.workspace.rule_file_locations == list(RULE_FILE_LOCATIONS)
        assert "http://localhost:3000" in config.cors.origins

    def test_validate_rejects_bad_settings(self) -> None:
        """Test that validation reports every problem at once."""
        with patch.dict(os.environ, {"WORKSPACE_ROOTS": "[]", "LOG_LEVEL": "LOUD"}, clear=True):
            config = Config()

        with pytest.raises(ValueError, match="WORKSPACE_ROOTS") as exc_info:
            config.validate()
        assert "LOG_LEVEL" in str(exc_info.value)
