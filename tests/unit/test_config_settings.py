"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from user_directory.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_user_api_defaults():
    settings = Settings()
    assert settings.user_api_timeout == 10.0
    assert settings.user_api_date_format in ("MM/DD/YYYY", "YYYY-MM-DD")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("USER_API_BASE_URL", "http://localhost:9000/api/v1")
    monkeypatch.setenv("USER_API_DATE_FORMAT", "YYYY-MM-DD")
    settings = Settings()
    assert settings.user_api_base_url == "http://localhost:9000/api/v1"
    assert settings.user_api_date_format == "YYYY-MM-DD"


def test_rejects_unknown_date_format(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("USER_API_DATE_FORMAT", "DD.MM.YYYY")
    with pytest.raises(ValidationError):
        Settings()
