"""Test configuration and fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from jira_issue_builder.config import JiraSettings, reset_settings

_ENV_VARS = (
    "JIRA_SITE_URL",
    "JIRA_USERNAME",
    "JIRA_PASSWORD",
    "JIRA_MAX_SUMMARY_LENGTH",
    "JIRA_MAX_ENVIRONMENT_LENGTH",
    "JIRA_REQUEST_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the shared settings and any local `.env` out of each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> JiraSettings:
    """Provide explicit test settings."""
    return JiraSettings(
        site_url="https://jira.example.com",
        username="user",
        password="pass",
    )
