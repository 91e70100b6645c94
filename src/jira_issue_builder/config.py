"""Configuration for the JIRA issue builder.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

A single shared `JiraSettings` object backs `configure()`,
`set_max_summary_length()` and every component that is not handed an explicit
`settings=` argument. The shared object is not synchronized: configure it once
at startup before issues are built concurrently, or guard it yourself.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JiraSettings(BaseSettings):
    """Connection settings and limits for issue creation.

    Environment variables:
    - JIRA_SITE_URL
    - JIRA_USERNAME
    - JIRA_PASSWORD
    - JIRA_MAX_SUMMARY_LENGTH      (optional)
    - JIRA_MAX_ENVIRONMENT_LENGTH  (optional)
    - JIRA_REQUEST_TIMEOUT         (optional)
    - LOG_LEVEL                    (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `JiraSettings(_env_file=path_to_env)`.
    """

    site_url: str = Field(
        default="",
        validation_alias="JIRA_SITE_URL",
        description="Base URL of the JIRA site, e.g. https://jira.example.com",
    )
    username: str = Field(
        default="",
        validation_alias="JIRA_USERNAME",
        description="User the issues are created as",
    )
    password: str = Field(
        default="",
        validation_alias="JIRA_PASSWORD",
        description="Password or API token for the user",
    )

    max_summary_length: int | None = Field(
        default=None,
        ge=1,
        validation_alias="JIRA_MAX_SUMMARY_LENGTH",
        description="Summaries longer than this are truncated (None = no limit)",
    )
    max_environment_length: int | None = Field(
        default=None,
        ge=1,
        validation_alias="JIRA_MAX_ENVIRONMENT_LENGTH",
        description="Environments longer than this are truncated (None = no limit)",
    )

    request_timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias="JIRA_REQUEST_TIMEOUT",
        description="Timeout in seconds for calls to the JIRA site",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    def browse_url(self, key: str) -> str:
        """URL of the issue page for `key` on the configured site."""

        return f"{self.site_url}/browse/{key}"


_settings: JiraSettings | None = None


def get_settings() -> JiraSettings:
    """Return the shared settings, loading them from the environment on first use."""

    global _settings
    if _settings is None:
        _settings = JiraSettings()
    return _settings


def configure(site_url: str, username: str, password: str) -> JiraSettings:
    """Set the connection fields of the shared settings, overwriting prior values."""

    settings = get_settings()
    settings.site_url = site_url
    settings.username = username
    settings.password = password
    return settings


def set_max_summary_length(length: int | None) -> None:
    """Set the summary truncation threshold. `None` disables truncation.

    Raises:
        pydantic.ValidationError: If `length` is less than 1.
    """

    get_settings().max_summary_length = length


def reset_settings() -> None:
    """Forget the shared settings; the next access reloads them."""

    global _settings
    _settings = None
