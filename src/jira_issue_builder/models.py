"""Issue models: the field bag sent to JIRA and the created issue."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jira_issue_builder.config import JiraSettings, get_settings


class RemoteIssue(BaseModel):
    """Validated issue fields, ready to be sent to the remote service."""

    model_config = ConfigDict(frozen=True)

    project: str
    summary: str
    issue_type: str = Field(default="Bug")
    description: str | None = Field(default=None)
    environment: str | None = Field(default=None)
    components: tuple[str, ...] = Field(default_factory=tuple)

    def to_fields(self) -> dict[str, Any]:
        """Render the `fields` object of a JIRA create-issue request."""

        fields: dict[str, Any] = {
            "project": {"key": self.project},
            "summary": self.summary,
            "issuetype": {"name": self.issue_type},
        }
        if self.description is not None:
            fields["description"] = self.description
        if self.environment is not None:
            fields["environment"] = self.environment
        if self.components:
            fields["components"] = [{"name": name} for name in self.components]
        return fields


class Issue:
    """An issue on the JIRA site, identified by its key (e.g. "PROJ-123").

    The browse URL is derived from the settings each time it is read, so it
    follows later calls to `configure()`.
    """

    def __init__(self, key: str, settings: JiraSettings | None = None) -> None:
        self.key = key
        self._settings = settings

    @property
    def url(self) -> str:
        settings = self._settings if self._settings is not None else get_settings()
        return settings.browse_url(self.key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Issue):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Issue({self.key!r})"

    def __str__(self) -> str:
        return self.key
