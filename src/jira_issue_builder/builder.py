"""Fluent builder for JIRA issues.

Typical use::

    issue = (
        IssueBuilder()
        .project("OPS")
        .summary("Nightly import failed")
        .description(exc)
        .environment().from_server()
        .component("importer")
        .create()
    )

A builder collects the fields of one issue and is owned by one caller.
"""

from __future__ import annotations

import logging
from typing import Any, overload

from jira_issue_builder.client import IssueTracker, JiraClient
from jira_issue_builder.config import JiraSettings, get_settings
from jira_issue_builder.environment import describe_server
from jira_issue_builder.errors import IssueValidationError, NotSupportedError
from jira_issue_builder.formatting import format_exception
from jira_issue_builder.macros import Macro
from jira_issue_builder.models import Issue, RemoteIssue

logger = logging.getLogger(__name__)

DESCRIPTION_SEPARATOR = "\n\n"

_UNSET = object()


class EnvironmentSetter:
    """Returned by `IssueBuilder.environment()` when called without a value."""

    def __init__(self, builder: IssueBuilder) -> None:
        self._builder = builder

    def from_server(self) -> IssueBuilder:
        """Describe the current host as the issue environment."""
        return self._builder.environment(describe_server())


class IssueBuilder:
    """Accumulates issue fields, validates them and creates the issue."""

    def __init__(
        self,
        tracker: IssueTracker | None = None,
        settings: JiraSettings | None = None,
        issue_type: str = "Bug",
    ) -> None:
        self._tracker = tracker
        self._settings = settings
        self._issue_type = issue_type

        self._project = ""
        self._summary = ""
        self._description: list[str] = []
        self._environment: str | None = None
        self._components: list[str] = []

    @property
    def settings(self) -> JiraSettings:
        return self._settings if self._settings is not None else get_settings()

    def project(self, key: str) -> IssueBuilder:
        """Set the key of the project the issue is filed in."""
        self._project = key
        return self

    def summary(self, text: str) -> IssueBuilder:
        """Set the summary. It may be truncated when the issue is created."""
        self._summary = text
        return self

    def description(self, value: str | BaseException | Macro) -> IssueBuilder:
        """Append text, an exception (with its causes) or a macro to the description."""
        if isinstance(value, BaseException):
            text = format_exception(value)
        elif isinstance(value, Macro):
            text = value.render()
        else:
            text = str(value)
        self._description.append(text)
        return self

    @overload
    def environment(self) -> EnvironmentSetter: ...

    @overload
    def environment(self, text: str | None) -> IssueBuilder: ...

    def environment(self, text: Any = _UNSET) -> IssueBuilder | EnvironmentSetter:
        """Set the environment, or with no argument choose where it comes from.

        `environment("text")` sets it, `environment(None)` clears it and
        `environment().from_server()` describes the current host.
        """
        if text is _UNSET:
            return EnvironmentSetter(self)
        self._environment = text
        return self

    def component(self, name: str) -> IssueBuilder:
        """Add a component. Order is kept and duplicates are allowed."""
        self._components.append(name)
        return self

    def create_remote_issue(self) -> RemoteIssue:
        """Validate the fields and return them as a `RemoteIssue`.

        Nothing is sent to JIRA. Fields longer than the configured limits are
        truncated and their full text is appended to the description.

        Raises:
            IssueValidationError: If the project or the summary is missing.
        """
        if not self._project.strip():
            raise IssueValidationError("Project")
        if not self._summary.strip():
            raise IssueValidationError("Summary")

        settings = self.settings
        description = list(self._description)

        summary = _truncate(self._summary, settings.max_summary_length, description, "summary")
        environment = self._environment
        if environment is not None:
            environment = _truncate(
                environment, settings.max_environment_length, description, "environment"
            )

        return RemoteIssue(
            project=self._project,
            summary=summary,
            issue_type=self._issue_type,
            description=DESCRIPTION_SEPARATOR.join(description) if description else None,
            environment=environment,
            components=tuple(self._components),
        )

    def create(self) -> Issue:
        """Create the issue on the remote service.

        Failures from the remote service propagate unchanged.
        """
        remote_issue = self.create_remote_issue()
        if self._tracker is not None:
            key = self._tracker.create_issue(remote_issue)
        else:
            with JiraClient(self.settings) as client:
                key = client.create_issue(remote_issue)
        return Issue(key, self._settings)

    def create_remote_components(self) -> None:
        """Create the collected components in the project.

        The remote service has no operation for this, so the call always fails
        and must not be retried.

        Raises:
            NotSupportedError: Always.
        """
        raise NotSupportedError(
            "Creating components is not supported by the remote issue service"
        )


def _truncate(text: str, limit: int | None, description: list[str], name: str) -> str:
    if limit is None or len(text) <= limit:
        return text
    logger.debug(
        "Truncating issue field", extra={"field": name, "length": len(text), "limit": limit}
    )
    description.append(text)
    return text[:limit]
