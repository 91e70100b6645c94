"""Logging handler that files a JIRA issue for each error record."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from jira_issue_builder.builder import IssueBuilder
from jira_issue_builder.client import IssueTracker, JiraClient
from jira_issue_builder.config import JiraSettings


class JiraIssueHandler(logging.Handler):
    """Create an issue in `project` for every record at or above `level`.

    The summary is the record's message and the description carries the
    formatted record followed by its exception chain. Failures to reach JIRA
    are reported through `Handler.handleError` and never raised into the
    code that logged.

    Records logged while an issue is being created (for instance the
    client's own warning about a failed request) are dropped, so one
    record leads to at most one request.
    """

    def __init__(
        self,
        project: str,
        *,
        components: Sequence[str] = (),
        tracker: IssueTracker | None = None,
        settings: JiraSettings | None = None,
        issue_type: str = "Bug",
        level: int = logging.ERROR,
    ) -> None:
        super().__init__(level)
        self.project = project
        self.components = list(components)
        self._tracker = tracker
        self._owns_tracker = tracker is None
        self._settings = settings
        self._issue_type = issue_type
        self._local = threading.local()

    def build(self, record: logging.LogRecord) -> IssueBuilder:
        """Collect the issue fields for `record` without sending anything."""
        builder = (
            IssueBuilder(settings=self._settings, issue_type=self._issue_type)
            .project(self.project)
            .summary(record.getMessage())
            .description(_origin(record))
        )
        if record.exc_info and record.exc_info[1] is not None:
            builder.description(record.exc_info[1])
        for name in self.components:
            builder.component(name)
        return builder.environment().from_server()

    def emit(self, record: logging.LogRecord) -> None:
        if getattr(self._local, "emitting", False):
            return
        self._local.emitting = True
        try:
            remote_issue = self.build(record).create_remote_issue()
            self._get_tracker().create_issue(remote_issue)
        except Exception:
            self.handleError(record)
        finally:
            self._local.emitting = False

    def close(self) -> None:
        if self._owns_tracker and isinstance(self._tracker, JiraClient):
            self._tracker.close()
            self._tracker = None
        super().close()

    def _get_tracker(self) -> IssueTracker:
        if self._tracker is None:
            self._tracker = JiraClient(self._settings)
        return self._tracker


def _origin(record: logging.LogRecord) -> str:
    return f"{record.levelname} in {record.name} ({record.pathname}:{record.lineno})"
