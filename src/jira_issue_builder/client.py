"""Remote issue tracker collaborators.

`IssueTracker` is the seam the builder submits issues through. `JiraClient`
implements it against the JIRA REST `issue` resource using `requests`; it makes
a single attempt per call and leaves retries to the caller.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any

import requests

from jira_issue_builder.config import JiraSettings, get_settings
from jira_issue_builder.errors import TransportError
from jira_issue_builder.models import RemoteIssue

logger = logging.getLogger(__name__)


class IssueTracker(ABC):
    """The remote service issues are created in."""

    @abstractmethod
    def create_issue(self, remote_issue: RemoteIssue) -> str:
        """Create an issue and return its key.

        Raises:
            TransportError: If the remote service rejects or fails the call.
        """


class JiraClient(IssueTracker):
    """Small wrapper around the JIRA REST API for creating issues."""

    def __init__(
        self,
        settings: JiraSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        settings = settings if settings is not None else get_settings()
        if not settings.site_url:
            raise ValueError("JIRA site URL is required")

        self._settings = settings
        self._base_url = settings.site_url.rstrip("/")
        self._session = session or requests.Session()
        if settings.username:
            self._session.auth = (settings.username, settings.password)
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": "jira-issue-builder",
            }
        )

    @property
    def issue_url(self) -> str:
        return f"{self._base_url}/rest/api/2/issue"

    def create_issue(self, remote_issue: RemoteIssue) -> str:
        payload = {"fields": remote_issue.to_fields()}
        logger.debug("Creating JIRA issue", extra={"project": remote_issue.project})

        try:
            resp = self._session.post(
                self.issue_url, json=payload, timeout=self._settings.request_timeout
            )
            resp.raise_for_status()
        except requests.HTTPError as exc:
            error = _transport_error_from_response(exc.response)
            logger.warning(
                "JIRA rejected issue creation",
                extra={"project": remote_issue.project, "status_code": error.status_code},
            )
            raise error from exc
        except requests.RequestException as exc:
            logger.warning(
                "JIRA request failed",
                extra={"project": remote_issue.project, "error": str(exc)},
            )
            raise TransportError(f"Request to {self.issue_url} failed: {exc}") from exc

        try:
            data: dict[str, Any] = resp.json()
        except ValueError as exc:
            raise TransportError(
                "JIRA returned a response that is not JSON", status_code=resp.status_code
            ) from exc

        key = data.get("key")
        if not isinstance(key, str) or not key:
            raise TransportError(
                "JIRA response did not include an issue key", status_code=resp.status_code
            )

        logger.info("JIRA issue created", extra={"key": key, "project": remote_issue.project})
        return key

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> JiraClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _transport_error_from_response(response: requests.Response | None) -> TransportError:
    if response is None:
        return TransportError("JIRA request failed without a response")

    error_messages: list[str] = []
    field_errors: dict[str, str] = {}
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error_messages = [str(m) for m in body.get("errorMessages") or []]
        field_errors = {str(k): str(v) for k, v in (body.get("errors") or {}).items()}

    return TransportError(
        "JIRA rejected the request",
        status_code=response.status_code,
        error_messages=error_messages,
        field_errors=field_errors,
    )
