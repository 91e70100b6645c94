"""Errors raised while building and submitting issues."""

from __future__ import annotations


class JiraError(Exception):
    """Base class for errors raised by this package."""


class IssueValidationError(JiraError, ValueError):
    """Raised when a required issue field has not been set."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required to create an issue")
        self.field = field


class NotSupportedError(JiraError, NotImplementedError):
    """Raised for operations the remote service does not expose.

    This is a permanent limitation; retrying will not help.
    """


class TransportError(JiraError):
    """Raised when the remote service fails to create an issue.

    Carries the HTTP status and the error messages JIRA returned, when there
    was a response at all.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_messages: list[str] | None = None,
        field_errors: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_messages = error_messages or []
        self.field_errors = field_errors or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code is not None:
            parts.append(f"(HTTP {self.status_code})")
        if self.error_messages:
            parts.append("; ".join(self.error_messages))
        if self.field_errors:
            parts.append(
                ", ".join(f"{name}: {error}" for name, error in sorted(self.field_errors.items()))
            )
        return " ".join(parts)
