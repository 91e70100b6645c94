"""Unit tests for the issue field bag and the Issue value object."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jira_issue_builder.config import JiraSettings, configure
from jira_issue_builder.models import Issue, RemoteIssue


def test_issue_has_correct_url() -> None:
    issue = Issue("TST-123")
    jira_url = "http://the-jira-site.com"

    configure(jira_url, "user", "pass")

    assert issue.url == jira_url + "/browse/" + issue.key


def test_issue_url_follows_later_configuration() -> None:
    issue = Issue("TST-123")

    configure("http://first.example.com", "user", "pass")
    assert issue.url == "http://first.example.com/browse/TST-123"

    configure("http://second.example.com", "user", "pass")
    assert issue.url == "http://second.example.com/browse/TST-123"


def test_issue_url_uses_explicit_settings(settings: JiraSettings) -> None:
    configure("http://shared.example.com", "user", "pass")

    issue = Issue("OPS-7", settings)

    assert issue.url == "https://jira.example.com/browse/OPS-7"


def test_issue_key_is_not_validated() -> None:
    assert Issue("not a key").key == "not a key"


def test_issues_compare_by_key() -> None:
    assert Issue("TST-1") == Issue("TST-1")
    assert Issue("TST-1") != Issue("TST-2")
    assert len({Issue("TST-1"), Issue("TST-1")}) == 1


def test_remote_issue_to_fields() -> None:
    remote_issue = RemoteIssue(
        project="TST",
        summary="Summary",
        description="Description",
        environment="Environment",
        components=("api", "api", "db"),
    )

    assert remote_issue.to_fields() == {
        "project": {"key": "TST"},
        "summary": "Summary",
        "issuetype": {"name": "Bug"},
        "description": "Description",
        "environment": "Environment",
        "components": [{"name": "api"}, {"name": "api"}, {"name": "db"}],
    }


def test_remote_issue_to_fields_omits_unset_fields() -> None:
    fields = RemoteIssue(project="TST", summary="Summary", issue_type="Task").to_fields()

    assert fields == {
        "project": {"key": "TST"},
        "summary": "Summary",
        "issuetype": {"name": "Task"},
    }


def test_remote_issue_is_immutable() -> None:
    remote_issue = RemoteIssue(project="TST", summary="Summary")

    with pytest.raises(ValidationError):
        remote_issue.summary = "changed"  # type: ignore[misc]


def test_issue_url_is_site_url_plus_browse_path() -> None:
    configure("http://x.example.com/", "user", "pass")

    assert Issue("TST-123").url == "http://x.example.com/" + "/browse/TST-123"
