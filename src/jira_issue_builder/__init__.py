"""JIRA issue builder.

Build JIRA issues with a fluent builder and create them through the JIRA REST
API:

- configuration loaded from the environment and `.env`
- summary/environment truncation that keeps the full text in the description
- exception chains and wiki-markup macros rendered into descriptions
"""

__version__ = "0.1.0"

from jira_issue_builder.builder import IssueBuilder
from jira_issue_builder.client import IssueTracker, JiraClient
from jira_issue_builder.config import (
    JiraSettings,
    configure,
    get_settings,
    reset_settings,
    set_max_summary_length,
)
from jira_issue_builder.errors import (
    IssueValidationError,
    JiraError,
    NotSupportedError,
    TransportError,
)
from jira_issue_builder.handler import JiraIssueHandler
from jira_issue_builder.macros import CodeMacro, Macro, QuoteMacro
from jira_issue_builder.models import Issue, RemoteIssue

__all__ = [
    "__version__",
    "CodeMacro",
    "Issue",
    "IssueBuilder",
    "IssueTracker",
    "IssueValidationError",
    "JiraClient",
    "JiraError",
    "JiraIssueHandler",
    "JiraSettings",
    "Macro",
    "NotSupportedError",
    "QuoteMacro",
    "RemoteIssue",
    "TransportError",
    "configure",
    "get_settings",
    "reset_settings",
    "set_max_summary_length",
]
