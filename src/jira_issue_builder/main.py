"""Command line entrypoint: build a JIRA issue and create it (or print it)."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from jira_issue_builder import __version__
from jira_issue_builder.builder import IssueBuilder
from jira_issue_builder.client import JiraClient
from jira_issue_builder.config import JiraSettings
from jira_issue_builder.errors import IssueValidationError, TransportError
from jira_issue_builder.logging import configure_logging
from jira_issue_builder.models import Issue

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jira-issue",
        description="Build and create JIRA issues",
    )
    parser.add_argument("--version", action="version", version=f"jira-issue-builder {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create an issue")
    create.add_argument("--project", required=True, help="Project key, e.g. 'OPS'")
    create.add_argument("--summary", required=True, help="Issue summary")
    create.add_argument(
        "--description",
        action="append",
        default=[],
        help="Description paragraph (repeatable, appended in order)",
    )
    create.add_argument(
        "--component",
        dest="components",
        action="append",
        default=[],
        help="Component name (repeatable)",
    )
    create.add_argument("--issue-type", default="Bug", help="Issue type name (default: Bug)")

    environment = create.add_mutually_exclusive_group()
    environment.add_argument("--environment", default=None, help="Environment text")
    environment.add_argument(
        "--environment-from-server",
        action="store_true",
        help="Describe the current host as the environment",
    )

    create.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the issue fields as JSON instead of creating the issue",
    )
    return parser


def _build(args: argparse.Namespace, settings: JiraSettings) -> IssueBuilder:
    builder = (
        IssueBuilder(settings=settings, issue_type=args.issue_type)
        .project(args.project)
        .summary(args.summary)
    )
    for paragraph in args.description:
        builder.description(paragraph)
    for name in args.components:
        builder.component(name)
    if args.environment_from_server:
        builder.environment().from_server()
    elif args.environment is not None:
        builder.environment(args.environment)
    return builder


def _cmd_create(args: argparse.Namespace, settings: JiraSettings) -> int:
    remote_issue = _build(args, settings).create_remote_issue()

    if args.dry_run:
        print(json.dumps({"fields": remote_issue.to_fields()}, indent=2, ensure_ascii=False))
        return 0

    with JiraClient(settings) as client:
        key = client.create_issue(remote_issue)

    issue = Issue(key, settings)
    print(f"Created issue {issue.key}")
    print(f"URL: {issue.url}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = JiraSettings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        if args.command == "create":
            return _cmd_create(args, settings)
    except IssueValidationError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except TransportError as exc:
        logger.error("Issue creation failed", extra={"error": str(exc)})
        print(str(exc), file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
