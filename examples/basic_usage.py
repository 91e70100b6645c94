#!/usr/bin/env python3
"""Programmatic issue creation example.

This demonstrates using the builder directly:

* load settings from `.env`
* file an issue for a failure, with the exception chain in the description
* print the browse URL of the created issue

The project key is passed as an argument (not read from `.env`).
"""

from __future__ import annotations

import argparse
from typing import Sequence

from jira_issue_builder import CodeMacro, IssueBuilder, JiraSettings, TransportError
from jira_issue_builder.logging import configure_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a JIRA issue (programmatic example).")
    parser.add_argument("--project", required=True, help='Target project key, e.g. "OPS"')
    parser.add_argument(
        "--components",
        default="",
        help='Comma-separated components, e.g. "api,worker" (optional)',
    )
    return parser.parse_args(argv)


def _failing_job() -> None:
    try:
        int("not a number")
    except ValueError as exc:
        raise RuntimeError("Nightly import failed while parsing row 17") from exc


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    components = [name.strip() for name in args.components.split(",") if name.strip()]

    settings = JiraSettings()
    configure_logging(settings.log_level)

    builder = IssueBuilder(settings=settings).project(args.project)
    for name in components:
        builder.component(name)

    try:
        _failing_job()
    except RuntimeError as exc:
        builder.summary(str(exc)).description(exc)

    builder.description(CodeMacro(code="python -m importer --date today", title="Command"))

    try:
        issue = builder.environment().from_server().create()
    except TransportError as exc:
        print(str(exc))
        return 1

    print(f"Created issue {issue.key}")
    print(f"URL: {issue.url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
