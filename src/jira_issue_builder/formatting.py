"""Render exceptions (with their causes) into issue description text."""

from __future__ import annotations

import traceback

from jira_issue_builder.macros import CodeMacro


def exception_chain(exc: BaseException) -> list[BaseException]:
    """Return `exc` and the exceptions behind it, innermost cause first.

    Follows `__cause__`, then `__context__` unless it was suppressed with
    `raise ... from None`.
    """

    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    chain.reverse()
    return chain


def _format_single(exc: BaseException) -> str:
    text = f"*{type(exc).__name__}*: {exc}"
    if exc.__traceback__ is None:
        return text
    stack = "".join(traceback.format_tb(exc.__traceback__)).rstrip()
    return f"{text}\n{CodeMacro(code=stack, title='Stack trace')}"


def format_exception(exc: BaseException) -> str:
    """Format the exception chain so the root cause is read first."""

    return "\n\n".join(_format_single(item) for item in exception_chain(exc))
