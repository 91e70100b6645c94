"""Unit tests for exception formatting."""

from __future__ import annotations

from jira_issue_builder.formatting import exception_chain, format_exception


def _raise_nested() -> BaseException:
    try:
        try:
            try:
                raise ValueError("inner inner")
            except ValueError as inner_inner:
                raise RuntimeError("inner") from inner_inner
        except RuntimeError as inner:
            raise LookupError("outer") from inner
    except LookupError as outer:
        return outer
    raise AssertionError("unreachable")


def test_exception_chain_is_innermost_first() -> None:
    outer = _raise_nested()

    messages = [str(exc) for exc in exception_chain(outer)]

    assert messages == ["inner inner", "inner", "outer"]


def test_exception_chain_follows_implicit_context() -> None:
    try:
        try:
            raise KeyError("first")
        except KeyError:
            raise TypeError("second")
    except TypeError as exc:
        chain = exception_chain(exc)

    assert [type(exc) for exc in chain] == [KeyError, TypeError]


def test_exception_chain_respects_suppressed_context() -> None:
    try:
        try:
            raise KeyError("hidden")
        except KeyError:
            raise TypeError("visible") from None
    except TypeError as exc:
        chain = exception_chain(exc)

    assert [str(exc) for exc in chain] == ["visible"]


def test_exception_chain_stops_on_cycles() -> None:
    first = ValueError("first")
    second = ValueError("second")
    first.__cause__ = second
    second.__cause__ = first

    assert exception_chain(first) == [second, first]


def test_format_exception_puts_root_cause_first() -> None:
    text = format_exception(_raise_nested())

    assert text.index("inner inner") < text.index("*RuntimeError*: inner")
    assert text.index("*RuntimeError*: inner") < text.index("*LookupError*: outer")
    assert "{code:title=Stack trace}" in text


def test_format_exception_without_traceback() -> None:
    assert format_exception(ValueError("never raised")) == "*ValueError*: never raised"
