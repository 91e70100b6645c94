"""JIRA wiki-markup macros that can be appended to an issue description."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Macro(ABC):
    """A block of rich text rendered to JIRA wiki markup."""

    @abstractmethod
    def render(self) -> str:
        """Render the macro to markup."""

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class CodeMacro(Macro):
    """A `{code}` block, optionally titled and highlighted for a language."""

    code: str
    title: str | None = None
    language: str | None = None

    def render(self) -> str:
        params = []
        if self.language:
            params.append(self.language)
        if self.title:
            params.append(f"title={self.title}")
        opening = "{code:" + "|".join(params) + "}" if params else "{code}"
        return f"{opening}{self.code}{{code}}"


@dataclass(frozen=True, slots=True)
class QuoteMacro(Macro):
    """A `{quote}` block."""

    quote: str

    def render(self) -> str:
        return f"{{quote}}{self.quote}{{quote}}"
