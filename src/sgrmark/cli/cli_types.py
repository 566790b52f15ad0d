# topmark:header:start
#
#   project      : SgrMark
#   file         : cli_types.py
#   file_relpath : src/sgrmark/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types for SgrMark."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar, cast

import click

from sgrmark.core.sgr import ColorMode

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format of the informational commands.

    Members:
      TEXT: Human-friendly text output.
      JSON: A single JSON document (machine-readable, never colored).
    """

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", e.value) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def lookup(self, value: str) -> E | None:
        """Return the member whose value matches ``value`` (case-insensitive)."""
        key: str = value.lower()
        for member in self.enum_cls:
            if cast("str", member.value).lower() == key:
                return member
        return None

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return cast("E | None", value)
        member: E | None = self.lookup(str(value))
        if member is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_SGRMARK_COMPLETE=bash_source sgrmark)"`
        """
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


class ColorModeParam(EnumChoiceParam[ColorMode]):
    """`ColorMode` parameter that also accepts the aliases of `ColorMode.from_name`."""

    def __init__(self) -> None:
        super().__init__(ColorMode)

    def lookup(self, value: str) -> ColorMode | None:
        try:
            return ColorMode.from_name(value)
        except ValueError:
            return None
