# topmark:header:start
#
#   project      : MimeDetect
#   file         : cli_types.py
#   file_relpath : src/mimedetect/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types used by the MimeDetect commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Accept the string value of an Enum member, case-insensitively.

    ``--format JSON`` and ``--format json`` both yield ``OutputFormat.JSON``.
    Enum instances passed programmatically are returned unchanged.

    Args:
        enum_cls (type[E]): Enum whose members carry string values.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted values, in declaration order."""
        return [str(m.value) for m in self.enum_cls]

    def get_metavar(self, param: click.Parameter, *args: object) -> str:
        """Render the choices in help output, e.g. ``[default|json]``."""
        return "[" + "|".join(self.choices) + "]"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the Enum member named by ``value``.

        Raises:
            click.BadParameter: If ``value`` names no member.
        """
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_value.get(str(value).lower())
        if member is None:
            self.fail(
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
        """Complete enum values for ``_MIMEDETECT_COMPLETE=bash_source mimedetect``."""
        from click.shell_completion import CompletionItem

        prefix: str = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.startswith(prefix)]
