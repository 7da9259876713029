"""Option table rows for reStructuredText list-tables.

Each displayable flag becomes one four-cell row (option, type, description,
required) indented so that, after the renderer adds its one-space block
indent, the rows line up with the table header.
"""

from collections.abc import Iterable
from typing import Any

from .models import FlagInfo


def flag_usages(flags: Iterable[FlagInfo]) -> str:
    """Format every non-hidden flag as a list-table row, sorted by name.

    Example:
        >>> print(flag_usages([FlagInfo("name", "n", "string", "Name.", required=True)]), end="")
          * - -n, --name
            - string
            - Name.
            - true
    """
    lines = []
    for flag in sorted(flags, key=lambda f: f.name):
        if flag.hidden:
            continue
        lines.append(_flag_row(flag))
    return "".join(line + "\n" for line in lines)


def _flag_row(flag: FlagInfo) -> str:
    if flag.shorthand:
        row = f"  * - -{flag.shorthand}, --{flag.name}"
    else:
        row = f"  * - --{flag.name}"
    row += "\n    - " + flag.type_name
    row += "\n    - " + _description(flag)
    row += "\n    - " + ("true" if flag.required else "false")
    return row


def _description(flag: FlagInfo) -> str:
    text = " ".join(flag.usage.split())
    if not is_zero_value(flag.default):
        if isinstance(flag.default, str):
            text += f' This value defaults to "{flag.default}".'
        else:
            text += f" This value defaults to {format_default(flag.default)}."
    if flag.deprecated:
        text += f" (DEPRECATED: {flag.deprecated})"
    return text.strip()


def is_zero_value(value: Any) -> bool:
    """Whether a default is the type's zero value and should not be shown."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def format_default(value: Any) -> str:
    if value is True:
        return "true"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(str(item) for item in value) + "]"
    return str(value)


__all__ = ["flag_usages", "format_default", "is_zero_value"]
