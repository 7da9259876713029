"""reStructuredText page rendering for a single command.

This module produces the complete page for one ``CommandNode``: anchor and
title, descriptions, usage, option tables, examples, See Also links and the
auto-generated footer.

Philosophy:
- Simple string formatting (no Jinja2)
- Rendering never fails on input text; only writing can
- Cross-reference markup is injected through a link handler
"""

from collections.abc import Callable
from datetime import date
from typing import TextIO

from .flags import flag_usages
from .models import CommandNode, FlagSet

LinkHandler = Callable[[str, str], str]

# English abbreviations keep footers identical across locales
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Fixed width kept for compatibility with existing generated pages
INHERITED_OPTIONS_RULE_LENGTH = 38

_TABLE_HEADER = """.. list-table::
   :header-rows: 1
   :widths: 20 10 60 10

   * - Option
     - Type
     - Description
     - Required
"""


def default_link_handler(name: str, ref: str) -> str:
    """Default reST hyperlink markup pointing at the ``.txt`` page."""
    return f"`{name} <{ref}.txt>`_"


def extension_link_handler(extension: str) -> LinkHandler:
    """Build a link handler for pages written with another extension."""

    def handler(name: str, ref: str) -> str:
        return f"`{name} <{ref}{extension}>`_"

    return handler


def anchor_ref(command_path: str) -> str:
    return command_path.replace(" ", "_")


def indent_string(text: str, prefix: str) -> str:
    """Prefix every line that has content; empty lines stay empty."""
    result = []
    at_line_start = True
    for char in text:
        if at_line_start and char != "\n":
            result.append(prefix)
        result.append(char)
        at_line_start = char == "\n"
    return "".join(result)


def strip_indent(text: str, prefix: str) -> str:
    """Inverse of ``indent_string``."""
    # Only "\n" separates lines, as in indent_string
    return "\n".join(
        line[len(prefix) :] if line.startswith(prefix) else line
        for line in text.split("\n")
    )


def usage_line(node: CommandNode) -> str:
    """The node's usage line, or its path plus ``[flags]`` when none was set."""
    if node.use_line:
        return node.use_line
    if node.non_inherited_flags().has_available_flags() or node.inherited_flags().has_available_flags():
        return f"{node.command_path} [flags]"
    return node.command_path


def format_date(day: date) -> str:
    """Format like ``2-Jan-2006``: no leading zero, short month, full year."""
    return f"{day.day}-{_MONTHS[day.month - 1]}-{day.year:04d}"


def has_see_also(node: CommandNode) -> bool:
    """Whether the page links to a parent or at least one eligible child."""
    if node.has_parent():
        return True
    return any(child.is_eligible() for child in node.children)


def inherit_autogen_tag_setting(node: CommandNode) -> None:
    """Copy a disabled auto-gen tag from any ancestor onto ``node``.

    Every ancestor is visited; the node's setting only ever changes from
    enabled to disabled.
    """

    def copy_setting(ancestor: CommandNode) -> None:
        if ancestor.disable_autogen_tag:
            node.disable_autogen_tag = ancestor.disable_autogen_tag

    node.visit_parents(copy_setting)


def render_page(
    node: CommandNode,
    link_handler: LinkHandler = default_link_handler,
    *,
    today: date | None = None,
    generator: str = "restdoc",
) -> str:
    """Render the complete documentation page for a command.

    Args:
        node: Command to document
        link_handler: Formats a cross-reference from display name and anchor ref
        today: Date used in the footer (defaults to the current date)
        generator: Tool name shown in the footer

    Returns:
        Page content in reStructuredText

    Example:
        >>> page = render_page(CommandNode("app", short="Root app"))
        >>> page.splitlines()[2:5]
        ['===', 'app', '===']
    """
    sections: list[str] = []
    name = node.command_path

    short = node.short
    long = node.long or short
    rule = "=" * len(name)

    sections.append(f".. _{anchor_ref(name)}:\n\n")
    sections.append(f"{rule}\n{name}\n{rule}\n\n")
    sections.append(f"{short}\n")
    sections.append(f"\n{long}\n\n")

    if node.runnable:
        use_line = usage_line(node).replace("[flags]", "[options]")
        sections.append(f".. code-block::\n\n   {use_line}\n\n")

    sections.append(_render_options("Options", node.non_inherited_flags()))
    sections.append(
        _render_options("Inherited Options", node.inherited_flags(), INHERITED_OPTIONS_RULE_LENGTH)
    )

    if node.example:
        sections.append(_heading("Examples"))
        sections.append(f".. code-block::\n\n{indent_string(node.example, ' ')}\n\n")

    if has_see_also(node):
        sections.append(_render_see_also(node, link_handler))

    if not node.disable_autogen_tag:
        stamp = format_date(today or date.today())
        sections.append(f"*Auto generated by {generator} on {stamp}*\n")

    return "".join(sections)


def gen_custom(
    node: CommandNode,
    writer: TextIO,
    link_handler: LinkHandler = default_link_handler,
    **kwargs,
) -> None:
    """Render a command's page and write it to ``writer``.

    Raises:
        OSError: If writing fails
    """
    writer.write(render_page(node, link_handler, **kwargs))


def _heading(title: str, rule_length: int | None = None) -> str:
    return f"{title}\n{'~' * (rule_length or len(title))}\n\n"


def _render_options(title: str, flags: FlagSet, rule_length: int | None = None) -> str:
    if not flags.has_available_flags():
        return ""
    return _heading(title, rule_length) + _TABLE_HEADER + indent_string(flag_usages(flags), " ") + "\n"


def _render_see_also(node: CommandNode, link_handler: LinkHandler) -> str:
    lines = [_heading("See Also")]

    if node.parent is not None:
        parent = node.parent
        parent_path = parent.command_path
        lines.append(f"* {link_handler(parent_path, anchor_ref(parent_path))} \t - {parent.short}\n")
        inherit_autogen_tag_setting(node)

    for child in sorted(node.children, key=lambda c: c.name):
        if not child.is_eligible():
            continue
        child_path = f"{node.command_path} {child.name}"
        lines.append(f"* {link_handler(child_path, anchor_ref(child_path))} \t - {child.short}\n")

    lines.append("\n")
    return "".join(lines)


__all__ = [
    "LinkHandler",
    "anchor_ref",
    "default_link_handler",
    "extension_link_handler",
    "format_date",
    "gen_custom",
    "has_see_also",
    "indent_string",
    "inherit_autogen_tag_setting",
    "render_page",
    "strip_indent",
    "usage_line",
]
