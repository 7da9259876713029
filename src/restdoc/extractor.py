"""Command tree extraction from Click commands.

This module inspects a Click command hierarchy at runtime and builds the
``CommandNode`` tree the renderer consumes. A chain of ``click.Context``
objects is created alongside the walk so that command paths and the help
option match what the application itself would show.

Conventions read from Click:
- Group options are persistent: every descendant page lists them under
  "Inherited Options". The help option is never inherited.
- A group is runnable only with ``invoke_without_command=True``.
- Example text comes from an ``Examples:`` section at the end of the help
  text, a command attribute ``example``, or a YAML example file.
- A command attribute ``disable_autogen_tag = True`` suppresses the footer.
"""

import inspect
import logging
import os
import textwrap

import click

from .example_manager import ExampleManager
from .models import CommandNode, FlagInfo

logger = logging.getLogger(__name__)

SHORT_HELP_LIMIT = 300

_EXAMPLE_MARKERS = ("examples:", "example:")


def extract_tree(
    command: click.Command,
    prog_name: str | None = None,
    examples: ExampleManager | None = None,
    disable_autogen_tag: bool = False,
) -> CommandNode:
    """Build a ``CommandNode`` tree from a Click command or group.

    Args:
        command: Root Click command
        prog_name: Name of the root command as users type it (defaults to command.name)
        examples: Optional YAML example overlay
        disable_autogen_tag: Suppress the footer on the root and, through
            the See Also propagation, on every descendant

    Returns:
        Root node of the extracted tree

    Example:
        >>> @click.group()
        ... def app():
        ...     '''Root app'''
        >>> extract_tree(app).command_path
        'app'
    """
    name = prog_name or command.name or "cli"
    ctx = click.Context(command, info_name=name)
    root = _extract_node(command, ctx, name, None, examples)
    if disable_autogen_tag:
        root.disable_autogen_tag = True
    return root


def _extract_node(
    command: click.Command,
    ctx: click.Context,
    name: str,
    parent: CommandNode | None,
    examples: ExampleManager | None,
) -> CommandNode:
    description, help_example = split_examples(command.help or "")
    is_group = isinstance(command, click.Group)

    node = CommandNode(
        name=name,
        short=_short_help(command),
        long=description,
        runnable=command.invoke_without_command if is_group else command.callback is not None,
        hidden=bool(command.hidden),
        deprecated=_deprecation_message(command),
        disable_autogen_tag=bool(getattr(command, "disable_autogen_tag", False)),
        flags=_extract_flags(command, ctx, persistent=is_group),
    )
    if parent is not None:
        parent.add_child(node)

    # Inherited flags are only known once the node is attached
    node.use_line = _use_line(node, command, ctx)
    node.example = _example_text(node, command, help_example, examples)

    if is_group:
        for sub_name in command.list_commands(ctx):
            sub = command.get_command(ctx, sub_name)
            if sub is None:
                logger.debug("Command %s listed %r but did not return it", name, sub_name)
                continue
            sub_ctx = click.Context(sub, parent=ctx, info_name=sub_name)
            _extract_node(sub, sub_ctx, sub_name, node, examples)

    return node


def split_examples(help_text: str) -> tuple[str, str]:
    """Split help text into description and a trailing ``Examples:`` section.

    The text is cleaned like a docstring, Click's ``\\b`` no-rewrap markers
    are dropped from both parts and the example block is dedented.

    Example:
        >>> split_examples("Mount storage.\\n\\n\\b\\nExamples:\\n    app mount data")
        ('Mount storage.', 'app mount data')
    """
    help_text = inspect.cleandoc(help_text).partition("\f")[0]
    lines = [line for line in help_text.splitlines() if line.strip() != "\b"]
    for index, line in enumerate(lines):
        if line.strip().lower() in _EXAMPLE_MARKERS:
            description = "\n".join(lines[:index]).strip()
            example = textwrap.dedent("\n".join(lines[index + 1 :])).strip("\n")
            return description, example.rstrip()
    return "\n".join(lines).strip(), ""


def _short_help(command: click.Command) -> str:
    if command.short_help:
        return command.short_help
    return command.get_short_help_str(limit=SHORT_HELP_LIMIT)


def _deprecation_message(obj: object) -> str:
    deprecated = getattr(obj, "deprecated", False)
    if isinstance(deprecated, str):
        return deprecated
    return "deprecated" if deprecated else ""


def _example_text(
    node: CommandNode,
    command: click.Command,
    help_example: str,
    examples: ExampleManager | None,
) -> str:
    if examples is not None:
        text = examples.load_example_text(node.command_path)
        if text:
            return text
    attribute = getattr(command, "example", None)
    if isinstance(attribute, str) and attribute.strip():
        return textwrap.dedent(attribute).strip("\n")
    return help_example


def _use_line(node: CommandNode, command: click.Command, ctx: click.Context) -> str:
    parts = [node.command_path]
    for param in command.get_params(ctx):
        if isinstance(param, click.Argument):
            parts.extend(param.get_usage_pieces(ctx))
    if node.non_inherited_flags().has_available_flags() or node.inherited_flags().has_available_flags():
        parts.append("[flags]")
    return " ".join(parts)


def _extract_flags(command: click.Command, ctx: click.Context, persistent: bool) -> list[FlagInfo]:
    help_option = command.get_help_option(ctx)
    help_opts = list(help_option.opts) if help_option is not None else []

    flags = []
    for param in command.get_params(ctx):
        if not isinstance(param, click.Option):
            continue
        is_help = bool(help_opts) and list(param.opts) == help_opts
        flags.append(option_to_flag(param, persistent=persistent and not is_help))
    return flags


def option_to_flag(option: click.Option, persistent: bool = False) -> FlagInfo:
    """Convert a Click option to a ``FlagInfo``."""
    long_names = [opt[2:] for opt in option.opts if opt.startswith("--")]
    short_names = [opt[1:] for opt in option.opts if len(opt) == 2 and opt.startswith("-")]
    name = long_names[0] if long_names else (option.name or "").replace("_", "-")

    return FlagInfo(
        name=name,
        shorthand=short_names[0] if short_names else None,
        type_name=_type_name(option),
        usage=option.help or "",
        default=_default_value(option),
        required=option.required,
        hidden=option.hidden,
        deprecated=_deprecation_message(option),
        persistent=persistent,
    )


def _type_name(option: click.Option) -> str:
    if option.count:
        return "count"
    if option.is_flag or isinstance(option.type, click.types.BoolParamType):
        return ""

    if isinstance(option.type, click.types.IntParamType):
        base = "int"
    elif isinstance(option.type, click.types.FloatParamType):
        base = "float"
    else:
        base = "string"

    if option.multiple or option.nargs != 1:
        return base + "s"
    return base


def _default_value(option: click.Option):
    value = option.default
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(value)
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    # Callables and Click's internal sentinels are not documented
    return None


__all__ = ["extract_tree", "option_to_flag", "split_examples"]
