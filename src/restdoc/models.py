"""Data models for the restdoc command tree.

This module defines the read-only view of a command hierarchy that the
renderer and tree walker consume. Nodes are normally built from Click
commands by ``restdoc.extractor``, but they can be assembled by hand.

Philosophy:
- Ruthlessly simple dataclasses
- Standard library only
- Parent links are set by ``add_child`` and never reassigned
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FlagInfo:
    """Represents a command option.

    Attributes:
        name: Long option name without dashes (e.g., "name")
        shorthand: Single-letter short name without dash, if any
        type_name: Type shown in the option table ("string", "int", "" for booleans)
        usage: One-line description of the option
        default: Default value, None when unset
        required: Whether the option must be given
        hidden: Hidden options are never documented
        deprecated: Deprecation message, empty when not deprecated
        persistent: Whether descendants inherit the option
    """

    name: str
    shorthand: str | None = None
    type_name: str = "string"
    usage: str = ""
    default: Any = None
    required: bool = False
    hidden: bool = False
    deprecated: str = ""
    persistent: bool = False


class FlagSet:
    """Ordered collection of flags belonging to one scope of a command."""

    def __init__(self, flags: Iterable[FlagInfo] = ()):
        self._flags = list(flags)

    def __iter__(self) -> Iterator[FlagInfo]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def names(self) -> list[str]:
        return [flag.name for flag in self._flags]

    def available(self) -> list[FlagInfo]:
        """Return the flags that appear in documentation."""
        return [flag for flag in self._flags if not flag.hidden]

    def has_available_flags(self) -> bool:
        """Whether at least one flag is displayable."""
        return any(not flag.hidden for flag in self._flags)


@dataclass(eq=False)
class CommandNode:
    """A single command in the documented hierarchy.

    Attributes:
        name: Command name within its parent (e.g., "mount")
        short: Brief description
        long: Complete description, may be empty
        example: Example text block, may be empty
        use_line: Usage line (e.g., "app storage mount NAME [flags]")
        runnable: Whether invoking the command does something by itself
        hidden: Hidden commands are not documented
        deprecated: Deprecation message, empty when not deprecated
        disable_autogen_tag: Suppress the auto-generated footer
        flags: Options declared directly on this command
        children: Subcommands in the order the tree enumerates them
        parent: Parent command, None for the root
    """

    name: str
    short: str = ""
    long: str = ""
    example: str = ""
    use_line: str = ""
    runnable: bool = True
    hidden: bool = False
    deprecated: str = ""
    disable_autogen_tag: bool = False
    flags: list[FlagInfo] = field(default_factory=list)
    children: list["CommandNode"] = field(default_factory=list)
    parent: "CommandNode | None" = field(default=None, repr=False)

    def add_child(self, child: "CommandNode") -> "CommandNode":
        """Attach a subcommand and return it."""
        child.parent = self
        self.children.append(child)
        return child

    @property
    def command_path(self) -> str:
        """Full path of the command, ancestors first, joined by spaces."""
        if self.parent is None:
            return self.name
        return f"{self.parent.command_path} {self.name}"

    def has_parent(self) -> bool:
        return self.parent is not None

    def visit_parents(self, fn: Callable[["CommandNode"], None]) -> None:
        """Call ``fn`` on the parent, then the grandparent, up to the root."""
        node = self.parent
        while node is not None:
            fn(node)
            node = node.parent

    def has_available_subcommands(self) -> bool:
        return any(child.is_eligible() for child in self.children)

    def is_available(self) -> bool:
        """Whether the command should be shown to users at all."""
        if self.hidden or self.deprecated:
            return False
        return self.runnable or self.has_available_subcommands()

    def is_additional_help_topic(self) -> bool:
        """Whether the command only exists to carry help text."""
        if self.runnable or self.hidden or self.deprecated:
            return False
        return all(child.is_additional_help_topic() for child in self.children)

    def is_eligible(self) -> bool:
        """Available and not a help-topic placeholder."""
        return self.is_available() and not self.is_additional_help_topic()

    def find(self, names: Iterable[str]) -> "CommandNode | None":
        """Follow child names from this node; None when a name is missing."""
        node: CommandNode | None = self
        for name in names:
            node = next((child for child in node.children if child.name == name), None)
            if node is None:
                return None
        return node

    def eligible_children(self) -> list["CommandNode"]:
        return [child for child in self.children if child.is_eligible()]

    def non_inherited_flags(self) -> FlagSet:
        return FlagSet(self.flags)

    def inherited_flags(self) -> FlagSet:
        """Persistent flags of the ancestors, nearest ancestor first.

        Names already declared on this command are shadowed, and when two
        ancestors declare the same name the nearest one wins.
        """
        seen = {flag.name for flag in self.flags}
        inherited: list[FlagInfo] = []

        def collect(ancestor: "CommandNode") -> None:
            for flag in ancestor.flags:
                if flag.persistent and flag.name not in seen:
                    seen.add(flag.name)
                    inherited.append(flag)

        self.visit_parents(collect)
        return FlagSet(inherited)


__all__ = [
    "CommandNode",
    "FlagInfo",
    "FlagSet",
]
