"""Documentation tree generation.

Walks a command tree children-first and writes one page per eligible
command into a directory.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from .models import CommandNode
from .renderer import LinkHandler, default_link_handler, gen_custom

logger = logging.getLogger(__name__)

FilePrepender = Callable[[str], str]

DEFAULT_EXTENSION = ".txt"


def empty_prepender(path: str) -> str:
    """Default file prepender: adds nothing."""
    return ""


def page_filename(node: CommandNode, extension: str = DEFAULT_EXTENSION) -> str:
    """File name for a command's page (e.g., "app-storage-mount.txt")."""
    return node.command_path.replace(" ", "-") + extension


def gen_tree(node: CommandNode, directory: str | Path) -> list[Path]:
    """Generate pages for ``node`` and every eligible descendant.

    Returns:
        Paths of the written files, in write order

    Raises:
        OSError: If any file cannot be created or written
    """
    return gen_tree_custom(node, directory, empty_prepender, default_link_handler)


def gen_tree_custom(
    node: CommandNode,
    directory: str | Path,
    file_prepender: FilePrepender,
    link_handler: LinkHandler,
    extension: str = DEFAULT_EXTENSION,
    **render_options,
) -> list[Path]:
    """Same as ``gen_tree`` with a custom file prepender and link handler.

    Children are written before their parent. The first failure aborts the
    walk; files already written are left in place.

    Args:
        node: Root of the subtree to document (any node of the tree)
        directory: Existing, writable output directory
        file_prepender: Returns text to put at the top of the file, given its path
        link_handler: Formats See Also cross-references
        extension: Page file extension
        **render_options: Passed through to ``render_page`` (today, generator)

    Returns:
        Paths of the written files, in write order

    Raises:
        OSError: If any file cannot be created or written
    """
    written: list[Path] = []
    for child in node.children:
        if not child.is_eligible():
            logger.debug("Skipping %s", child.command_path)
            continue
        written.extend(
            gen_tree_custom(
                child, directory, file_prepender, link_handler, extension, **render_options
            )
        )

    filename = Path(directory) / page_filename(node, extension)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(file_prepender(str(filename)))
        gen_custom(node, f, link_handler, **render_options)

    logger.debug("Wrote %s", filename)
    written.append(filename)
    return written


__all__ = [
    "DEFAULT_EXTENSION",
    "FilePrepender",
    "empty_prepender",
    "gen_tree",
    "gen_tree_custom",
    "page_filename",
]
