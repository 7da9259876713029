"""Resolve ``"package.module:attribute"`` references to Click commands."""

import importlib
import logging

import click

from .exceptions import CommandLoadError

logger = logging.getLogger(__name__)


def load_command(target: str) -> click.Command:
    """Import a module and return the Click command stored in one of its attributes.

    The attribute may be dotted (e.g., "app.cli:main.storage").

    Raises:
        CommandLoadError: If the reference is malformed, the import fails or
            the attribute is not a Click command
    """
    module_path, sep, attr_path = target.partition(":")
    if not sep or not module_path or not attr_path:
        raise CommandLoadError(f"Invalid target '{target}': expected 'package.module:attribute'")

    try:
        obj = importlib.import_module(module_path)
    except ImportError as e:
        raise CommandLoadError(f"Cannot import module '{module_path}': {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise CommandLoadError(f"'{module_path}' has no attribute '{attr_path}'") from e

    if not isinstance(obj, click.Command):
        raise CommandLoadError(f"'{target}' is not a Click command (got {type(obj).__name__})")

    logger.debug("Loaded command %s from %s", obj.name, target)
    return obj


__all__ = ["load_command"]
