"""Command-line interface for restdoc.

Commands:
    generate    Write one page per command into a directory
    show        Print the page of a single command
"""

import logging
from pathlib import Path

import click
from rich.console import Console

from restdoc import __version__
from restdoc.config import DocConfig, load_config
from restdoc.example_manager import ExampleManager
from restdoc.exceptions import RestDocError
from restdoc.extractor import extract_tree
from restdoc.loader import load_command
from restdoc.models import CommandNode
from restdoc.renderer import default_link_handler, extension_link_handler, render_page
from restdoc.walker import DEFAULT_EXTENSION, gen_tree_custom

logger = logging.getLogger(__name__)
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build_tree(config: DocConfig) -> CommandNode:
    if not config.target:
        raise click.UsageError("No target given and none configured (expected 'package.module:attribute')")
    command = load_command(config.target)
    examples = ExampleManager(config.examples_dir) if config.examples_dir else None
    return extract_tree(
        command,
        prog_name=config.prog_name,
        examples=examples,
        disable_autogen_tag=config.disable_autogen_tag,
    )


def _link_handler(config: DocConfig):
    if config.extension == DEFAULT_EXTENSION:
        return default_link_handler
    return extension_link_handler(config.extension)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Config file (default: restdoc.toml or [tool.restdoc] in pyproject.toml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Generate reStructuredText reference pages for a Click application.

    \b
    Examples:
        restdoc generate myapp.cli:main docs/command
        restdoc show myapp.cli:main storage mount
    """
    _configure_logging(verbose)
    try:
        ctx.obj = load_config(config_path)
    except RestDocError as e:
        raise click.ClickException(str(e)) from e


@main.command(name="generate")
@click.argument("target", required=False)
@click.argument("output_dir", required=False, type=click.Path(file_okay=False))
@click.option("--prog-name", help="Root command name as users type it")
@click.option("--extension", help="Page file extension (default: .txt)")
@click.option(
    "--examples-dir",
    type=click.Path(file_okay=False),
    help="Directory of <command-path>.yaml example files",
)
@click.option("--prepend", help="Text to put at the top of every page; supports {path} and {name}")
@click.option("--no-autogen-tag", is_flag=True, help="Omit the 'Auto generated' footer")
@click.pass_obj
def generate_command(
    config: DocConfig,
    target: str | None,
    output_dir: str | None,
    prog_name: str | None,
    extension: str | None,
    examples_dir: str | None,
    prepend: str | None,
    no_autogen_tag: bool,
) -> None:
    """Write one page per command into OUTPUT_DIR.

    TARGET is the root command as 'package.module:attribute'. Both
    arguments fall back to the configuration file.
    """
    if extension and not extension.startswith("."):
        extension = "." + extension
    config = config.merged(
        target=target,
        output_dir=output_dir,
        prog_name=prog_name,
        extension=extension,
        examples_dir=examples_dir,
        prepend=prepend,
        disable_autogen_tag=no_autogen_tag or None,
    )
    try:
        root = _build_tree(config)
        if not config.output_dir:
            raise click.UsageError("No output directory given and none configured")
        out = Path(config.output_dir)
        out.mkdir(parents=True, exist_ok=True)
        written = gen_tree_custom(
            root,
            out,
            config.render_prepend,
            _link_handler(config),
            config.extension,
            generator=config.generator,
        )
    except (RestDocError, OSError) as e:
        raise click.ClickException(str(e)) from e

    console.print(
        f"[green]Generated {len(written)} page(s)[/green] for [bold]{root.command_path}[/bold] in {out}"
    )
    for path in written:
        logger.debug("  %s", path)


@main.command(name="show")
@click.argument("target", required=False)
@click.argument("command_names", nargs=-1)
@click.option("--prog-name", help="Root command name as users type it")
@click.pass_obj
def show_command(
    config: DocConfig, target: str | None, command_names: tuple[str, ...], prog_name: str | None
) -> None:
    """Print the page of one command to stdout.

    \b
    Examples:
        restdoc show myapp.cli:main
        restdoc show myapp.cli:main storage mount
    """
    config = config.merged(target=target, prog_name=prog_name)
    try:
        root = _build_tree(config)
    except RestDocError as e:
        raise click.ClickException(str(e)) from e

    node = root.find(command_names)
    if node is None:
        raise click.ClickException(f"No such command: {root.command_path} {' '.join(command_names)}")

    click.echo(render_page(node, _link_handler(config), generator=config.generator), nl=False)


if __name__ == "__main__":
    main()
