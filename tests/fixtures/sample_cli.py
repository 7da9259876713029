"""Small Click application documented by the restdoc tests."""

import click


@click.group()
@click.option("--profile", "-P", default="default", help="Profile to use from the config file.")
@click.option("--debug-trace", hidden=True, is_flag=True, help="Internal tracing.")
def app(profile: str, debug_trace: bool) -> None:
    """Sample application for documentation tests."""


@app.group()
def storage() -> None:
    """Manage storage shares.

    Create, mount and inspect shares attached to the workspace.
    """


@storage.command(name="mount")
@click.argument("share")
@click.option("--read-only", is_flag=True, help="Mount the share read-only.")
@click.option("--retries", type=int, default=3, help="Connection attempts.")
def storage_mount(share: str, read_only: bool, retries: int) -> None:
    """Mount a storage share.

    The share is mounted under /mnt/<share>.

    \b
    Examples:
        # Mount a share read-only
        app storage mount data --read-only
    """


@storage.command(name="debug", hidden=True)
def storage_debug() -> None:
    """Dump internal storage state."""


@app.command(name="old", deprecated=True)
def old_command() -> None:
    """Replaced by 'storage mount'."""


@app.command(name="sub")
@click.option("--name", "-n", required=True, help="Name of the thing.")
@click.option("--tag", multiple=True, help="Tags to attach.")
def sub_command(name: str, tag: tuple[str, ...]) -> None:
    """Sub command"""


sub_command.example = "app sub --name x"


@click.group()
def quiet() -> None:
    """Application without footers."""


@quiet.command(name="run")
def quiet_run() -> None:
    """Run quietly."""


quiet.disable_autogen_tag = True

not_a_command = "just a string"
