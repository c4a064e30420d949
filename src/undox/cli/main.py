"""Main CLI entry point for undox."""

import click

from .. import __version__
from ..utils import setup_logging
from .replay import replay_cmd


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--log-format", type=click.Choice(["text", "json"]), default="text", help="Log output format")
@click.pass_context
def main(ctx: click.Context, verbose: bool, log_format: str) -> None:
    """undox CLI.

    Replays action scripts through a reducer wrapped with undo, redo and
    group support.
    """
    setup_logging(level="DEBUG" if verbose else "WARNING", format_type=log_format)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


main.add_command(replay_cmd, name="replay")
