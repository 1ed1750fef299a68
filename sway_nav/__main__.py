"""
sway-nav CLI

Main entry point for navigation commands.

Usage:
    sway-nav focus <left|right|up|down> [--dry-run] [--json]
    sway-nav tree
"""

import json
import logging
import sys
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.text import Text

from . import __version__
from .connection import SwayConnection
from .display import display_tree
from .errors import NavError
from .focus import change_focus
from .models import Direction


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
    )


def report_error(error: NavError, output_json: bool = False) -> NoReturn:
    """Report an error (JSON on stdout, text on stderr) and exit with its exit code."""
    if output_json:
        click.echo(json.dumps({"error": error.to_dict()}, indent=2))
    else:
        err_console = Console(stderr=True)
        err_console.print(Text(f"Error: {error}", style="red"), soft_wrap=True)
        if error.suggestion:
            err_console.print(Text(f"Tip: {error.suggestion}", style="dim"), soft_wrap=True)
    sys.exit(error.exit_code)


@click.group()
@click.option('-s', '--socket', 'socket_path', envvar='SWAYSOCK', metavar='PATH',
              help='Sway IPC socket path (default: $SWAYSOCK)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose logging')
@click.version_option(__version__, prog_name='sway-nav')
@click.pass_context
def cli(ctx: click.Context, socket_path: Optional[str], verbose: bool):
    """Custom navigation commands for sway."""
    setup_logging(verbose)
    ctx.obj = SwayConnection(socket_path=socket_path)


@cli.command()
@click.argument('direction', type=click.Choice([d.value for d in Direction], case_sensitive=False))
@click.option('--dry-run', is_flag=True, help='Print the command batch without running it')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON instead of text')
@click.pass_obj
def focus(connection: SwayConnection, direction: str, dry_run: bool, output_json: bool):
    """
    Change focus in DIRECTION skipping over tabbed and stacked siblings.

    Exit codes:
      0 - Focus changed, or no node is focused
      1 - Sway rejected a command
      2 - Could not talk to sway
    """
    console = Console()

    try:
        outcome = change_focus(connection, Direction(direction.lower()), dry_run=dry_run)
    except NavError as e:
        report_error(e, output_json)

    if output_json:
        click.echo(json.dumps(outcome.to_dict(), indent=2))
    elif outcome.no_focus:
        console.print("no focused node")
    elif dry_run:
        click.echo(outcome.plan.batch)

    sys.exit(0)


@cli.command()
@click.pass_obj
def tree(connection: SwayConnection):
    """Show the layout tree and the focused node."""
    try:
        root = connection.fetch_tree()
    except NavError as e:
        report_error(e)

    display_tree(root, Console())


if __name__ == '__main__':
    cli()
