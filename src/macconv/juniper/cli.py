"""
Juniper subscriber CLI command.
"""

import click
from rich.console import Console
from rich.markup import escape

from macconv.errors import MacconvError
from macconv.juniper.core import read_subscribers


@click.command()
@click.argument("file_path", metavar="FILE")
@click.pass_context
def juniper(ctx: click.Context, file_path: str):
    """Extract Juniper subscribers from saved command output.

    Prints one tab-separated line per subscriber: IP address, MAC
    address and IPv4 input filter name.

    \b
    Examples:
        macconv juniper subscribers.txt
    """
    console = Console(emoji=False)

    try:
        subscribers = read_subscribers(file_path)
    except MacconvError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        click.echo(ctx.get_help())
        raise SystemExit(1)

    for subscriber in subscribers:
        click.echo(subscriber.as_row())
