"""
MAC address CLI command.
"""

import click
from rich.console import Console
from rich.markup import escape

from macconv.errors import MacconvError
from macconv.mac.core import format_mac


@click.command()
@click.argument("address")
@click.pass_context
def mac(ctx: click.Context, address: str):
    """Convert a MAC address between vendor notations.

    Accepts any mix of ':', '-' and '.' separators.

    \b
    Examples:
        macconv mac 00:11:22:33:44:55
        macconv mac 0011.2233.4455
        macconv mac AA-BB-CC-DD-EE-FF
    """
    console = Console(emoji=False)

    try:
        formats = format_mac(address)
    except MacconvError as e:
        console.print(f"[red]Error:[/red] invalid mac address {escape(address)}: {escape(str(e))}")
        click.echo(ctx.get_help())
        raise SystemExit(1)

    for variant in formats.variants():
        click.echo(variant)
