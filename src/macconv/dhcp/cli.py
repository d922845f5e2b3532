"""
DHCP option 43 CLI command.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from macconv.dhcp.core import encode_option43
from macconv.errors import MacconvError


@click.command()
@click.argument("addresses", nargs=-1, required=True, metavar="IP [IP2]")
@click.pass_context
def dhcp(ctx: click.Context, addresses: tuple[str, ...]):
    """Encode DHCP option 43 for PXE and ACS servers.

    Converts one or two IPv4 addresses into the hex strings used when
    configuring option 43 on a DHCP server.

    \b
    Examples:
        macconv dhcp 192.168.1.1
        macconv dhcp 192.168.1.1 192.168.1.2
    """
    console = Console(emoji=False)

    try:
        option = encode_option43(addresses)
    except MacconvError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        click.echo(ctx.get_help())
        raise SystemExit(1)

    table = Table(title="DHCP Option 43", show_header=False, box=None)
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Servers", ", ".join(option.servers))
    table.add_row("PXE Format", option.pxe)
    table.add_row("ACS Format", option.acs)
    table.add_row("PXE Format (Bytes)", option.pxe_bytes)
    table.add_row("ACS Format (Bytes)", option.acs_bytes)

    console.print(table, highlight=False)
