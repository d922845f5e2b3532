"""
CIDR calculator CLI command.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from macconv.errors import MacconvError
from macconv.ip.core import compute


@click.command()
@click.argument("cidr")
@click.pass_context
def ip(ctx: click.Context, cidr: str):
    """Calculate subnet information from CIDR notation.

    \b
    Examples:
        macconv ip 192.168.1.0/24
        macconv ip 10.0.0.1/32
        macconv ip 2001:db8::/32
    """
    console = Console(emoji=False)

    try:
        info = compute(cidr)
    except MacconvError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        click.echo(ctx.get_help())
        raise SystemExit(1)

    table = Table(title=f"CIDR Calculator: {escape(cidr)}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Address", f"IPv{info.version} {info.address}")
    table.add_row("Prefix Length", f"/{info.prefix_length}")
    table.add_row("Bit Length", str(info.bit_length))
    table.add_row("", "")
    table.add_row("Network ID", info.network_id)
    table.add_row("First IP", info.first_ip)
    table.add_row("Last IP", info.last_ip)
    if info.broadcast_address:
        table.add_row("Broadcast", info.broadcast_address)
    table.add_row("Subnet Mask", info.subnet_mask)
    table.add_row("Inverse Mask", info.inverse_mask)

    if info.hosts_too_large:
        table.add_row("Total Hosts", "[yellow]too large to count[/yellow]")
    else:
        table.add_row("Total Hosts", f"{info.total_hosts:,}")

    console.print(table)
