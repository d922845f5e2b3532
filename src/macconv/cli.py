"""
macconv command-line entry point.

Builds the AppConfig once, configures logging from it and registers
every subcommand.
"""

from dataclasses import replace

import click
from rich.console import Console
from rich.markup import escape

from macconv.config import AppConfig
from macconv.errors import MacconvError
from macconv.logging_config import setup_logging
from macconv.dhcp.cli import dhcp
from macconv.ip.cli import ip
from macconv.juniper.cli import juniper
from macconv.mac.cli import mac
from macconv.tcp.cli import tcp


def print_version(config: AppConfig) -> None:
    """Print the version block."""
    console = Console(emoji=False)
    console.print(f"macconv version {config.version}", highlight=False)
    console.print(f"Built on: {config.build_date}", highlight=False)
    console.print(f"Author: {config.author}", highlight=False)
    console.print(f"Email: {config.email}", highlight=False)


@click.group(invoke_without_command=True)
@click.option("-v", "--version", "show_version", is_flag=True, help="Show version information")
@click.option("-l", "--log-level", default=None,
              help="Set log level (debug, info, warn, error)  [default: warn]")
@click.pass_context
def cli(ctx: click.Context, show_version: bool, log_level: str | None):
    """Convert and validate network address representations.

    \b
    Examples:
        macconv mac 00:11:22:33:44:55
        macconv ip 192.168.1.1/24
        macconv tcp 192.168.1.1 22
        macconv dhcp 192.168.1.1
    """
    if isinstance(ctx.obj, AppConfig):
        config = ctx.obj
    else:
        try:
            config = AppConfig.from_env()
        except MacconvError as e:
            Console(emoji=False).print(f"[red]Error:[/red] {escape(str(e))}")
            click.echo(ctx.get_help())
            raise SystemExit(1)
    if log_level:
        config = replace(config, log_level=log_level)
    ctx.obj = config

    setup_logging(level=config.log_level, log_file=config.log_file)

    if show_version:
        print_version(config)
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.pass_obj
def version(config: AppConfig):
    """Print version information."""
    print_version(config)


cli.add_command(mac)
cli.add_command(ip)
cli.add_command(dhcp)
cli.add_command(tcp)
cli.add_command(juniper)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
