"""
TCP probe CLI command.
"""

import click
from rich.console import Console
from rich.markup import escape

from macconv.config import AppConfig
from macconv.errors import MacconvError
from macconv.tcp.core import build_target_address, probe
from macconv.validator import validate_port


@click.command()
@click.argument("host")
@click.argument("port")
@click.option("-t", "--timeout", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Connect timeout per attempt in seconds")
@click.option("-i", "--interval", type=click.FloatRange(min=0), default=None,
              help="Pause between attempts in seconds")
@click.option("-n", "--attempts", type=click.IntRange(min=1), default=None, help="Maximum number of attempts")
@click.option("-s", "--successes", type=click.IntRange(min=1), default=None,
              help="Stop after this many consecutive open results")
@click.pass_context
def tcp(
    ctx: click.Context,
    host: str,
    port: str,
    timeout: float | None,
    interval: float | None,
    attempts: int | None,
    successes: int | None,
):
    """Check whether a TCP port on a host is open.

    Connects repeatedly, printing one line per attempt, until the
    port has answered several times in a row or the attempt budget is
    used up. Exits non-zero if the port never answered.

    \b
    Examples:
        macconv tcp 192.168.1.1 22
        macconv tcp example.com 443 -n 3
        macconv tcp ::1 8080 -t 0.5 -i 0
    """
    console = Console(emoji=False)
    config: AppConfig = ctx.obj or AppConfig()

    opened = 0
    try:
        port_number = validate_port(port)
        attempts_iter = probe(
            host,
            port_number,
            timeout=timeout if timeout is not None else config.tcp_timeout,
            interval=interval if interval is not None else config.tcp_interval,
            max_attempts=attempts or config.tcp_max_attempts,
            required_successes=successes or config.tcp_required_successes,
        )
        for attempt in attempts_iter:
            color = "green" if attempt.is_open else "red"
            console.print(
                f"{attempt.timestamp.isoformat(timespec='seconds')} "
                f"Port {attempt.port} on {escape(attempt.host)} is [{color}]{attempt.status}[/{color}]",
                highlight=False,
            )
            opened += attempt.is_open
    except MacconvError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        click.echo(ctx.get_help())
        raise SystemExit(1)

    target = build_target_address(attempt.address, attempt.port)
    console.print(
        f"[dim]{escape(target)}: {opened}/{attempt.number} attempts open[/dim]",
        highlight=False,
    )
    if not opened:
        raise SystemExit(1)
