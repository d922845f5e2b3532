"""
TCP port reachability probe.

Repeatedly attempts a TCP connection to a host and port with a fixed
timeout and a fixed pause between attempts. The loop is bounded by a
maximum attempt count and ends early once enough consecutive
connections have succeeded.
"""

import socket
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterator

from netaddr import AddrFormatError, IPAddress, INET_PTON

from macconv.errors import NetworkError, ValidationError
from macconv.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 2.0
DEFAULT_INTERVAL = 1.0
DEFAULT_MAX_ATTEMPTS = 10
REQUIRED_CONSECUTIVE_SUCCESSES = 5


@dataclass(frozen=True)
class ProbeAttempt:
    """Outcome of a single connection attempt."""
    number: int
    timestamp: datetime
    host: str
    address: str
    port: int
    is_open: bool

    @property
    def status(self) -> str:
        return "open" if self.is_open else "closed"


def _parse_ip(host: str) -> IPAddress | None:
    version = 6 if ":" in host else 4
    try:
        return IPAddress(host, version, flags=INET_PTON)
    except (AddrFormatError, ValueError, TypeError):
        return None


def is_hostname(host: str) -> bool:
    """True when ``host`` is not an IP literal and needs resolving."""
    return _parse_ip(host) is None


def resolve_host(host: str) -> str:
    """Resolve a hostname to an IP address string.

    IP literals are returned unchanged.

    Raises:
        NetworkError: if the name cannot be resolved
    """
    ip = _parse_ip(host)
    if ip is not None:
        return str(ip)

    try:
        infos = socket.getaddrinfo(host, None, proto=socket.IPPROTO_TCP)
    except (socket.gaierror, UnicodeError) as e:
        raise NetworkError(f"failed to resolve host {host}", e) from e
    if not infos:
        raise NetworkError(f"no addresses found for host {host}")

    address = infos[0][4][0]
    logger.debug("Resolved %s -> %s", host, address)
    return address


def build_target_address(ip: str, port: int) -> str:
    """Format ``ip:port``, bracketing IPv6 addresses."""
    if ":" in ip:
        return f"[{ip}]:{port}"
    return f"{ip}:{port}"


def check_connection(ip: str, port: int, timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Attempt one TCP connection. Returns True if it was accepted."""
    try:
        with socket.create_connection((ip, port), timeout=timeout):
            return True
    except OSError as e:
        logger.debug("Connection to %s failed: %s", build_target_address(ip, port), e)
        return False


def probe(
    host: str,
    port: int,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    required_successes: int = REQUIRED_CONSECUTIVE_SUCCESSES,
    connect: Callable[[str, int, float], bool] = check_connection,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], datetime] | None = None,
    resolver: Callable[[str], str] = resolve_host,
) -> Iterator[ProbeAttempt]:
    """Probe a TCP port, yielding one ProbeAttempt per connection attempt.

    Args:
        host: Hostname or IP address
        port: TCP port
        timeout: Connect timeout per attempt in seconds
        interval: Pause between attempts in seconds
        max_attempts: Upper bound on attempts
        required_successes: Stop after this many consecutive open results
        connect: Connection function ``(ip, port, timeout) -> bool``
        sleep: Pause function, called between attempts only
        clock: Timestamp source, defaults to local time
        resolver: Name resolution function

    Raises:
        ValidationError: if a count is below 1, the timeout is not
            positive or the interval is negative
        NetworkError: if the host cannot be resolved (before any attempt)
    """
    if max_attempts < 1 or required_successes < 1:
        raise ValidationError("attempt and success counts must be at least 1")
    if timeout <= 0:
        raise ValidationError(f"timeout must be positive: {timeout}")
    if interval < 0:
        raise ValidationError(f"interval must not be negative: {interval}")

    address = resolver(host)
    now = clock or (lambda: datetime.now(timezone.utc).astimezone())
    logger.debug(
        "Probing %s (%d attempts max, %d consecutive successes required)",
        build_target_address(address, port), max_attempts, required_successes,
    )

    streak = 0
    for number in range(1, max_attempts + 1):
        timestamp = now()
        is_open = connect(address, port, timeout)
        streak = streak + 1 if is_open else 0

        yield ProbeAttempt(
            number=number,
            timestamp=timestamp,
            host=host,
            address=address,
            port=port,
            is_open=is_open,
        )

        if streak >= required_successes or number == max_attempts:
            break
        sleep(interval)
