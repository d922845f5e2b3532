"""
DHCP option 43 encoding.

Builds the vendor-specific option 43 payload that points PXE clients
or ACS (TR-069) devices at one or two IPv4 servers. Each payload is
rendered twice: as a compact hex string for server configs that take
raw hex, and as a space-separated list of ``0x..`` bytes.

PXE layout::

    80 <len> 00 00 <count> <ip1> [<ip2>]      len = 4 * count + 3

ACS layout::

    01 <len> <ip1> [<ip2>]                    len = 4 * count
"""

from dataclasses import dataclass

from netaddr import IPAddress

from macconv.errors import ValidationError
from macconv.logging_config import get_logger
from macconv.validator import validate_ipv4_address

logger = get_logger(__name__)

PXE_TAG = 0x80
ACS_TAG = 0x01
PXE_PADDING = bytes([0x00, 0x00])
MAX_SERVERS = 2


@dataclass(frozen=True)
class Option43:
    """Encoded option 43 payloads."""
    servers: tuple[str, ...]
    pxe: str
    acs: str
    pxe_bytes: str
    acs_bytes: str


def _as_bytes(data: bytes) -> str:
    return " ".join(f"0x{b:02x}" for b in data)


def ip_to_hex(ip: IPAddress) -> str:
    """Render an IPv4 address as 8 hex digits."""
    return ip.packed.hex()


def ip_to_hex_bytes(ip: IPAddress) -> str:
    """Render an IPv4 address as four ``0x..`` tokens."""
    return _as_bytes(ip.packed)


def pxe_payload(ips: list[IPAddress]) -> bytes:
    body = PXE_PADDING + bytes([len(ips)]) + b"".join(ip.packed for ip in ips)
    return bytes([PXE_TAG, len(body)]) + body


def acs_payload(ips: list[IPAddress]) -> bytes:
    body = b"".join(ip.packed for ip in ips)
    return bytes([ACS_TAG, len(body)]) + body


def to_pxe_format(ips: list[IPAddress]) -> str:
    return pxe_payload(ips).hex()


def to_acs_format(ips: list[IPAddress]) -> str:
    return acs_payload(ips).hex()


def to_pxe_format_bytes(ips: list[IPAddress]) -> str:
    return _as_bytes(pxe_payload(ips))


def to_acs_format_bytes(ips: list[IPAddress]) -> str:
    return _as_bytes(acs_payload(ips))


def parse_servers(addresses: list[str] | tuple[str, ...]) -> list[IPAddress]:
    """Validate one or two IPv4 server addresses.

    Raises:
        ValidationError: on a wrong count or a non-IPv4 address
    """
    if not 1 <= len(addresses) <= MAX_SERVERS:
        raise ValidationError(
            f"expected 1 or {MAX_SERVERS} IP addresses, got {len(addresses)}"
        )
    return [validate_ipv4_address(address) for address in addresses]


def encode_option43(addresses: list[str] | tuple[str, ...]) -> Option43:
    """Encode one or two IPv4 servers as PXE and ACS option 43 values."""
    ips = parse_servers(addresses)
    logger.debug("Encoding option 43 for %s", ", ".join(str(ip) for ip in ips))
    return Option43(
        servers=tuple(str(ip) for ip in ips),
        pxe=to_pxe_format(ips),
        acs=to_acs_format(ips),
        pxe_bytes=to_pxe_format_bytes(ips),
        acs_bytes=to_acs_format_bytes(ips),
    )
