"""
Core CIDR calculator.

Parses ``address/prefix`` strings and derives the network, usable
host range, broadcast address, masks and host count by bytewise
arithmetic over the packed address.
"""

from dataclasses import dataclass

from netaddr import AddrFormatError, IPAddress, IPNetwork, INET_PTON

from macconv.errors import ParseError
from macconv.logging_config import get_logger

logger = get_logger(__name__)

# Host count reported when 2**host_bits does not fit a signed 64-bit counter
TOO_LARGE_HOST_COUNT = -1

BIT_LENGTHS = {4: 32, 6: 128}


@dataclass(frozen=True)
class CIDRInfo:
    """Derived information about a CIDR block."""
    address: str
    version: int
    prefix_length: int
    bit_length: int
    network_id: str
    first_ip: str
    last_ip: str
    broadcast_address: str  # empty for IPv6
    subnet_mask: str
    inverse_mask: str
    total_hosts: int

    @property
    def hosts_too_large(self) -> bool:
        return self.total_hosts == TOO_LARGE_HOST_COUNT


def _from_bytes(data: bytes, version: int) -> IPAddress:
    return IPAddress(int.from_bytes(data, "big"), version)


def _parse_address(cidr: str, text: str) -> IPAddress:
    # Colons mean IPv6; everything else must be a dotted quad
    version = 6 if ":" in text else 4
    try:
        return IPAddress(text, version, flags=INET_PTON)
    except (AddrFormatError, ValueError, TypeError) as e:
        raise ParseError(cidr, f"invalid IPv{version} address {text!r}", e) from e


def _parse_prefix(cidr: str, text: str, bit_length: int) -> int:
    if not text or not text.isascii() or not text.isdigit():
        raise ParseError(cidr, f"prefix length {text!r} is not a number")
    prefix = int(text)
    if prefix > bit_length:
        raise ParseError(cidr, f"prefix length /{prefix} out of range 0-{bit_length}")
    return prefix


def count_hosts(version: int, prefix: int) -> int:
    """Number of usable hosts in a block of the given family and prefix."""
    host_bits = BIT_LENGTHS[version] - prefix
    if version == 4:
        if prefix == 32:
            return 1
        if prefix == 31:
            # RFC 3021 point-to-point link, nothing reserved
            return 2
        return 2 ** host_bits - 2
    # Sentinel only past 63 host bits, so /65 reports the exact 2**63
    if host_bits > 63:
        return TOO_LARGE_HOST_COUNT
    return 2 ** host_bits


def calculate_inverse_mask(mask: str | IPAddress) -> str:
    """Return the wildcard (bitwise complement) of a subnet mask."""
    if not isinstance(mask, IPAddress):
        version = 6 if ":" in mask else 4
        mask = IPAddress(mask, version, flags=INET_PTON)
    inverse = bytes(~b & 0xFF for b in mask.packed)
    return str(_from_bytes(inverse, mask.version))


def compute(cidr: str) -> CIDRInfo:
    """Calculate CIDR information from ``address/prefix`` notation.

    First and last usable addresses are derived by adjusting only the
    final byte of the network and all-ones addresses. The adjustment
    wraps within that byte instead of carrying, so /31 and /32 blocks
    yield wrapped values rather than an error.

    Raises:
        ParseError: if the string is not a valid CIDR
    """
    if not isinstance(cidr, str):
        raise ParseError(repr(cidr), "expected a string")

    address_text, sep, prefix_text = cidr.partition("/")
    if not sep:
        raise ParseError(cidr, "missing /prefix length")

    ip = _parse_address(cidr, address_text)
    bit_length = BIT_LENGTHS[ip.version]
    prefix = _parse_prefix(cidr, prefix_text, bit_length)

    net = IPNetwork(f"{ip}/{prefix}")
    address = ip.packed
    mask = net.netmask.packed

    network = bytes(a & m for a, m in zip(address, mask))
    all_ones = bytes(n | (~m & 0xFF) for n, m in zip(network, mask))
    inverse = bytes(~m & 0xFF for m in mask)

    first = network[:-1] + bytes([(network[-1] + 1) & 0xFF])
    last = all_ones[:-1] + bytes([(all_ones[-1] - 1) & 0xFF])

    version = ip.version
    info = CIDRInfo(
        address=str(ip),
        version=version,
        prefix_length=prefix,
        bit_length=bit_length,
        network_id=str(_from_bytes(network, version)),
        first_ip=str(_from_bytes(first, version)),
        last_ip=str(_from_bytes(last, version)),
        broadcast_address=str(_from_bytes(all_ones, version)) if version == 4 else "",
        subnet_mask=str(_from_bytes(mask, version)),
        inverse_mask=str(_from_bytes(inverse, version)),
        total_hosts=count_hosts(version, prefix),
    )
    logger.debug("Computed %s -> network %s, hosts %d", cidr, info.network_id, info.total_hosts)
    return info

