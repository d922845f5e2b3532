"""
Input validation helpers shared by the commands.
"""

import re

from netaddr import AddrFormatError, IPAddress, INET_PTON

from macconv.errors import ValidationError

MAC_PATTERN = re.compile(r"^[0-9a-f]{12}$")
MAX_PATH_LENGTH = 4096


def validate_mac_address(mac: str) -> None:
    """Check a normalized (separator-free, lower-case) MAC address."""
    if len(mac) != 12:
        raise ValidationError("MAC address must be 12 characters after normalization")
    if not MAC_PATTERN.match(mac):
        raise ValidationError("MAC address contains invalid characters")


def validate_ip_address(address: str) -> IPAddress:
    """Parse an IPv4 or IPv6 literal."""
    version = 6 if ":" in address else 4
    try:
        return IPAddress(address, version, flags=INET_PTON)
    except (AddrFormatError, ValueError, TypeError) as e:
        raise ValidationError(f"invalid IP address format: {address}", e) from e


def validate_ipv4_address(address: str) -> IPAddress:
    """Parse an IPv4 literal, rejecting IPv6."""
    ip = validate_ip_address(address)
    if ip.version != 4:
        raise ValidationError(f"IPv6 address not supported, expected IPv4: {address}")
    return ip


def validate_port(port: str | int) -> int:
    """Parse a TCP port number in 1..65535."""
    if isinstance(port, str):
        text = port.strip()
        if not text.isascii() or not text.isdigit():
            raise ValidationError(f"port must be a number: {port}")
        port = int(text)
    if port < 1 or port > 65535:
        raise ValidationError(f"port must be between 1 and 65535: {port}")
    return port


def validate_file_path(path: str) -> None:
    """Reject empty and over-long paths before touching the filesystem."""
    if not path:
        raise ValidationError("file path cannot be empty")
    if len(path) > MAX_PATH_LENGTH:
        raise ValidationError("file path too long")
