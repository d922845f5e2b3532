"""
DHCP option 43 module.

Encodes PXE and ACS server addresses for DHCP vendor-specific
option 43.
"""

from macconv.dhcp.core import (
    Option43,
    encode_option43,
    ip_to_hex,
    ip_to_hex_bytes,
    to_pxe_format,
    to_acs_format,
    to_pxe_format_bytes,
    to_acs_format_bytes,
)

__all__ = [
    "Option43",
    "encode_option43",
    "ip_to_hex",
    "ip_to_hex_bytes",
    "to_pxe_format",
    "to_acs_format",
    "to_pxe_format_bytes",
    "to_acs_format_bytes",
]
