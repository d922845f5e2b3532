"""
CIDR Calculator Module

Derives network, host range, broadcast, masks and host count from
CIDR notation for IPv4 and IPv6.
"""

from macconv.ip.core import (
    CIDRInfo,
    TOO_LARGE_HOST_COUNT,
    compute,
    count_hosts,
    calculate_inverse_mask,
)

__all__ = [
    "CIDRInfo",
    "TOO_LARGE_HOST_COUNT",
    "compute",
    "count_hosts",
    "calculate_inverse_mask",
]
