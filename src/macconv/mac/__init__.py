"""
MAC Address Module

Normalizes MAC addresses and renders them in colon, dot and dash
notation.
"""

from macconv.mac.core import MACFormats, normalize_mac, convert_mac, format_mac

__all__ = ["MACFormats", "normalize_mac", "convert_mac", "format_mac"]
