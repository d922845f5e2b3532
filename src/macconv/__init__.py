"""
macconv - Network Address Conversion Utilities

A small toolkit for network engineers: MAC address reformatting,
CIDR subnet arithmetic, DHCP option 43 encoding, TCP port checks
and Juniper subscriber report extraction.

Copyright (c) 2024-2025 LuoDan <luodan0709@live.cn>.
All rights reserved.
"""

__version__ = "1.2.0"
__author__ = "LuoDan"
__email__ = "luodan0709@live.cn"
__copyright__ = "Copyright (c) 2024-2025 LuoDan"
