"""
Juniper subscriber module.

Extracts subscriber addresses and filters from saved JunOS output.
"""

from macconv.juniper.core import Subscriber, parse_subscribers, read_subscribers

__all__ = ["Subscriber", "parse_subscribers", "read_subscribers"]
