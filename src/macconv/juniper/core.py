"""
Juniper subscriber report extraction.

Pulls the IP address, MAC address and IPv4 input filter of each
subscriber out of ``show subscribers detail`` output saved to a file.
Each ``IP Address:`` line starts a new subscriber record. MAC and
filter lines that appear before the first one are kept in a record
with an empty IP address.

Copyright (c) 2024-2025 LuoDan <luodan0709@live.cn>.
All rights reserved.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from macconv.errors import FileSystemError
from macconv.logging_config import get_logger
from macconv.validator import validate_file_path

logger = get_logger(__name__)

IP_MARKER = "IP Address:"
MAC_MARKER = "MAC Address:"
FILTER_MARKER = "IPv4 Input Filter Name:"


@dataclass
class Subscriber:
    """A subscriber entry from a Juniper BNG."""
    ip_address: str
    mac_address: str = ""
    input_filter: str = ""

    def as_row(self) -> str:
        return "\t".join([self.ip_address, self.mac_address, self.input_filter]).rstrip("\t")


def _value_after(line: str, marker: str) -> str | None:
    idx = line.find(marker)
    if idx == -1:
        return None
    return line[idx + len(marker):].strip()


def parse_subscribers(lines: Iterable[str]) -> list[Subscriber]:
    """Parse subscriber records from report lines."""
    subscribers: list[Subscriber] = []
    current: Subscriber | None = None

    for line in lines:
        ip = _value_after(line, IP_MARKER)
        if ip is not None:
            current = Subscriber(ip_address=ip)
            subscribers.append(current)
            continue

        mac = _value_after(line, MAC_MARKER)
        input_filter = None if mac is not None else _value_after(line, FILTER_MARKER)
        if mac is None and input_filter is None:
            continue

        if current is None:
            # fields seen before any IP line still get a row
            current = Subscriber(ip_address="")
            subscribers.append(current)

        if mac is not None:
            current.mac_address = mac
        else:
            current.input_filter = input_filter

    logger.debug("Parsed %d subscribers", len(subscribers))
    return subscribers


def read_subscribers(path: str) -> list[Subscriber]:
    """Read and parse a saved subscriber report.

    Raises:
        ValidationError: if the path is empty or too long
        FileSystemError: if the file cannot be read
    """
    validate_file_path(path)
    try:
        with Path(path).open(encoding="utf-8", errors="replace") as f:
            return parse_subscribers(f)
    except OSError as e:
        raise FileSystemError(f"cannot read {path}", e) from e
