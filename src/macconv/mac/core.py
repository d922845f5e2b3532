"""
Core MAC address formatting.
"""

from dataclasses import dataclass

from macconv.logging_config import get_logger
from macconv.validator import validate_mac_address

logger = get_logger(__name__)

SEPARATORS = ("-", ".", ":")


@dataclass(frozen=True)
class MACFormats:
    """A MAC address rendered in the common vendor notations."""
    normalized: str
    colon: str  # 00:11:22:33:44:55 (Linux, macOS)
    dot: str    # 0011.2233.4455 (Cisco)
    dash: str   # 0011-2233-4455 (Huawei, H3C)

    def variants(self) -> list[str]:
        """Lower-case renderings followed by upper-case ones."""
        lower = [self.colon, self.dot, self.dash]
        return lower + [v.upper() for v in lower]


def normalize_mac(value: str) -> str:
    """Strip separators and lower-case a MAC address."""
    for sep in SEPARATORS:
        value = value.replace(sep, "")
    return value.lower()


def convert_mac(mac: str, step: int, separator: str) -> str:
    """Split a normalized MAC into groups of ``step`` characters."""
    return separator.join(mac[i:i + step] for i in range(0, len(mac), step))


def format_mac(value: str) -> MACFormats:
    """Normalize, validate and render a MAC address.

    Raises:
        ValidationError: if the address is not 12 hex digits
    """
    mac = normalize_mac(value)
    validate_mac_address(mac)
    logger.debug("Normalized MAC %s -> %s", value, mac)
    return MACFormats(
        normalized=mac,
        colon=convert_mac(mac, 2, ":"),
        dot=convert_mac(mac, 4, "."),
        dash=convert_mac(mac, 4, "-"),
    )
