"""Tests for MAC address formatting."""

import pytest

from macconv.errors import ValidationError
from macconv.mac.core import MACFormats, convert_mac, format_mac, normalize_mac


class TestNormalizeMAC:
    """Tests for normalize_mac."""

    @pytest.mark.parametrize("value,expected", [
        ("00:11:22:33:44:55", "001122334455"),
        ("00-11-22-33-44-55", "001122334455"),
        ("0011.2233.4455", "001122334455"),
        ("001122334455", "001122334455"),
        ("AA:BB:CC:DD:EE:FF", "aabbccddeeff"),
        ("aa-bb.cc:dd-ee.ff", "aabbccddeeff"),
    ])
    def test_strips_separators_and_lowercases(self, value, expected):
        assert normalize_mac(value) == expected


class TestConvertMAC:
    """Tests for convert_mac."""

    @pytest.mark.parametrize("step,sep,expected", [
        (2, ":", "00:11:22:33:44:55"),
        (4, ".", "0011.2233.4455"),
        (4, "-", "0011-2233-4455"),
        (6, "", "001122334455"),
    ])
    def test_grouping(self, step, sep, expected):
        assert convert_mac("001122334455", step, sep) == expected


class TestFormatMAC:
    """Tests for format_mac."""

    def test_all_variants(self):
        formats = format_mac("AA-BB-CC-DD-EE-FF")
        assert isinstance(formats, MACFormats)
        assert formats.normalized == "aabbccddeeff"
        assert formats.variants() == [
            "aa:bb:cc:dd:ee:ff",
            "aabb.ccdd.eeff",
            "aabb-ccdd-eeff",
            "AA:BB:CC:DD:EE:FF",
            "AABB.CCDD.EEFF",
            "AABB-CCDD-EEFF",
        ]

    def test_cisco_input(self):
        assert format_mac("0011.2233.4455").colon == "00:11:22:33:44:55"

    def test_too_short(self):
        with pytest.raises(ValidationError, match="12 characters"):
            format_mac("00112233445")

    def test_too_long(self):
        with pytest.raises(ValidationError, match="12 characters"):
            format_mac("00:11:22:33:44:55:66")

    def test_invalid_characters(self):
        with pytest.raises(ValidationError, match="invalid characters"):
            format_mac("00:11:22:33:44:GG")

    def test_empty(self):
        with pytest.raises(ValidationError):
            format_mac("")
