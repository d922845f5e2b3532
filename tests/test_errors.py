"""Tests for the error hierarchy."""

import pytest

from macconv.errors import (
    FileSystemError,
    MacconvError,
    NetworkError,
    ParseError,
    ValidationError,
)


class TestErrors:
    """Tests for MacconvError and subclasses."""

    @pytest.mark.parametrize("cls", [ValidationError, NetworkError, FileSystemError])
    def test_subclasses(self, cls):
        err = cls("something failed")
        assert isinstance(err, MacconvError)
        assert str(err) == "something failed"
        assert err.cause is None

    def test_wrapped_cause(self):
        cause = OSError("connection refused")
        err = NetworkError("connect failed", cause)
        assert err.cause is cause
        assert str(err) == "connect failed: connection refused"

    def test_parse_error_fields(self):
        cause = ValueError("bad octet")
        err = ParseError("10.0.0.300/24", "invalid IPv4 address", cause)
        assert err.input == "10.0.0.300/24"
        assert err.reason == "invalid IPv4 address"
        assert err.cause is cause
        assert str(err) == "invalid CIDR '10.0.0.300/24': invalid IPv4 address"
        assert isinstance(err, MacconvError)
