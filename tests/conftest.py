"""Shared fixtures for macconv tests."""

import socket

import pytest
from click.testing import CliRunner

from macconv.config import AppConfig


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def config():
    """Configuration with fast TCP probe settings and no env lookups."""
    return AppConfig(
        log_level="WARNING",
        tcp_timeout=0.5,
        tcp_interval=0.0,
        tcp_max_attempts=3,
        tcp_required_successes=2,
        build_date="2025-01-01",
    )


@pytest.fixture
def listening_port():
    """A TCP port on 127.0.0.1 that accepts connections."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    server.bind(("127.0.0.1", 0))
    server.listen(16)
    yield server.getsockname()[1]
    server.close()


@pytest.fixture
def closed_port():
    """A TCP port on 127.0.0.1 with nothing listening."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
