"""
TCP probe module.

Checks whether a TCP port on a host accepts connections.
"""

from macconv.tcp.core import (
    ProbeAttempt,
    probe,
    check_connection,
    resolve_host,
    is_hostname,
    build_target_address,
    REQUIRED_CONSECUTIVE_SUCCESSES,
)

__all__ = [
    "ProbeAttempt",
    "probe",
    "check_connection",
    "resolve_host",
    "is_hostname",
    "build_target_address",
    "REQUIRED_CONSECUTIVE_SUCCESSES",
]
