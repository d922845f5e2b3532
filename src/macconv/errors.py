"""
Error types for macconv.

Every failure a command can report is a MacconvError subclass, so the
command boundary needs a single except clause.

Copyright (c) 2024-2025 LuoDan <luodan0709@live.cn>.
All rights reserved.
"""


class MacconvError(Exception):
    """Base class for all macconv errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ValidationError(MacconvError):
    """Malformed or out-of-range user input."""


class ParseError(MacconvError):
    """An address or CIDR string could not be parsed."""

    def __init__(self, input: str, reason: str, cause: Exception | None = None):
        super().__init__(f"invalid CIDR {input!r}: {reason}", cause)
        self.input = input
        self.reason = reason

    def __str__(self) -> str:
        # reason already describes the cause
        return self.message


class NetworkError(MacconvError):
    """DNS resolution or connection failure."""


class FileSystemError(MacconvError):
    """A file could not be opened or read."""
