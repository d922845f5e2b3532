"""
Configuration management for macconv.

Settings come from environment variables, optionally seeded from a
.env file. The resulting AppConfig is built once by the root command
and handed to every subcommand through the click context.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from macconv import __author__, __email__, __version__
from macconv.errors import ValidationError

ENV_LOCATIONS = [
    Path.home() / ".macconv" / ".env",
    Path.home() / ".config" / "macconv" / ".env",
    Path.cwd() / ".env",
]


def load_env_file(locations: list[Path] | None = None) -> Path | None:
    """Load the first .env file found. Returns its path, if any."""
    for env_path in locations or ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValidationError(f"invalid {name}: {value!r}", e) from e


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValidationError(f"invalid {name}: {value!r}", e) from e


@dataclass
class AppConfig:
    """Runtime configuration shared by all commands."""

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # TCP probe
    tcp_timeout: float = 2.0
    tcp_interval: float = 1.0
    tcp_max_attempts: int = 10
    tcp_required_successes: int = 5

    # Version block
    version: str = __version__
    build_date: str = "unknown"
    author: str = __author__
    email: str = __email__

    @classmethod
    def from_env(cls, load_file: bool = True) -> "AppConfig":
        """Load configuration from environment variables.

        Raises:
            ValidationError: if a numeric setting cannot be parsed
        """
        if load_file:
            load_env_file()
        return cls(
            log_level=os.getenv("MACCONV_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("MACCONV_LOG_FILE") or None,
            tcp_timeout=_env_float("MACCONV_TCP_TIMEOUT", 2.0),
            tcp_interval=_env_float("MACCONV_TCP_INTERVAL", 1.0),
            tcp_max_attempts=_env_int("MACCONV_TCP_MAX_ATTEMPTS", 10),
            tcp_required_successes=_env_int("MACCONV_TCP_REQUIRED_SUCCESSES", 5),
            build_date=os.getenv("MACCONV_BUILD_DATE", "unknown"),
        )
