"""Environment-backed settings for the MANGA Plus source."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "https://jumpg-webapi.tokyo-cdn.com/api"
DEFAULT_RESULT_LIMIT = 5
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:128.0) Gecko/20100101 Firefox/128.0"


@dataclass(frozen=True, slots=True)
class SourceSettings:
    """Resolved runtime settings for one source instance."""

    api_url: str = DEFAULT_API_URL
    result_limit: int = DEFAULT_RESULT_LIMIT
    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def request_timeout(self) -> tuple[float, float]:
        """Return the ``(connect, read)`` timeout pair passed to requests."""
        return (self.connect_timeout, self.read_timeout)


def _read_positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    value = int(raw)
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


def _read_positive_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    value = float(raw)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> SourceSettings:
    """
    Build ``SourceSettings`` from environment variables.

    Recognized variables are ``MPLUS_API_URL``, ``MPLUS_RESULT_LIMIT``,
    ``MPLUS_CONNECT_TIMEOUT``, ``MPLUS_READ_TIMEOUT`` and ``MPLUS_USER_AGENT``.
    Missing or empty values fall back to the defaults.
    """
    env = os.environ if environ is None else environ
    return SourceSettings(
        api_url=(env.get("MPLUS_API_URL") or DEFAULT_API_URL).rstrip("/"),
        result_limit=_read_positive_int(env, "MPLUS_RESULT_LIMIT", DEFAULT_RESULT_LIMIT),
        connect_timeout=_read_positive_float(env, "MPLUS_CONNECT_TIMEOUT", 5.0),
        read_timeout=_read_positive_float(env, "MPLUS_READ_TIMEOUT", 30.0),
        user_agent=env.get("MPLUS_USER_AGENT") or DEFAULT_USER_AGENT,
    )
