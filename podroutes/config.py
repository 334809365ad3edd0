"""Runtime settings for the feed service.

Configuration via environment variables:

- PODROUTES_BASE_URL (or NEXT_PUBLIC_BASE_URL): public base URL of this service,
  used for the feed's self link (default: http://localhost:8000)
- PODROUTES_ORIGIN: site to crawl (default: https://www.amroutes.org)
- PODROUTES_MAX_CONCURRENCY: max in-flight outbound requests (default: 8)
- PODROUTES_FETCH_TIMEOUT: per-request timeout in seconds (default: 10)
- PODROUTES_LOG_LEVEL: logging level for the CLI runner (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_ORIGIN = "https://www.amroutes.org"
DEFAULT_MAX_CONCURRENCY = 8
DEFAULT_FETCH_TIMEOUT = 10.0


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    origin: str = DEFAULT_ORIGIN
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    log_level: str = "INFO"

    @property
    def feed_url(self) -> str:
        return f"{self.base_url}/api/feed"

    @classmethod
    def from_env(cls) -> "Settings":
        base_url = os.getenv("PODROUTES_BASE_URL") or os.getenv("NEXT_PUBLIC_BASE_URL") or DEFAULT_BASE_URL
        origin = os.getenv("PODROUTES_ORIGIN") or DEFAULT_ORIGIN
        return cls(
            base_url=base_url.rstrip("/"),
            origin=origin.rstrip("/"),
            max_concurrency=_int_env("PODROUTES_MAX_CONCURRENCY", DEFAULT_MAX_CONCURRENCY),
            fetch_timeout=_float_env("PODROUTES_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
            log_level=(os.getenv("PODROUTES_LOG_LEVEL") or "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
