"""Environment-driven configuration for the Rhyme Finder application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rhyme_finder.utils.observability import get_logger

from .data.datamuse import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

_TRUTHY = {"1", "true", "yes", "on"}

_logger = get_logger(__name__).bind(component="settings")


def _env_flag(env: Mapping[str, str], name: str) -> bool:
    value = env.get(name, "")
    return str(value).strip().lower() in _TRUTHY


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return float(raw)
    except ValueError:
        _logger.warning("Ignoring invalid setting", context={"name": name, "value": raw})
        return default


def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(raw)
    except ValueError:
        _logger.warning("Ignoring invalid setting", context={"name": name, "value": raw})
        return default


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings; see :meth:`from_env` for the variables consulted."""

    api_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_results: Optional[int] = None
    server_name: str = "0.0.0.0"
    server_port: int = 7860
    share: bool = False
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppSettings":
        """Build settings from ``RHYME_FINDER_*`` environment variables."""

        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            api_url=env.get("RHYME_FINDER_API_URL") or defaults.api_url,
            timeout=_env_float(env, "RHYME_FINDER_TIMEOUT", defaults.timeout),
            max_results=_env_int(env, "RHYME_FINDER_MAX_RESULTS", defaults.max_results),
            server_name=env.get("RHYME_FINDER_SERVER_NAME") or defaults.server_name,
            server_port=_env_int(env, "RHYME_FINDER_SERVER_PORT", defaults.server_port)
            or defaults.server_port,
            share=_env_flag(env, "RHYME_FINDER_SHARE"),
            log_level=env.get("RHYME_FINDER_LOG_LEVEL") or None,
        )


__all__ = ["AppSettings"]
