"""Environment-driven settings for scribe's runtime services."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "SCRIBE_"
TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_LOGGER_NAME = "scribe"
DEFAULT_LEVEL = "INFO"
DEFAULT_BUFFER_SIZE = 2048


def _lookup(environ: Mapping[str, str], name: str) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}")


def _flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _lookup(environ, name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Logger configuration resolved from ``SCRIBE_*`` environment variables."""

    logger_name: str = DEFAULT_LOGGER_NAME
    level: str = DEFAULT_LEVEL
    log_file: str = ""
    json_format: bool = False
    console: bool = True
    colored: bool = True
    buffered: bool = False
    buffer_size: int = DEFAULT_BUFFER_SIZE

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        env = os.environ if environ is None else environ
        size = _lookup(env, "LOG_BUFFER_SIZE")
        return cls(
            logger_name=_lookup(env, "LOGGER") or DEFAULT_LOGGER_NAME,
            level=(_lookup(env, "LOG_LEVEL") or DEFAULT_LEVEL).upper(),
            log_file=_lookup(env, "LOG_FILE") or "",
            json_format=_flag(env, "LOG_JSON", False),
            console=not _flag(env, "DISABLE_CONSOLE", False),
            colored=not _flag(env, "NO_COLOR", False),
            buffered=_flag(env, "LOG_BUFFERED", False),
            buffer_size=int(size) if size else DEFAULT_BUFFER_SIZE,
        )


__all__ = ["ENV_PREFIX", "TelemetrySettings"]
