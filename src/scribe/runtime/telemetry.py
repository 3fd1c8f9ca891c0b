"""Structured logging and profiling for document edits, built on telelog.

Callers use ``span`` around a mutation and ``record_event`` for point-in-time
facts. ``configure`` swaps the active telelog configuration; until it is
called, settings come from ``SCRIBE_*`` environment variables.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

from .config import DEFAULT_LOGGER_NAME, TelemetrySettings

tl = cast(Any, telelog)

PRESETS = ("development", "production", "performance")


@dataclass
class _TelemetryState:
    config: Any
    settings: Optional[TelemetrySettings]
    logger_name: str
    loggers: Dict[str, Any] = field(default_factory=dict)


_state: Optional[_TelemetryState] = None


def _build_config(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json_format:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    return config


def _apply_preset(preset: str, base: TelemetrySettings) -> TelemetrySettings:
    key = preset.lower()
    if key == "development":
        return TelemetrySettings(logger_name=base.logger_name, level="DEBUG")
    if key == "production":
        return TelemetrySettings(
            logger_name=base.logger_name,
            console=False,
            log_file=base.log_file or "scribe.log",
            buffered=True,
            buffer_size=base.buffer_size,
        )
    if key == "performance":
        return TelemetrySettings(
            logger_name=base.logger_name,
            level="DEBUG",
            console=False,
            json_format=True,
            log_file=base.log_file or "scribe-performance.log",
            buffered=True,
            buffer_size=base.buffer_size,
        )
    raise ValueError(f"Unknown preset '{preset}'. Expected one of {PRESETS}.")


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    ``config`` adopts an explicit ``tl.Config``; ``preset`` and ``settings``
    build one instead. ``config`` and ``preset`` are mutually exclusive.
    Profiling is always switched on because ``span`` relies on it.
    """

    global _state
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    base = settings or TelemetrySettings.from_env()
    resolved: Optional[TelemetrySettings] = None
    if config is None:
        resolved = _apply_preset(preset, base) if preset else base
        config = _build_config(resolved)
    config.with_profiling(True)
    _state = _TelemetryState(
        config=config, settings=resolved, logger_name=base.logger_name
    )


def current_settings() -> Optional[TelemetrySettings]:
    """Settings behind the active config, or ``None`` if one was passed in."""

    return _ensure_state().settings


def _ensure_state() -> _TelemetryState:
    if _state is None:
        configure()
    return cast(_TelemetryState, _state)


def get_logger(name: Optional[str] = None) -> Any:
    state = _ensure_state()
    logger_name = name or state.logger_name or DEFAULT_LOGGER_NAME
    if logger_name not in state.loggers:
        state.loggers[logger_name] = tl.Logger.with_config(logger_name, state.config)
    return state.loggers[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), str(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` carrying ``event=<name>`` plus ``data``."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile a block, optionally tracking it as a telelog component.

    ``component=True`` reuses ``name``. ``metadata`` is attached as logger
    context for the duration of the block. An exception is logged as
    ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {str(key): str(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            payload: Dict[str, Any] = {"span": name, **context, "reason": str(exc)}
            if component_name:
                payload["component"] = component_name
            _emit(log, "error", "span::fail", payload)
            raise


__all__ = [
    "PRESETS",
    "configure",
    "current_settings",
    "get_logger",
    "record_event",
    "span",
]
