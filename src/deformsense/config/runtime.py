"""Runtime configuration helpers for the signal engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(slots=True)
class EngineConfig:
    """
    Tuning knobs for how bytes are polled and how the engine reports.

    The window length and derivative stencil are fixed and not configurable.
    """

    max_poll_bytes: int = 4096
    default_label: str = ""
    # Opt-in: re-sample the current vector on ticks that complete no frame.
    sample_on_idle: bool = False

    log_level: str = "WARNING"
    debug_timing: bool = False

    def sanitized(self) -> EngineConfig:
        """Return a copy with derived limits applied."""
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            level = "WARNING"
        return EngineConfig(
            max_poll_bytes=max(1, int(self.max_poll_bytes)),
            default_label=str(self.default_label),
            sample_on_idle=bool(self.sample_on_idle),
            log_level=level,
            debug_timing=bool(self.debug_timing),
        )


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`EngineConfig`."""
    return {f.name for f in fields(EngineConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten known nesting patterns (e.g. top-level ``engine`` key)."""
    if "engine" in data and isinstance(data["engine"], Mapping):
        merged: MutableMapping[str, Any] = {}
        for key, value in data.items():
            if key == "engine":
                merged.update(value)
            else:
                merged[key] = value
        return merged
    return dict(data)


def config_from_mapping(data: Mapping[str, Any] | None) -> EngineConfig:
    """Build :class:`EngineConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return EngineConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return EngineConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> EngineConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`EngineConfig`.
    """
    if path is None:
        return EngineConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return EngineConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


def configure_logging(config: EngineConfig) -> logging.Logger:
    """Apply ``config.log_level`` to the package logger; handlers are left to the host."""
    package_logger = logging.getLogger("deformsense")
    package_logger.setLevel(config.sanitized().log_level)
    return package_logger


__all__ = ["EngineConfig", "config_from_mapping", "load_config", "configure_logging"]
