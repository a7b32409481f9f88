from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping

LOGGER = logging.getLogger(__name__)

MIN_CENTER_ZOOM_TIME = 0.3


class InvalidZoomConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ZoomConfig:
    """Owner-supplied zoom limits and animation settings.

    Ease names are opaque here; the interpolation driver resolves them.
    """

    min_size: float = 1.0
    max_size: float = 5.0
    max_zoom_time: float = 1.0
    scale_ease: str = "linear"
    move_ease: str = "linear"

    def __post_init__(self) -> None:
        if self.min_size <= 0:
            raise InvalidZoomConfigError("min_size must be > 0")
        if self.max_size <= 0:
            raise InvalidZoomConfigError("max_size must be > 0")
        if self.min_size > self.max_size:
            raise InvalidZoomConfigError("min_size must be <= max_size")
        if self.max_zoom_time < 0:
            raise InvalidZoomConfigError("max_zoom_time must be >= 0")
        for name in ("scale_ease", "move_ease"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidZoomConfigError(f"{name} must be a non-empty string")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ZoomConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in raw if k not in known)
        if unknown:
            LOGGER.warning("ignoring unknown zoom config keys: %s", ", ".join(unknown))
        kwargs: dict[str, Any] = {}
        for name in ("min_size", "max_size", "max_zoom_time"):
            if name in raw:
                kwargs[name] = _coerce_float(raw[name], name)
        for name in ("scale_ease", "move_ease"):
            if name in raw:
                kwargs[name] = _coerce_str(raw[name], name)
        return cls(**kwargs)

    def clamp_scale(self, value: float) -> float:
        return max(self.min_size, min(self.max_size, float(value)))

    def remaining_zoom_time(self, current_scale: float) -> float:
        """Share of the size range left to cover, scaled by `max_zoom_time`."""

        span = self.max_size - self.min_size
        if span <= 0:
            return 0.0
        return (self.max_size - current_scale) / span * self.max_zoom_time

    def center_zoom_time(self, current_scale: float) -> float:
        return max(self.remaining_zoom_time(current_scale), MIN_CENTER_ZOOM_TIME)


def load_zoom_config(path: str | Path) -> ZoomConfig:
    """Load a `ZoomConfig` from a TOML file.

    Values are read from a `[zoom]` table when present, otherwise from the
    top level of the document.
    """

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"zoom config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidZoomConfigError(f"invalid zoom config {config_path}: {exc}") from exc
    section = raw.get("zoom", raw)
    if not isinstance(section, dict):
        raise InvalidZoomConfigError("`zoom` must be a table")
    return ZoomConfig.from_mapping(section)


def _coerce_float(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidZoomConfigError(f"{field_name} must be a number")
    return float(value)


def _coerce_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidZoomConfigError(f"{field_name} must be a string")
    return value
