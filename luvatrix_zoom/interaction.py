from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Union

from .mapping import flip_to_bottom_left
from .surface import Vector2


PointerPhase = Literal["initialize", "begin", "drag", "end"]

_TOUCH_PHASES: dict[str, PointerPhase] = {
    "down": "initialize",
    "begin": "begin",
    "move": "drag",
    "up": "end",
    "cancel": "end",
}


@dataclass(frozen=True)
class ZoomPointerEvent:
    phase: PointerPhase
    position: Vector2
    delta: Vector2 = (0.0, 0.0)
    touches: tuple[Vector2, ...] = ()


@dataclass(frozen=True)
class ZoomScrollEvent:
    position: Vector2
    scroll_delta: Vector2


@dataclass(frozen=True)
class ZoomPinchEvent:
    position: Vector2
    magnification: float


@dataclass(frozen=True)
class ZoomClickEvent:
    position: Vector2
    click_count: int = 1


ZoomInputEvent = Union[ZoomPointerEvent, ZoomScrollEvent, ZoomPinchEvent, ZoomClickEvent]


def parse_hdi_zoom_event(
    event_type: str,
    payload: object,
    *,
    viewport_height: float,
) -> ZoomInputEvent | None:
    """Parse normalized HDI pointer payloads into zoom gesture events.

    HDI positions use a top-left origin; returned events use the bottom-left
    screen space of the zoom controllers. Anything unrecognized yields None.
    Like the press parser, this only depends on `(event_type, payload)` and
    not on `luvatrix_core` event classes.

    `touch` is a host extension: the stock HDI normalizer has no touch event
    and drops a `touches` key. Hosts that send it must give the touch points
    already in bottom-left target space, so only `x`/`y` are flipped.
    """

    if viewport_height <= 0:
        raise ValueError("viewport_height must be > 0")
    if not isinstance(payload, Mapping):
        return None
    position = _read_point(payload, viewport_height)
    if position is None:
        return None

    if event_type == "touch":
        phase = _TOUCH_PHASES.get(str(payload.get("phase", "")))
        if phase is None:
            return None
        delta = _read_delta(payload)
        touches = _read_touches(payload.get("touches", ()))
        if delta is None or touches is None:
            return None
        # flipping the y axis flips the sign of vertical motion
        return ZoomPointerEvent(phase=phase, position=position, delta=(delta[0], -delta[1]), touches=touches)

    if event_type == "scroll":
        delta = _read_delta(payload)
        if delta is None:
            return None
        return ZoomScrollEvent(position=position, scroll_delta=delta)

    if event_type == "pinch":
        try:
            magnification = float(payload.get("magnification", 0.0))
        except (TypeError, ValueError):
            return None
        return ZoomPinchEvent(position=position, magnification=magnification)

    if event_type == "click":
        if payload.get("phase", "down") != "down":
            return None
        try:
            click_count = int(payload.get("click_count", 1))
        except (TypeError, ValueError):
            click_count = 1
        return ZoomClickEvent(position=position, click_count=click_count)

    return None


def _read_point(raw: object, viewport_height: float) -> Vector2 | None:
    point = _read_coords(raw)
    if point is None:
        return None
    return flip_to_bottom_left(point, viewport_height)


def _read_coords(raw: object) -> Vector2 | None:
    if isinstance(raw, Mapping):
        if "x" not in raw or "y" not in raw:
            return None
        x, y = raw["x"], raw["y"]
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        x, y = raw
    else:
        return None
    try:
        return (float(x), float(y))
    except (TypeError, ValueError):
        return None


def _read_delta(payload: Mapping[str, object]) -> Vector2 | None:
    try:
        return (float(payload.get("delta_x", 0.0)), float(payload.get("delta_y", 0.0)))
    except (TypeError, ValueError):
        return None


def _read_touches(raw: object) -> tuple[Vector2, ...] | None:
    if not isinstance(raw, (list, tuple)):
        return None
    out: list[Vector2] = []
    for item in raw:
        point = _read_coords(item)
        if point is None:
            return None
        out.append(point)
    return tuple(out)
