from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Callable, Protocol, Union

import numpy as np


TweenValue = Union[float, tuple[float, ...]]

_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1.0


def _in_expo(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * t - 10.0)


def _out_expo(t: float) -> float:
    return 1.0 if t == 1.0 else 1.0 - 2.0 ** (-10.0 * t)


def _in_out_expo(t: float) -> float:
    if t == 0.0 or t == 1.0:
        return t
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) / 2.0


def _in_out_back(t: float) -> float:
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((_BACK_C2 + 1.0) * 2.0 * t - _BACK_C2)) / 2.0
    return ((2.0 * t - 2.0) ** 2 * ((_BACK_C2 + 1.0) * (t * 2.0 - 2.0) + _BACK_C2) + 2.0) / 2.0


EASES: dict[str, Callable[[float], float]] = {
    "linear": lambda t: t,
    "in_sine": lambda t: 1.0 - math.cos(t * math.pi / 2.0),
    "out_sine": lambda t: math.sin(t * math.pi / 2.0),
    "in_out_sine": lambda t: -(math.cos(math.pi * t) - 1.0) / 2.0,
    "in_quad": lambda t: t * t,
    "out_quad": lambda t: 1.0 - (1.0 - t) ** 2,
    "in_out_quad": lambda t: 2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0,
    "in_cubic": lambda t: t**3,
    "out_cubic": lambda t: 1.0 - (1.0 - t) ** 3,
    "in_out_cubic": lambda t: 4.0 * t**3 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0,
    "in_quart": lambda t: t**4,
    "out_quart": lambda t: 1.0 - (1.0 - t) ** 4,
    "in_out_quart": lambda t: 8.0 * t**4 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0,
    "in_expo": _in_expo,
    "out_expo": _out_expo,
    "in_out_expo": _in_out_expo,
    "in_back": lambda t: _BACK_C3 * t**3 - _BACK_C1 * t * t,
    "out_back": lambda t: 1.0 + _BACK_C3 * (t - 1.0) ** 3 + _BACK_C1 * (t - 1.0) ** 2,
    "in_out_back": _in_out_back,
}


def evaluate_ease(name: str, t: float) -> float:
    """Map an elapsed-time fraction to a value fraction for the named curve."""

    fn = EASES.get(name)
    if fn is None:
        raise ValueError(f"unknown ease: {name}")
    return float(fn(max(0.0, min(1.0, float(t)))))


class TweenHandle(Protocol):
    @property
    def elapsed(self) -> float:
        ...

    @property
    def duration(self) -> float:
        ...

    @property
    def is_complete(self) -> bool:
        ...


class InterpolationDriver(Protocol):
    def to(
        self,
        getter: Callable[[], TweenValue],
        setter: Callable[[TweenValue], None],
        end: TweenValue,
        duration: float,
        *,
        ease: str = "linear",
        target: object | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> TweenHandle:
        ...

    def kill(self, target: object) -> int:
        ...


@dataclass
class Tween:
    setter: Callable[[TweenValue], None]
    start: TweenValue
    end: TweenValue
    duration: float
    ease: str = "linear"
    target: object | None = None
    on_complete: Callable[[], None] | None = None
    elapsed: float = 0.0
    is_complete: bool = False
    is_killed: bool = False
    _last_value: TweenValue | None = field(default=None, init=False, repr=False)

    @property
    def is_active(self) -> bool:
        return not (self.is_complete or self.is_killed)

    @property
    def last_value(self) -> TweenValue | None:
        return self._last_value

    def kill(self) -> None:
        self.is_killed = True

    def advance(self, dt: float) -> bool:
        """Step the tween by `dt` and push the value; True once it has finished."""

        if not self.is_active:
            return False
        self.elapsed = min(self.duration, self.elapsed + dt)
        if self.duration <= 0 or self.elapsed >= self.duration:
            value = _exact(self.end)
            self.is_complete = True
        else:
            fraction = evaluate_ease(self.ease, self.elapsed / self.duration)
            value = _interpolate(self.start, self.end, fraction)
        self._last_value = value
        self.setter(value)
        return self.is_complete


class TweenRunner:
    """Frame-ticked interpolation driver.

    Start values are read from the getter when the tween is created. Tweens
    created during `tick` start advancing on the next tick; tweens killed
    during `tick` are skipped immediately.
    """

    def __init__(self) -> None:
        self._tweens: list[Tween] = []

    def to(
        self,
        getter: Callable[[], TweenValue],
        setter: Callable[[TweenValue], None],
        end: TweenValue,
        duration: float,
        *,
        ease: str = "linear",
        target: object | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> Tween:
        if duration < 0:
            raise ValueError("duration must be >= 0")
        if ease not in EASES:
            raise ValueError(f"unknown ease: {ease}")
        start = getter()
        if isinstance(start, tuple) != isinstance(end, tuple):
            raise ValueError("tween start and end must both be scalars or both be vectors")
        if isinstance(start, tuple) and len(start) != len(end):
            raise ValueError("tween start and end vectors must have the same length")
        tween = Tween(
            setter=setter,
            start=start,
            end=end,
            duration=float(duration),
            ease=ease,
            target=target,
            on_complete=on_complete,
        )
        self._tweens.append(tween)
        return tween

    def tick(self, dt: float) -> int:
        """Advance every live tween by `dt`; returns how many are still running."""

        if dt < 0:
            raise ValueError("dt must be >= 0")
        for tween in list(self._tweens):
            if not tween.is_active:
                continue
            if tween.advance(dt) and tween.on_complete is not None:
                tween.on_complete()
        self._prune()
        return len(self._tweens)

    def kill(self, target: object) -> int:
        killed = 0
        for tween in self._tweens:
            if tween.is_active and tween.target is target:
                tween.kill()
                killed += 1
        self._prune()
        return killed

    def kill_all(self) -> int:
        killed = 0
        for tween in self._tweens:
            if tween.is_active:
                tween.kill()
                killed += 1
        self._tweens.clear()
        return killed

    def active(self, target: object | None = None) -> list[Tween]:
        return [t for t in self._tweens if t.is_active and (target is None or t.target is target)]

    def _prune(self) -> None:
        self._tweens = [t for t in self._tweens if t.is_active]


def _interpolate(start: TweenValue, end: TweenValue, fraction: float) -> TweenValue:
    if isinstance(start, tuple):
        a = np.asarray(start, dtype=np.float64)
        b = np.asarray(end, dtype=np.float64)
        return tuple(float(v) for v in a + (b - a) * fraction)
    return float(start) + (float(end) - float(start)) * fraction


def _exact(value: TweenValue) -> TweenValue:
    if isinstance(value, tuple):
        return tuple(float(v) for v in value)
    return float(value)
