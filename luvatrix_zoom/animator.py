from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Literal

from .config import ZoomConfig
from .mapping import Projector
from .scale import ScaleController
from .surface import Vector2, ZoomableSurface
from .tween import InterpolationDriver, TweenHandle, TweenValue

LOGGER = logging.getLogger(__name__)


AnimatorState = Literal["idle", "scale_only_running", "scale_and_move_running"]
TransitionKind = Literal["scale_only", "scale_and_move"]


@dataclass
class Transition:
    """In-flight animated change of one surface."""

    surface: ZoomableSurface
    kind: TransitionKind
    start_scale: float
    target_scale: float
    duration: float
    scale_ease: str
    move_ease: str | None = None
    start_position: Vector2 | None = None
    target_position: Vector2 | None = None
    handles: list[TweenHandle] = field(default_factory=list)
    cancelled: bool = False

    @property
    def elapsed(self) -> float:
        return max((h.elapsed for h in self.handles), default=0.0)

    @property
    def is_complete(self) -> bool:
        return bool(self.handles) and all(h.is_complete for h in self.handles)


class ZoomAnimator:
    """Drives `ScaleController` over time through an interpolation driver.

    Keeps at most one `Transition` per surface. Starting a new one, or calling
    `cancel`, kills the driver's tweens for that surface on the spot and
    leaves the surface wherever the last tick put it.
    """

    def __init__(self, controller: ScaleController, driver: InterpolationDriver) -> None:
        self._controller = controller
        self._driver = driver
        self._transitions: dict[int, Transition] = {}

    @property
    def config(self) -> ZoomConfig:
        return self._controller.config

    def state(self, surface: ZoomableSurface) -> AnimatorState:
        transition = self._transitions.get(id(surface))
        if transition is None:
            return "idle"
        if transition.kind == "scale_only":
            return "scale_only_running"
        return "scale_and_move_running"

    def transition_for(self, surface: ZoomableSurface) -> Transition | None:
        return self._transitions.get(id(surface))

    def active_transitions(self) -> list[Transition]:
        return list(self._transitions.values())

    def cancel(self, surface: ZoomableSurface) -> bool:
        self._driver.kill(surface)
        transition = self._transitions.pop(id(surface), None)
        if transition is None:
            return False
        transition.cancelled = True
        LOGGER.debug(
            "cancelled %s transition on %s at scale %.4f",
            transition.kind,
            surface.surface_id,
            surface.local_scale,
        )
        return True

    def zoom_to_point(
        self,
        surface: ZoomableSurface,
        screen_point: Vector2,
        projector: Projector,
        camera: object | None = None,
    ) -> Transition | None:
        """Tween the scale up to `max_size`, re-anchoring around `screen_point` every tick.

        Returns None, leaving the surface untouched, when there is no time left
        to zoom (scale already at or above `max_size`).
        """

        config = self.config
        start = surface.local_scale
        duration = config.remaining_zoom_time(start)
        if duration <= 0:
            return None
        self.cancel(surface)
        transition = Transition(
            surface=surface,
            kind="scale_only",
            start_scale=start,
            target_scale=config.max_size,
            duration=duration,
            scale_ease=config.scale_ease,
        )
        self._transitions[id(surface)] = transition

        def set_scale(value: TweenValue) -> None:
            self._controller.scale_around(surface, screen_point, float(value), projector, camera)

        transition.handles.append(
            self._driver.to(
                lambda: surface.local_scale,
                set_scale,
                config.max_size,
                duration,
                ease=config.scale_ease,
                target=surface,
                on_complete=lambda: self._on_tween_complete(transition),
            )
        )
        LOGGER.debug(
            "zoom_to_point on %s: %.4f -> %.4f over %.3fs",
            surface.surface_id,
            start,
            config.max_size,
            duration,
        )
        return transition

    def zoom_to_center(
        self,
        surface: ZoomableSurface,
        world_position: Vector2,
        projector: Projector,
        viewport_center: Vector2,
        camera: object | None = None,
    ) -> Transition:
        """Zoom to `max_size` while moving `world_position` to the viewport center."""

        config = self.config
        self.cancel(surface)
        screen_point = projector.local_to_screen(camera, world_position)
        current = surface.local_scale
        # Probe at the final scale so pivot/position bookkeeping matches the end
        # state, then put the scale back before animating.
        self._controller.scale_around(surface, screen_point, config.max_size, projector, camera)
        center = projector.screen_to_parent_local(surface, viewport_center, camera)
        surface.local_scale = current

        duration = config.center_zoom_time(current)
        transition = Transition(
            surface=surface,
            kind="scale_and_move",
            start_scale=current,
            target_scale=config.max_size,
            duration=duration,
            scale_ease=config.scale_ease,
            move_ease=config.move_ease,
            start_position=surface.anchored_position,
            target_position=(float(center[0]), float(center[1])),
        )
        self._transitions[id(surface)] = transition

        def set_scale(value: TweenValue) -> None:
            surface.local_scale = config.clamp_scale(float(value))

        def set_position(value: TweenValue) -> None:
            surface.anchored_position = (float(value[0]), float(value[1]))

        def on_complete() -> None:
            self._on_tween_complete(transition)

        transition.handles.append(
            self._driver.to(
                lambda: surface.local_scale,
                set_scale,
                config.max_size,
                duration,
                ease=config.scale_ease,
                target=surface,
                on_complete=on_complete,
            )
        )
        transition.handles.append(
            self._driver.to(
                lambda: surface.anchored_position,
                set_position,
                transition.target_position,
                duration,
                ease=config.move_ease,
                target=surface,
                on_complete=on_complete,
            )
        )
        LOGGER.debug(
            "zoom_to_center on %s: %.4f -> %.4f, position -> (%.2f, %.2f) over %.3fs",
            surface.surface_id,
            current,
            config.max_size,
            transition.target_position[0],
            transition.target_position[1],
            duration,
        )
        return transition

    def _on_tween_complete(self, transition: Transition) -> None:
        if transition.cancelled or not transition.is_complete:
            return
        key = id(transition.surface)
        if self._transitions.get(key) is transition:
            del self._transitions[key]
            LOGGER.debug("%s transition on %s finished", transition.kind, transition.surface.surface_id)
