from __future__ import annotations

import logging

from .animator import Transition, ZoomAnimator
from .config import ZoomConfig
from .interaction import (
    ZoomClickEvent,
    ZoomPinchEvent,
    ZoomPointerEvent,
    ZoomScrollEvent,
    parse_hdi_zoom_event,
)
from .mapping import Projector
from .pinch import GestureState, PinchTracker
from .scale import ScaleController
from .surface import Vector2, ZoomableSurface
from .tween import InterpolationDriver, TweenRunner

LOGGER = logging.getLogger(__name__)


class ZoomComponent:
    """Binds gesture input and the frame loop to one zoomable surface.

    Implements the drag capability set (initialize/begin/drag/end) plus the
    optional scroll and click-to-zoom handlers, which are only honoured when
    `scroll_enabled` is set (interactive/debug builds).

    `scroll_units_per_scale` is the scroll `delta_y` that changes the scale
    by 1.0. Notched wheels report about one unit per notch; macOS trackpad
    `scrollingDeltaY` values are pixel-scale and want a divisor near 100.
    """

    def __init__(
        self,
        surface: ZoomableSurface,
        projector: Projector,
        config: ZoomConfig | None = None,
        *,
        viewport_size: tuple[float, float],
        driver: InterpolationDriver | None = None,
        camera: object | None = None,
        pixels_per_unit: float = 100.0,
        scroll_enabled: bool = False,
        scroll_units_per_scale: float = 1.0,
    ) -> None:
        width, height = viewport_size
        if width <= 0 or height <= 0:
            raise ValueError("viewport width and height must be > 0")
        if scroll_units_per_scale <= 0:
            raise ValueError("scroll_units_per_scale must be > 0")
        self.surface = surface
        self.projector = projector
        self.camera = camera
        self.scroll_enabled = scroll_enabled
        self.scroll_units_per_scale = float(scroll_units_per_scale)
        self._viewport_size = (float(width), float(height))
        self._config = config or ZoomConfig()
        self._runner = TweenRunner() if driver is None else None
        self._driver: InterpolationDriver = driver if driver is not None else self._runner
        self._controller = ScaleController(self._config)
        self._pinch = PinchTracker(pixels_per_unit)
        self._animator = ZoomAnimator(self._controller, self._driver)
        self._gesture = GestureState()

    @property
    def config(self) -> ZoomConfig:
        return self._config

    @property
    def animator(self) -> ZoomAnimator:
        return self._animator

    @property
    def gesture(self) -> GestureState:
        return self._gesture

    @property
    def viewport_center(self) -> Vector2:
        """Pixel center in the same bottom-left space as `flip_to_bottom_left`."""

        width, height = self._viewport_size
        return ((width - 1.0) / 2.0, (height - 1.0) / 2.0)

    def set_viewport_size(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("viewport width and height must be > 0")
        self._viewport_size = (float(width), float(height))

    def update(self, dt: float) -> int:
        """Advance the component's own tween runner; returns tweens still running."""

        if self._runner is None:
            return 0
        return self._runner.tick(dt)

    def zoom_to(self, screen_point: Vector2) -> Transition | None:
        return self._animator.zoom_to_point(self.surface, screen_point, self.projector, self.camera)

    def zoom_to_center(self, world_position: Vector2) -> Transition:
        return self._animator.zoom_to_center(
            self.surface, world_position, self.projector, self.viewport_center, self.camera
        )

    def zoom_by_click(self, screen_point: Vector2) -> Transition | None:
        if not self.scroll_enabled:
            return None
        world = self.projector.screen_to_world(self.surface, screen_point, self.camera)
        return self.zoom_to_center(world)

    def on_initialize_potential_drag(self, event: ZoomPointerEvent) -> None:
        self._animator.cancel(self.surface)
        self._gesture.begin(event.touches)

    def on_begin_drag(self, event: ZoomPointerEvent) -> None:
        if not self._gesture.in_progress:
            self._gesture.begin(event.touches)

    def on_drag(self, event: ZoomPointerEvent) -> bool:
        self._gesture.update(event.touches, event.delta)
        step = self._pinch.compute_delta(event.touches, event.delta, event.position)
        if step is None:
            return False
        self._animator.cancel(self.surface)
        return self._pinch.apply(
            self.surface,
            event.touches,
            event.delta,
            event.position,
            self._controller,
            self.projector,
            self.camera,
        )

    def on_end_drag(self, event: ZoomPointerEvent) -> None:
        _ = event
        self._gesture.end()

    def on_scroll(self, event: ZoomScrollEvent) -> bool:
        if not self.scroll_enabled:
            return False
        self._animator.cancel(self.surface)
        step = event.scroll_delta[1] / self.scroll_units_per_scale
        target = self._config.clamp_scale(self.surface.local_scale + step)
        self._controller.scale_around(self.surface, event.position, target, self.projector, self.camera)
        return True

    def on_pinch(self, event: ZoomPinchEvent) -> bool:
        if event.magnification == 0:
            return False
        self._animator.cancel(self.surface)
        target = self._config.clamp_scale(self.surface.local_scale * (1.0 + event.magnification))
        self._controller.scale_around(self.surface, event.position, target, self.projector, self.camera)
        return True

    def handle_hdi(self, event_type: str, payload: object) -> bool:
        """Route one normalized HDI event; True when it was consumed."""

        event = parse_hdi_zoom_event(event_type, payload, viewport_height=self._viewport_size[1])
        if event is None:
            return False
        if isinstance(event, ZoomPointerEvent):
            if event.phase == "initialize":
                self.on_initialize_potential_drag(event)
                return True
            if event.phase == "begin":
                self.on_begin_drag(event)
                return True
            if event.phase == "end":
                self.on_end_drag(event)
                return True
            return self.on_drag(event)
        if isinstance(event, ZoomScrollEvent):
            return self.on_scroll(event)
        if isinstance(event, ZoomPinchEvent):
            return self.on_pinch(event)
        if isinstance(event, ZoomClickEvent) and event.click_count >= 2:
            return self.zoom_by_click(event.position) is not None
        LOGGER.debug("ignored %s event on %s", event_type, self.surface.surface_id)
        return False
