from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

import numpy as np

from .config import ZoomConfig
from .mapping import Projector
from .scale import ScaleController
from .surface import Vector2, ZoomableSurface

LOGGER = logging.getLogger(__name__)


@dataclass
class GestureState:
    """Transient per-interaction touch bookkeeping."""

    touches: tuple[Vector2, ...] = ()
    last_drag_delta: Vector2 = (0.0, 0.0)
    in_progress: bool = False

    def begin(self, touches: Sequence[Vector2] = ()) -> None:
        self.touches = tuple(touches)
        self.last_drag_delta = (0.0, 0.0)
        self.in_progress = True

    def update(self, touches: Sequence[Vector2], drag_delta: Vector2) -> None:
        self.touches = tuple(touches)
        self.last_drag_delta = drag_delta

    def end(self) -> None:
        self.touches = ()
        self.last_drag_delta = (0.0, 0.0)
        self.in_progress = False


@dataclass(frozen=True)
class PinchStep:
    centroid: Vector2
    scale_delta: float


class PinchTracker:
    """Turns two-finger drag deltas into a scale delta around the touch centroid."""

    def __init__(self, pixels_per_unit: float = 100.0) -> None:
        if pixels_per_unit <= 0:
            raise ValueError("pixels_per_unit must be > 0")
        self._pixels_per_unit = float(pixels_per_unit)

    @property
    def pixels_per_unit(self) -> float:
        return self._pixels_per_unit

    def compute_delta(
        self,
        touches: Sequence[Vector2],
        drag_delta: Vector2,
        event_position: Vector2,
    ) -> PinchStep | None:
        """Return the centroid and scale delta, or None with fewer than two touches.

        Each delta axis is flipped when the event lies below the centroid on
        that axis, so a finger moving away from the centroid always counts as
        pinch-out whichever finger reported the drag.
        """

        if len(touches) < 2:
            return None
        points = np.asarray(touches, dtype=np.float64).reshape(-1, 2)
        centroid = points.mean(axis=0)
        delta = np.asarray(drag_delta, dtype=np.float64)
        position = np.asarray(event_position, dtype=np.float64)
        corrected = np.where(position < centroid, -delta, delta)
        scale_delta = float(corrected.sum()) / len(points) / self._pixels_per_unit
        return PinchStep(centroid=(float(centroid[0]), float(centroid[1])), scale_delta=scale_delta)

    def target_scale(self, config: ZoomConfig, current_scale: float, step: PinchStep) -> float:
        return config.clamp_scale(current_scale + step.scale_delta)

    def apply(
        self,
        surface: ZoomableSurface,
        touches: Sequence[Vector2],
        drag_delta: Vector2,
        event_position: Vector2,
        controller: ScaleController,
        projector: Projector,
        camera: object | None = None,
    ) -> bool:
        step = self.compute_delta(touches, drag_delta, event_position)
        if step is None:
            return False
        target = self.target_scale(controller.config, surface.local_scale, step)
        if target != surface.local_scale + step.scale_delta:
            LOGGER.debug("pinch scale clamped for %s: %.4f", surface.surface_id, target)
        controller.scale_around(surface, step.centroid, target, projector, camera)
        return True
