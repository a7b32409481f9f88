from __future__ import annotations

from .config import ZoomConfig
from .mapping import Projector, screen_to_rect_point
from .rebase import apply_rebase
from .surface import Vector2, ZoomableSurface


class ScaleController:
    """Atomic re-anchored scale step shared by gestures and animations."""

    def __init__(self, config: ZoomConfig) -> None:
        self._config = config

    @property
    def config(self) -> ZoomConfig:
        return self._config

    def scale_around(
        self,
        surface: ZoomableSurface,
        screen_point: Vector2,
        target_scale: float,
        projector: Projector,
        camera: object | None = None,
    ) -> float:
        """Move the pivot under `screen_point`, then set the clamped scale.

        Returns the scale that was applied.
        """

        anchor = screen_to_rect_point(surface, screen_point, projector, camera)
        apply_rebase(surface, anchor)
        surface.local_scale = self._config.clamp_scale(target_scale)
        return surface.local_scale
