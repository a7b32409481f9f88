from __future__ import annotations

from dataclasses import dataclass


Vector2 = tuple[float, float]


class DegenerateSurfaceError(ValueError):
    pass


@dataclass
class ZoomableSurface:
    """Rectangle being zoomed and panned.

    `pivot` is normalized inside the rect's own bounds, `anchored_position` is
    where that pivot sits relative to the parent, measured from
    `parent_origin`. `size` belongs to the owner; the zoom code only ever writes
    `pivot`, `anchored_position` and `local_scale`.
    """

    size: Vector2
    pivot: Vector2 = (0.5, 0.5)
    local_scale: float = 1.0
    anchored_position: Vector2 = (0.0, 0.0)
    parent_origin: Vector2 = (0.0, 0.0)
    surface_id: str = "surface"

    def __post_init__(self) -> None:
        width, height = self.size
        if width < 0 or height < 0:
            raise ValueError("surface width/height must be >= 0")
        self.size = (float(width), float(height))
        self.pivot = (float(self.pivot[0]), float(self.pivot[1]))
        self.anchored_position = (float(self.anchored_position[0]), float(self.anchored_position[1]))
        self.parent_origin = (float(self.parent_origin[0]), float(self.parent_origin[1]))
        self.local_scale = float(self.local_scale)

    @property
    def local_scale_3d(self) -> tuple[float, float, float]:
        return (self.local_scale, self.local_scale, 1.0)

    def is_degenerate(self) -> bool:
        return self.size[0] == 0 or self.size[1] == 0
