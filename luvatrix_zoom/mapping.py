from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .surface import DegenerateSurfaceError, Vector2, ZoomableSurface


class Projector(Protocol):
    """Host-supplied screen/space conversions for one surface.

    Screen points use a bottom-left origin. `camera` is opaque here and passed
    through untouched; `None` means an overlay canvas.
    """

    def screen_to_local(self, surface: ZoomableSurface, screen_point: Vector2, camera: object | None) -> Vector2:
        ...

    def local_to_screen(self, camera: object | None, point: Vector2) -> Vector2:
        ...

    def screen_to_parent_local(
        self, surface: ZoomableSurface, screen_point: Vector2, camera: object | None
    ) -> Vector2:
        ...

    def screen_to_world(self, surface: ZoomableSurface, screen_point: Vector2, camera: object | None) -> Vector2:
        ...


def screen_to_rect_point(
    surface: ZoomableSurface,
    screen_point: Vector2,
    projector: Projector,
    camera: object | None = None,
) -> Vector2:
    """Map a screen point into the surface's rect space (lower-left origin)."""

    lx, ly = projector.screen_to_local(surface, screen_point, camera)
    px, py = surface.pivot
    width, height = surface.size
    return (lx + px * width, ly + py * height)


def flip_to_bottom_left(point: Vector2, viewport_height: float) -> Vector2:
    x, y = point
    return (float(x), float(viewport_height - 1) - float(y))


@dataclass(frozen=True)
class ViewCamera:
    """Uniform world-to-screen camera: `screen = origin + world * zoom`."""

    origin: Vector2 = (0.0, 0.0)
    zoom: float = 1.0

    def __post_init__(self) -> None:
        if self.zoom <= 0:
            raise ValueError("camera zoom must be > 0")

    def project(self, point: Vector2) -> Vector2:
        ox, oy = self.origin
        return (ox + point[0] * self.zoom, oy + point[1] * self.zoom)

    def unproject(self, point: Vector2) -> Vector2:
        ox, oy = self.origin
        return ((point[0] - ox) / self.zoom, (point[1] - oy) / self.zoom)


class CanvasProjector:
    """Reference projector for a flat canvas.

    The pivot sits at `parent_origin + anchored_position` in world space and
    local units are multiplied by `local_scale`.
    """

    def screen_to_local(self, surface: ZoomableSurface, screen_point: Vector2, camera: object | None) -> Vector2:
        scale = surface.local_scale
        if scale == 0:
            raise DegenerateSurfaceError(f"surface `{surface.surface_id}` has zero scale")
        wx, wy = self.screen_to_world(surface, screen_point, camera)
        px, py = _pivot_world(surface)
        return ((wx - px) / scale, (wy - py) / scale)

    def local_to_screen(self, camera: object | None, point: Vector2) -> Vector2:
        if camera is None:
            return (float(point[0]), float(point[1]))
        return _as_camera(camera).project(point)

    def screen_to_parent_local(
        self, surface: ZoomableSurface, screen_point: Vector2, camera: object | None
    ) -> Vector2:
        wx, wy = self.screen_to_world(surface, screen_point, camera)
        ox, oy = surface.parent_origin
        return (wx - ox, wy - oy)

    def screen_to_world(self, surface: ZoomableSurface, screen_point: Vector2, camera: object | None) -> Vector2:
        _ = surface
        if camera is None:
            return (float(screen_point[0]), float(screen_point[1]))
        return _as_camera(camera).unproject(screen_point)

    def rect_point_to_screen(
        self, surface: ZoomableSurface, rect_point: Vector2, camera: object | None = None
    ) -> Vector2:
        px, py = _pivot_world(surface)
        width, height = surface.size
        pivot_x, pivot_y = surface.pivot
        scale = surface.local_scale
        world = (
            px + (rect_point[0] - pivot_x * width) * scale,
            py + (rect_point[1] - pivot_y * height) * scale,
        )
        return self.local_to_screen(camera, world)


def _pivot_world(surface: ZoomableSurface) -> Vector2:
    ox, oy = surface.parent_origin
    ax, ay = surface.anchored_position
    return (ox + ax, oy + ay)


def _as_camera(camera: object) -> ViewCamera:
    if not isinstance(camera, ViewCamera):
        raise TypeError(f"CanvasProjector expects a ViewCamera, got {type(camera).__name__}")
    return camera
