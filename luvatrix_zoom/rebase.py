from __future__ import annotations

from .surface import DegenerateSurfaceError, Vector2, ZoomableSurface


def rebase(surface: ZoomableSurface, desired_local_anchor: Vector2) -> tuple[Vector2, Vector2]:
    """Return the pivot that sits on `desired_local_anchor` and the matching position shift.

    The anchor is in rect space (lower-left origin, unscaled) and may fall
    outside the rect. Writing the new pivot and adding the shift to
    `anchored_position` keeps the anchor where it is on screen at the current
    scale, so a following scale change zooms around it.
    """

    width, height = surface.size
    if width == 0 or height == 0:
        raise DegenerateSurfaceError(f"surface `{surface.surface_id}` has zero width or height")
    ax, ay = desired_local_anchor
    new_pivot = (ax / width, ay / height)
    old_x, old_y = surface.pivot
    scale = surface.local_scale
    # anchored_position lives in parent space, pivot/size in unscaled local units
    position_delta = (
        (new_pivot[0] - old_x) * width * scale,
        (new_pivot[1] - old_y) * height * scale,
    )
    return new_pivot, position_delta


def apply_rebase(surface: ZoomableSurface, desired_local_anchor: Vector2) -> Vector2:
    new_pivot, (dx, dy) = rebase(surface, desired_local_anchor)
    surface.pivot = new_pivot
    x, y = surface.anchored_position
    surface.anchored_position = (x + dx, y + dy)
    return (dx, dy)
