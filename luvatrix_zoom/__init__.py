"""Focal-point zoom and pan for Luvatrix UI surfaces."""

from .animator import AnimatorState, Transition, TransitionKind, ZoomAnimator
from .component import ZoomComponent
from .config import MIN_CENTER_ZOOM_TIME, InvalidZoomConfigError, ZoomConfig, load_zoom_config
from .interaction import (
    PointerPhase,
    ZoomClickEvent,
    ZoomInputEvent,
    ZoomPinchEvent,
    ZoomPointerEvent,
    ZoomScrollEvent,
    parse_hdi_zoom_event,
)
from .mapping import CanvasProjector, Projector, ViewCamera, flip_to_bottom_left, screen_to_rect_point
from .pinch import GestureState, PinchStep, PinchTracker
from .rebase import apply_rebase, rebase
from .scale import ScaleController
from .surface import DegenerateSurfaceError, Vector2, ZoomableSurface
from .tween import EASES, InterpolationDriver, Tween, TweenHandle, TweenRunner, evaluate_ease

__all__ = [
    "AnimatorState",
    "CanvasProjector",
    "DegenerateSurfaceError",
    "EASES",
    "GestureState",
    "InterpolationDriver",
    "InvalidZoomConfigError",
    "MIN_CENTER_ZOOM_TIME",
    "PinchStep",
    "PinchTracker",
    "PointerPhase",
    "Projector",
    "ScaleController",
    "Transition",
    "TransitionKind",
    "Tween",
    "TweenHandle",
    "TweenRunner",
    "Vector2",
    "ViewCamera",
    "ZoomAnimator",
    "ZoomClickEvent",
    "ZoomComponent",
    "ZoomConfig",
    "ZoomInputEvent",
    "ZoomPinchEvent",
    "ZoomPointerEvent",
    "ZoomScrollEvent",
    "ZoomableSurface",
    "apply_rebase",
    "evaluate_ease",
    "flip_to_bottom_left",
    "load_zoom_config",
    "parse_hdi_zoom_event",
    "rebase",
    "screen_to_rect_point",
]
