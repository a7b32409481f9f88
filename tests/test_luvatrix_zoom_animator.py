from __future__ import annotations

import unittest

from luvatrix_zoom.animator import ZoomAnimator
from luvatrix_zoom.config import ZoomConfig
from luvatrix_zoom.mapping import CanvasProjector
from luvatrix_zoom.scale import ScaleController
from luvatrix_zoom.surface import ZoomableSurface
from luvatrix_zoom.tween import TweenRunner


def _surface(scale: float = 1.0) -> ZoomableSurface:
    return ZoomableSurface(
        size=(200.0, 100.0),
        pivot=(0.5, 0.5),
        local_scale=scale,
        anchored_position=(100.0, 50.0),
        surface_id="board",
    )


class ZoomAnimatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = TweenRunner()
        self.projector = CanvasProjector()
        self.animator = self._animator(ZoomConfig(min_size=1.0, max_size=5.0, max_zoom_time=1.0))

    def _animator(self, config: ZoomConfig) -> ZoomAnimator:
        return ZoomAnimator(ScaleController(config), self.runner)

    def test_zoom_to_point_from_midrange_scale(self) -> None:
        surface = _surface(scale=3.0)
        transition = self.animator.zoom_to_point(surface, (50.0, 40.0), self.projector)

        self.assertIsNotNone(transition)
        assert transition is not None
        self.assertEqual(transition.kind, "scale_only")
        self.assertEqual(transition.duration, 0.5)
        self.assertEqual(self.animator.state(surface), "scale_only_running")

        anchor = (100.0 - 50.0 / 3.0, 50.0 - 10.0 / 3.0)
        self.runner.tick(0.25)
        self.assertAlmostEqual(surface.local_scale, 4.0)
        on_screen = self.projector.rect_point_to_screen(surface, anchor)
        self.assertAlmostEqual(on_screen[0], 50.0)
        self.assertAlmostEqual(on_screen[1], 40.0)

        self.runner.tick(0.25)
        self.assertEqual(surface.local_scale, 5.0)
        self.assertEqual(self.animator.state(surface), "idle")
        self.assertIsNone(self.animator.transition_for(surface))
        self.assertTrue(transition.is_complete)

    def test_zoom_to_point_at_max_scale_is_a_no_op(self) -> None:
        surface = _surface(scale=5.0)
        self.assertIsNone(self.animator.zoom_to_point(surface, (10.0, 10.0), self.projector))
        self.assertEqual(self.animator.state(surface), "idle")
        self.assertEqual(self.runner.active(), [])
        self.assertEqual(surface.pivot, (0.5, 0.5))
        self.assertEqual(surface.anchored_position, (100.0, 50.0))
        self.assertEqual(surface.local_scale, 5.0)

    def test_zero_max_zoom_time_disables_zoom_to_point(self) -> None:
        animator = self._animator(ZoomConfig(max_zoom_time=0.0))
        self.assertIsNone(animator.zoom_to_point(_surface(), (10.0, 10.0), self.projector))

    def test_zoom_to_center_moves_world_point_to_viewport_center(self) -> None:
        surface = _surface(scale=1.0)
        transition = self.animator.zoom_to_center(surface, (150.0, 75.0), self.projector, (200.0, 150.0))

        # probe-and-restore: pivot already sits on the target, scale unchanged
        self.assertEqual(surface.local_scale, 1.0)
        self.assertEqual(surface.pivot, (0.75, 0.75))
        self.assertEqual(surface.anchored_position, (150.0, 75.0))
        self.assertEqual(transition.kind, "scale_and_move")
        self.assertEqual(transition.duration, 1.0)
        self.assertEqual(transition.target_position, (200.0, 150.0))
        self.assertEqual(self.animator.state(surface), "scale_and_move_running")

        self.runner.tick(0.5)
        self.assertAlmostEqual(surface.local_scale, 3.0)
        self.assertAlmostEqual(surface.anchored_position[0], 175.0)
        self.assertAlmostEqual(surface.anchored_position[1], 112.5)
        self.assertEqual(self.animator.state(surface), "scale_and_move_running")

        self.runner.tick(0.5)
        self.assertEqual(surface.local_scale, 5.0)
        self.assertEqual(surface.anchored_position, (200.0, 150.0))
        self.assertEqual(self.animator.state(surface), "idle")
        self.assertEqual(self.projector.rect_point_to_screen(surface, (150.0, 75.0)), (200.0, 150.0))

    def test_zoom_to_center_duration_never_below_floor(self) -> None:
        for scale in (4.9, 4.999, 5.0):
            with self.subTest(scale=scale):
                transition = self.animator.zoom_to_center(_surface(scale), (150.0, 75.0), self.projector, (0.0, 0.0))
                self.assertEqual(transition.duration, 0.3)
        animator = self._animator(ZoomConfig(max_zoom_time=0.0))
        transition = animator.zoom_to_center(_surface(), (150.0, 75.0), self.projector, (0.0, 0.0))
        self.assertEqual(transition.duration, 0.3)

    def test_second_transition_replaces_first(self) -> None:
        surface = _surface(scale=1.0)
        self.animator.zoom_to_point(surface, (10.0, 10.0), self.projector)
        self.runner.tick(0.25)
        self.animator.zoom_to_center(surface, (150.0, 75.0), self.projector, (200.0, 150.0))

        transitions = [t for t in self.animator.active_transitions() if t.surface is surface]
        self.assertEqual(len(transitions), 1)
        self.assertEqual(transitions[0].kind, "scale_and_move")
        self.assertEqual(len(self.runner.active(surface)), 2)

        self.animator.zoom_to_point(surface, (10.0, 10.0), self.projector)
        self.assertEqual(len(self.animator.active_transitions()), 1)
        self.assertEqual(len(self.runner.active(surface)), 1)

    def test_transitions_on_different_surfaces_are_independent(self) -> None:
        first = _surface()
        second = _surface()
        self.animator.zoom_to_point(first, (10.0, 10.0), self.projector)
        self.animator.zoom_to_point(second, (10.0, 10.0), self.projector)
        self.assertEqual(len(self.animator.active_transitions()), 2)

    def test_cancel_leaves_intermediate_state(self) -> None:
        surface = _surface(scale=1.0)
        transition = self.animator.zoom_to_point(surface, (100.0, 50.0), self.projector)
        self.runner.tick(0.5)
        self.assertAlmostEqual(surface.local_scale, 3.0)

        self.assertTrue(self.animator.cancel(surface))
        self.runner.tick(0.5)

        self.assertAlmostEqual(surface.local_scale, 3.0)
        self.assertEqual(self.animator.state(surface), "idle")
        assert transition is not None
        self.assertTrue(transition.cancelled)
        self.assertFalse(transition.is_complete)

    def test_cancel_when_idle_returns_false(self) -> None:
        self.assertFalse(self.animator.cancel(_surface()))

    def test_zoom_to_point_duration_shrinks_toward_max(self) -> None:
        durations = []
        for scale in (1.0, 2.0, 3.0, 4.0, 4.5):
            transition = self.animator.zoom_to_point(_surface(scale), (0.0, 0.0), self.projector)
            assert transition is not None
            durations.append(transition.duration)
        self.assertEqual(durations, sorted(durations, reverse=True))
        self.assertEqual(len(set(durations)), len(durations))
        self.assertEqual(durations[0], 1.0)


if __name__ == "__main__":
    unittest.main()
