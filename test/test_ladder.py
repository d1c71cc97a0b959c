"""Test cases for the ladder rungs."""

import unittest

import pytest

from regatta_course.config import Bounds
from regatta_course.ladder import build_ladder_rungs
from regatta_course.ladder import rung_count
from regatta_course.ladder import viewport_crossings
from regatta_course.point import Point


VIEWPORT = Bounds(min_x=-700, max_x=700, min_y=-210, max_y=1190)
MARK = Point(0.0, 1000.0)


class TestRungCount(unittest.TestCase):
    """Rungs reach 10% past the start line."""

    def test_rung_count(self):
        self.assertEqual(rung_count(1000), 12)
        self.assertEqual(rung_count(1000, 250), 6)
        self.assertEqual(rung_count(500), 7)


class TestViewportCrossings(unittest.TestCase):
    """Test cases for clipping a segment against the viewport edges."""

    def test_horizontal_segment(self):
        crossings = viewport_crossings(Point(2000, 500), Point(-2000, 500), VIEWPORT)

        self.assertEqual([point for _, point in crossings], [Point(-700, 500), Point(700, 500)])
        self.assertAlmostEqual(crossings[0][0], 0.675)
        self.assertAlmostEqual(crossings[1][0], 0.325)

    def test_vertical_segment_only_checks_horizontal_edges(self):
        crossings = viewport_crossings(Point(0, -1000), Point(0, 1000), VIEWPORT)
        self.assertEqual([point for _, point in crossings], [Point(0, -210)])

    def test_close_crossings_are_ordered_by_y(self):
        bounds = Bounds(min_x=-10, max_x=10, min_y=-100, max_y=100)
        crossings = viewport_crossings(Point(0.2, -1000), Point(0.4, 1000), bounds)

        self.assertEqual(len(crossings), 2)
        self.assertEqual(crossings[0][1].y, -100)
        self.assertEqual(crossings[1][1].y, 100)

    def test_segment_outside_viewport(self):
        self.assertEqual(viewport_crossings(Point(-2000, 1500), Point(2000, 1500), VIEWPORT), [])

    def test_segment_inside_viewport(self):
        self.assertEqual(viewport_crossings(Point(-100, 0), Point(100, 0), VIEWPORT), [])


class TestBuildLadderRungs(unittest.TestCase):
    """Test cases for laying the rungs downwind of the mark."""

    def test_rungs_square_to_north_wind(self):
        rungs = build_ladder_rungs(MARK, 0, 1000, VIEWPORT)

        self.assertEqual(len(rungs), 12)
        for index, rung in enumerate(rungs):
            self.assertEqual(rung.index, index)
            self.assertEqual(rung.distance, index * 100)
            self.assertAlmostEqual(rung.center.x, 0.0)
            self.assertAlmostEqual(rung.center.y, 1000 - index * 100)
            self.assertAlmostEqual(rung.start.distance(rung.end), 4000)
            self.assertAlmostEqual(rung.rotation, 0.0, places=6)
            self.assertAlmostEqual(rung.label_anchor.x, -700)
            self.assertEqual(sorted(round(point.x) for point in rung.visible), [-700, 700])

    def test_rotation_is_folded_for_readable_labels(self):
        rungs = build_ladder_rungs(MARK, 45, 1000, VIEWPORT)

        self.assertTrue(rungs)
        for rung in rungs:
            self.assertAlmostEqual(rung.rotation, -45.0)
            self.assertGreaterEqual(rung.rotation, -90)
            self.assertLessEqual(rung.rotation, 90)

    def test_rungs_follow_the_wind(self):
        rungs = build_ladder_rungs(MARK, 90, 1000, VIEWPORT)
        # wind from the right, the rungs stand upright and move towards -X
        self.assertAlmostEqual(rungs[0].center.x, 0.0)
        self.assertAlmostEqual(rungs[1].center.x, -100.0)
        self.assertAlmostEqual(abs(rungs[0].rotation), 90.0)

    def test_rungs_outside_viewport_are_skipped(self):
        bounds = Bounds(min_x=-50, max_x=50, min_y=850, max_y=1100)
        rungs = build_ladder_rungs(MARK, 0, 1000, bounds)

        self.assertEqual([rung.index for rung in rungs], [0, 1])
        for rung in rungs:
            self.assertEqual(sorted(round(point.x) for point in rung.visible), [-50, 50])

    def test_rungs_without_crossing_are_skipped(self):
        # short rungs that fit entirely inside a large viewport never cross its edges
        bounds = Bounds(min_x=-1000, max_x=1000, min_y=-1000, max_y=1000)
        self.assertEqual(build_ladder_rungs(Point(0, 100), 0, 100, bounds), [])

    def test_custom_step(self):
        rungs = build_ladder_rungs(MARK, 0, 1000, VIEWPORT, step=200)
        self.assertEqual([rung.distance for rung in rungs], [0, 200, 400, 600, 800, 1000, 1200])


@pytest.mark.parametrize("step", [0, -100])
def test_rejects_non_positive_step(step):
    with pytest.raises(ValueError, match="Rung step must be positive"):
        build_ladder_rungs(MARK, 0, 1000, VIEWPORT, step=step)
