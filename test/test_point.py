"""Test cases for the Point class."""

import unittest
from dataclasses import FrozenInstanceError

import numpy as np

from regatta_course.point import Point


class TestPoint(unittest.TestCase):
    """Test cases for the Point class."""

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.point = Point(10.0, 20.0)

    def test_init(self):
        self.assertEqual(self.point.x, 10.0)
        self.assertEqual(self.point.y, 20.0)

    def test_is_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            self.point.x = 5.0  # type: ignore

    def test_distance(self):
        """Test distance calculation between points."""
        self.assertEqual(self.point.distance(Point(13.0, 24.0)), 5.0)
        self.assertEqual(self.point.distance(self.point), 0.0)

    def test_translate_cardinal_directions(self):
        origin = Point(0.0, 0.0)

        up = origin.translate(0.0, 1.0)
        np.testing.assert_allclose([up.x, up.y], [0.0, 1.0], atol=1e-8)

        right = origin.translate(90.0, 1.0)
        np.testing.assert_allclose([right.x, right.y], [1.0, 0.0], atol=1e-8)

        left = origin.translate(270.0, 2.0)
        np.testing.assert_allclose([left.x, left.y], [-2.0, 0.0], atol=1e-8)

    def test_translate_zero_distance_is_exact(self):
        self.assertEqual(self.point.translate(123.0, 0.0), self.point)

    def test_rotate(self):
        rotated = Point(0.0, 1.0).rotate(Point(0.0, 0.0), 90)
        np.testing.assert_allclose([rotated.x, rotated.y], [-1.0, 0.0], atol=1e-12)

    def test_eq_and_hash(self):
        self.assertEqual(Point(1.0, 2.0), Point(1.0, 2.0))
        self.assertNotEqual(Point(1.0, 2.0), Point(2.0, 1.0))
        self.assertEqual(len({Point(1.0, 2.0), Point(1.0, 2.0)}), 1)

    def test_arithmetic(self):
        self.assertEqual(self.point + Point(1.0, 1.0), Point(11.0, 21.0))
        self.assertEqual(self.point - (1.0, 2.0), Point(9.0, 18.0))
        self.assertEqual(self.point + np.array([1.0, -1.0]), Point(11.0, 19.0))
        self.assertEqual(self.point * 2, Point(20.0, 40.0))

    def test_numpy_round_trip(self):
        np.testing.assert_array_equal(self.point.to_numpy(), [10.0, 20.0])
        self.assertEqual(Point.from_numpy(np.array([3.0, 4.0])), Point(3.0, 4.0))

    def test_to_shapely(self):
        shapely_point = self.point.to_shapely()
        self.assertEqual((shapely_point.x, shapely_point.y), (10.0, 20.0))

    def test_str(self):
        self.assertEqual(str(Point(1.0, 2.5)), "Point(1.00, 2.50)")
