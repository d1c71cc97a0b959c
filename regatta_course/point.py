"""A plane coordinate in the course frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import numpy as np
from shapely.affinity import rotate as shapely_rotate
from shapely.affinity import translate as shapely_translate
from shapely.geometry import Point as ShapelyPoint


@dataclass(frozen=True)
class Point:
    """A point of the course in meters.

    ``x`` grows to the right of the course axis, ``y`` grows from the start line
    towards the mark. This is the world frame, not a screen frame.
    """

    x: float
    y: float

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Point:
        return cls(float(array[0]), float(array[1]))

    def distance(self, other: Point) -> float:
        """Computes the Euclidean distance to another point.

        Args:
            other: The other point

        Returns:
            The Euclidean distance in meters
        """
        return cast(float, float(np.linalg.norm(self.to_numpy() - other.to_numpy())))

    def translate(self, direction: float, distance: float) -> Point:
        """Moves this point along a compass bearing.

        Args:
            direction: The direction angle in degrees (``0`` is +Y, clockwise)
            distance: The distance to move in meters

        Returns:
            The translated point
        """
        x_offset = distance * np.sin(np.radians(direction))
        y_offset = distance * np.cos(np.radians(direction))

        moved = shapely_translate(ShapelyPoint(self.x, self.y), xoff=x_offset, yoff=y_offset)
        return Point(float(moved.x), float(moved.y))

    def rotate(self, center: Point, angle: float) -> Point:
        """Rotates this point about ``center`` by ``angle`` degrees.

        Positive angles turn counter-clockwise (standard rotation matrix), which is the
        opposite sense of a compass bearing.
        """
        rotated = shapely_rotate(ShapelyPoint(self.x, self.y), angle, origin=(center.x, center.y))
        return Point(float(rotated.x), float(rotated.y))

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def to_shapely(self) -> ShapelyPoint:
        return ShapelyPoint(self.x, self.y)

    def __str__(self) -> str:
        return f"Point({self.x:.2f}, {self.y:.2f})"

    def __add__(self, other: Point | np.ndarray | tuple | list) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other: Point | np.ndarray | tuple | list) -> Point:
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        return Point(self.x - other[0], self.y - other[1])

    def __mul__(self, other: float | int) -> Point:
        return Point(self.x * other, self.y * other)


ORIGIN = Point(0.0, 0.0)
