"""Angle and vector utilities for the course geometry.

All bearings follow the compass convention: ``0`` points along +Y (from the start
line towards the mark), ``90`` along +X, angles grow clockwise.
"""

from typing import cast

import numpy as np

from regatta_course.point import Point


PARALLEL_TOLERANCE = 1e-4
SEGMENT_TOLERANCE = 0.1


def to_radians(degrees: float) -> float:
    return cast(float, float(np.radians(degrees)))


def to_degrees(radians: float) -> float:
    return cast(float, float(np.degrees(radians)))


def normalize_angle(angle: float) -> float:
    """Normalizes an angle in degrees to ``[0, 360)``."""
    normalized = angle % 360
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if normalized >= 360 else float(normalized)


def angular_distance(angle1: float, angle2: float) -> float:
    """Calculate the angular distance between two angles.

    Args:
        angle1: First angle in degrees
        angle2: Second angle in degrees

    Returns:
        float: The angular distance in degrees, ranged from 0 to 180
    """
    diff = (angle2 - angle1) % 360
    return min(diff, 360 - diff)


def bearing(start: Point, end: Point) -> float:
    """Returns the compass bearing from the start point to the end point.

    Args:
        start: The start location
        end: The end location

    Returns:
        float: The bearing ranged from 0 to 360 degrees
    """
    angle_rad = np.arctan2(end.x - start.x, end.y - start.y)
    return normalize_angle(to_degrees(angle_rad))


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotates ``point`` about ``center`` by ``angle`` degrees (counter-clockwise positive)."""
    return point.rotate(center, angle)


def project_point(start: Point, angle: float, distance: float) -> Point:
    """Returns the point reached by moving ``distance`` meters from ``start`` along the bearing ``angle``."""
    return start.translate(angle, distance)


def direction_vector(angle: float) -> np.ndarray:
    """Unit vector of a compass bearing.

    We need to use sin, cos and not cos, sin because of 0° = +Y and 90° = +X.
    """
    rad = np.radians(angle)
    return np.array([np.sin(rad), np.cos(rad)])


def intersect_lines(p1: Point, angle1: float, p2: Point, angle2: float) -> Point | None:
    """Intersection of two infinite lines, each given by a point and a compass bearing.

    Args:
        p1: A point on the first line
        angle1: Bearing of the first line in degrees
        p2: A point on the second line
        angle2: Bearing of the second line in degrees

    Returns:
        The intersection, or None if the lines are parallel (``|det| < 1e-4``)
    """
    v1 = direction_vector(angle1)
    v2 = direction_vector(angle2)

    # p1 + t * v1 = p2 + u * v2
    dx = p2.x - p1.x  # pylint: disable=invalid-name
    dy = p2.y - p1.y  # pylint: disable=invalid-name

    det = v1[0] * (-v2[1]) - v1[1] * (-v2[0])
    if abs(det) < PARALLEL_TOLERANCE:
        return None

    t = (dx * (-v2[1]) - dy * (-v2[0])) / det  # pylint: disable=invalid-name
    return Point(float(p1.x + t * v1[0]), float(p1.y + t * v1[1]))


def bisect_angles(angle1: float, angle2: float) -> float:
    """Bearing halfway between two bearings, computed from the vector sum.

    The vector sum keeps the result on the short arc across the 0°/360° boundary.
    """
    summed = direction_vector(angle1) + direction_vector(angle2)
    return normalize_angle(to_degrees(np.arctan2(summed[0], summed[1])))


def x_at_y0(angle: float, start_y: float) -> float:
    """X coordinate where a line leaving ``(0, start_y)`` along ``angle`` crosses ``y = 0``.

    Lines running (almost) parallel to the X axis never cross; they are reported as
    ``-inf`` when heading to the left half (``angle > 180``) and ``+inf`` otherwise.
    """
    rad = np.radians(angle)
    if abs(np.cos(rad)) < 0.001:
        return float("-inf") if angle > 180 else float("inf")
    return float(-start_y * np.tan(rad))


def segment_intersection(
    segment_start: Point,
    segment_end: Point,
    line_start: Point,
    line_angle: float,
) -> Point | None:
    """Intersection of a finite segment with an infinite line.

    Args:
        segment_start: First end of the segment
        segment_end: Second end of the segment
        line_start: A point on the line
        line_angle: Bearing of the line in degrees

    Returns:
        The intersection if it lies within the segment's bounding box (with a 0.1 m
        tolerance), None otherwise
    """
    segment_angle = bearing(segment_start, segment_end)
    intersection = intersect_lines(segment_start, segment_angle, line_start, line_angle)
    if intersection is None:
        return None

    min_x = min(segment_start.x, segment_end.x) - SEGMENT_TOLERANCE
    max_x = max(segment_start.x, segment_end.x) + SEGMENT_TOLERANCE
    min_y = min(segment_start.y, segment_end.y) - SEGMENT_TOLERANCE
    max_y = max(segment_start.y, segment_end.y) + SEGMENT_TOLERANCE

    if min_x <= intersection.x <= max_x and min_y <= intersection.y <= max_y:
        return intersection
    return None
