"""Ladder rungs: distance-to-mark lines drawn square to the wind."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
import math

from regatta_course.config import Bounds
from regatta_course.point import Point
from regatta_course.utils import normalize_angle
from regatta_course.utils import project_point
from regatta_course.utils import to_degrees


DEFAULT_RUNG_STEP = 100.0
# rungs reach further than any sensible viewport so they always cross it
RUNG_WIDTH_FACTOR = 4.0
RUNG_OVERSHOOT = 1.1
AXIS_EPSILON = 0.01
LABEL_TIE_DISTANCE = 1.0


@dataclass(frozen=True)
class LadderRung:
    """One rung of the ladder.

    ``start`` and ``end`` are the full rung, ``visible`` its part inside the viewport.
    ``rotation`` is the rung's direction in degrees counter-clockwise from +X, folded
    into ``[-90, 90]`` so a label along it is never upside down.
    """

    index: int
    distance: float
    center: Point
    start: Point
    end: Point
    visible: tuple[Point, Point]
    label_anchor: Point
    rotation: float


def _compare_anchors(a: tuple[float, Point], b: tuple[float, Point]) -> int:
    """Leftmost first, crossings less than a meter apart in X are ordered by Y."""
    pa, pb = a[1], b[1]
    if abs(pa.x - pb.x) > LABEL_TIE_DISTANCE:
        return -1 if pa.x < pb.x else 1
    if pa.y == pb.y:
        return 0
    return -1 if pa.y < pb.y else 1


def viewport_crossings(start: Point, end: Point, bounds: Bounds) -> list[tuple[float, Point]]:
    """Points where the segment ``start -> end`` crosses the edges of ``bounds``.

    Returns:
        ``(t, point)`` pairs, ``t`` being the segment parameter in ``[0, 1]``, ordered
        leftmost first (ties within a meter broken by lowest Y)
    """
    dx = end.x - start.x  # pylint: disable=invalid-name
    dy = end.y - start.y  # pylint: disable=invalid-name
    crossings: list[tuple[float, Point]] = []

    if abs(dx) > AXIS_EPSILON:
        for edge_x in (bounds.min_x, bounds.max_x):
            t = (edge_x - start.x) / dx  # pylint: disable=invalid-name
            if 0 <= t <= 1:
                y = start.y + t * dy
                if bounds.min_y <= y <= bounds.max_y:
                    crossings.append((t, Point(edge_x, y)))

    if abs(dy) > AXIS_EPSILON:
        for edge_y in (bounds.min_y, bounds.max_y):
            t = (edge_y - start.y) / dy  # pylint: disable=invalid-name
            if 0 <= t <= 1:
                x = start.x + t * dx
                if bounds.min_x <= x <= bounds.max_x:
                    crossings.append((t, Point(x, edge_y)))

    return sorted(crossings, key=cmp_to_key(_compare_anchors))


def _visible_part(
    start: Point, end: Point, crossings: list[tuple[float, Point]], bounds: Bounds
) -> tuple[Point, Point]:
    candidates = list(crossings)
    if bounds.contains(start.x, start.y):
        candidates.append((0.0, start))
    if bounds.contains(end.x, end.y):
        candidates.append((1.0, end))

    first = min(candidates, key=lambda candidate: candidate[0])
    last = max(candidates, key=lambda candidate: candidate[0])
    return first[1], last[1]


def _label_rotation(start: Point, end: Point) -> float:
    angle = to_degrees(math.atan2(end.y - start.y, end.x - start.x))
    if angle > 90:
        angle -= 180
    if angle < -90:
        angle += 180
    return angle


def rung_count(course_length: float, step: float = DEFAULT_RUNG_STEP) -> int:
    """Number of rungs laid from the mark: enough to pass 10% beyond the start line."""
    return math.ceil(course_length * RUNG_OVERSHOOT / step) + 1


def build_ladder_rungs(
    mark: Point,
    wind_direction: float,
    course_length: float,
    bounds: Bounds,
    step: float = DEFAULT_RUNG_STEP,
) -> list[LadderRung]:
    """Lays rungs every ``step`` meters downwind of the mark.

    Rungs that never cross the viewport edges are left out, the first rung passes
    through the mark.

    Args:
        mark: The windward mark
        wind_direction: The direction the wind blows FROM in degrees
        course_length: Length of the leg in meters, sets how many rungs and how wide
        bounds: The viewport rectangle in world meters
        step: Spacing between rungs in meters
    """
    if step <= 0:
        raise ValueError(f"Rung step must be positive, got {step}")

    half_width = course_length * RUNG_WIDTH_FACTOR / 2
    downwind = normalize_angle(wind_direction + 180)
    rung_angle = normalize_angle(wind_direction + 90)

    rungs: list[LadderRung] = []
    for index in range(rung_count(course_length, step)):
        distance = float(index * step)
        center = project_point(mark, downwind, distance)
        start = project_point(center, rung_angle, half_width)
        end = project_point(center, rung_angle + 180, half_width)

        crossings = viewport_crossings(start, end, bounds)
        if not crossings:
            continue

        rungs.append(
            LadderRung(
                index=index,
                distance=distance,
                center=center,
                start=start,
                end=end,
                visible=_visible_part(start, end, crossings, bounds),
                label_anchor=crossings[0][1],
                rotation=_label_rotation(start, end),
            )
        )
    return rungs
