"""Tactical zones of the playing field.

Two bands split the leg at 15% and 85% of its length. Between them the field is cut by
the bisectors of the wind line and each layline (as seen from the mark):

* ``can_lay``: between the two bisectors, both tacks still pay
* ``committed_left`` / ``committed_right``: outside a bisector, the boat is committed
  to the tack that leads back to the middle
* ``start_zone``: below the lower band, down to the start line
* ``mark_zone``: above the upper band, up to the mark

Bisector crossings are clamped to the field's width at their height so no zone leaks
outside the field polygon.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from regatta_course.point import Point
from regatta_course.utils import bearing
from regatta_course.utils import bisect_angles
from regatta_course.utils import normalize_angle


LOWER_BAND = 0.15
UPPER_BAND = 0.85
_FLAT_SEGMENT = 1e-9

_logger = logging.getLogger(__name__)

Polygon = tuple[Point, ...]


@dataclass(frozen=True)
class Zones:
    """The five zone polygons, each an implicitly closed ring of points."""

    mark_zone: Polygon
    start_zone: Polygon
    can_lay: Polygon
    committed_left: Polygon
    committed_right: Polygon

    def as_dict(self) -> dict[str, Polygon]:
        return {
            "mark_zone": self.mark_zone,
            "start_zone": self.start_zone,
            "can_lay": self.can_lay,
            "committed_left": self.committed_left,
            "committed_right": self.committed_right,
        }


def x_on_field_edge(start: Point, corner: Point, mark: Point, target_y: float) -> float:
    """X of the field outline on one side at height ``target_y``.

    Above the corner the outline is the layline to the mark, below it the leg from the
    start mark to the corner. A segment without height returns the corner's X.
    """
    if target_y > corner.y:
        height = mark.y - corner.y
        if abs(height) < _FLAT_SEGMENT:
            return corner.x
        fraction = (target_y - corner.y) / height
        return (corner + (mark - corner) * fraction).x

    height = corner.y - start.y
    if abs(height) < _FLAT_SEGMENT:
        return corner.x
    fraction = (target_y - start.y) / height
    return (start + (corner - start) * fraction).x


def _clamp(x: float, left_x: float, right_x: float) -> float:
    """Keeps ``x`` between the field edges at one height."""
    return min(max(x, left_x), right_x)


def x_on_bearing(origin: Point, angle: float, target_y: float) -> float:
    """X where the line from ``origin`` along ``angle`` reaches height ``target_y``."""
    return origin.x + (target_y - origin.y) * math.tan(math.radians(angle))


def build_zones(
    pin: Point,
    rc: Point,
    mark: Point,
    left_corner: Point,
    right_corner: Point,
    wind_direction: float,
    course_length: float,
    logger: logging.Logger | None = None,
) -> Zones:
    """Cuts the playing field into the five tactical zones.

    Args:
        pin: Left end of the start line
        rc: Right end of the start line (committee boat)
        mark: The windward mark
        left_corner: Resolved left corner of the field
        right_corner: Resolved right corner of the field
        wind_direction: The direction the wind blows FROM in degrees
        course_length: Length of the leg in meters
        logger: Optional logger, the module logger otherwise
    """
    logger = logger or _logger
    y_bottom = course_length * LOWER_BAND
    y_top = course_length * UPPER_BAND

    # bearings seen from the mark
    wind_line_angle = normalize_angle(wind_direction + 180)
    left_angle = bearing(mark, left_corner)
    right_angle = bearing(mark, right_corner)
    left_bisector = bisect_angles(wind_line_angle, left_angle)
    right_bisector = bisect_angles(wind_line_angle, right_angle)

    left_top = Point(x_on_field_edge(pin, left_corner, mark, y_top), y_top)
    right_top = Point(x_on_field_edge(rc, right_corner, mark, y_top), y_top)
    left_bottom = Point(x_on_field_edge(pin, left_corner, mark, y_bottom), y_bottom)
    right_bottom = Point(x_on_field_edge(rc, right_corner, mark, y_bottom), y_bottom)

    mark_zone = (mark, right_top, left_top)

    start_zone = [left_bottom]
    if left_corner.y < y_bottom:
        start_zone.append(left_corner)
    start_zone += [pin, rc]
    if right_corner.y < y_bottom:
        start_zone.append(right_corner)
    start_zone.append(right_bottom)

    # either bisector may run past either edge once the wind line leans
    warn_left_top = _clamp(x_on_bearing(mark, left_bisector, y_top), left_top.x, right_top.x)
    warn_left_bottom = _clamp(x_on_bearing(mark, left_bisector, y_bottom), left_bottom.x, right_bottom.x)
    warn_right_top = _clamp(x_on_bearing(mark, right_bisector, y_top), left_top.x, right_top.x)
    warn_right_bottom = _clamp(x_on_bearing(mark, right_bisector, y_bottom), left_bottom.x, right_bottom.x)

    if warn_left_top > warn_right_top:
        logger.debug("Bisectors cross at the upper band, merging them at the middle")
        warn_left_top = warn_right_top = (warn_left_top + warn_right_top) / 2
    if warn_left_bottom > warn_right_bottom:
        logger.debug("Bisectors cross at the lower band, merging them at the middle")
        warn_left_bottom = warn_right_bottom = (warn_left_bottom + warn_right_bottom) / 2

    bisector_left_top = Point(warn_left_top, y_top)
    bisector_left_bottom = Point(warn_left_bottom, y_bottom)
    bisector_right_top = Point(warn_right_top, y_top)
    bisector_right_bottom = Point(warn_right_bottom, y_bottom)

    can_lay = (bisector_left_top, bisector_right_top, bisector_right_bottom, bisector_left_bottom)

    committed_left = [left_top, bisector_left_top, bisector_left_bottom, left_bottom]
    if y_bottom < left_corner.y < y_top:
        committed_left.append(left_corner)

    committed_right = [bisector_right_top, right_top]
    if y_bottom < right_corner.y < y_top:
        committed_right.append(right_corner)
    committed_right += [right_bottom, bisector_right_bottom]

    return Zones(
        mark_zone=mark_zone,
        start_zone=tuple(start_zone),
        can_lay=can_lay,
        committed_left=tuple(committed_left),
        committed_right=tuple(committed_right),
    )
