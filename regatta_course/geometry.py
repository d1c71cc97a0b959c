"""Course geometry: marks, laylines, playing field, ladder rungs, wind line and zones."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
import logging

from shapely.geometry import Polygon as ShapelyPolygon

from regatta_course.config import Bounds
from regatta_course.config import CourseConfig
from regatta_course.ground_vector import GroundVector
from regatta_course.ground_vector import Tack
from regatta_course.ground_vector import ground_vector
from regatta_course.ladder import DEFAULT_RUNG_STEP
from regatta_course.ladder import LadderRung
from regatta_course.ladder import build_ladder_rungs
from regatta_course.point import ORIGIN
from regatta_course.point import Point
from regatta_course.utils import intersect_lines
from regatta_course.utils import normalize_angle
from regatta_course.utils import project_point
from regatta_course.utils import rotate_point
from regatta_course.utils import segment_intersection
from regatta_course.utils import x_at_y0
from regatta_course.zones import Zones
from regatta_course.zones import build_zones


_logger = logging.getLogger(__name__)

# candidates closer than this to the mark are the mark itself
MIN_WIND_LINE_LENGTH = 1.0

Segment = tuple[Point, Point]


@dataclass(frozen=True)
class Laylines:
    """The four layline legs bounding the playing field."""

    pin_to_left: Segment
    left_to_mark: Segment
    rc_to_right: Segment
    right_to_mark: Segment


@dataclass(frozen=True)
class WindLine:
    """Line from the mark straight downwind. ``clipped`` is False when it could not be cut at the field."""

    start: Point
    end: Point
    clipped: bool


@dataclass(frozen=True)
class CourseGeometry:
    """Everything a renderer needs to draw one scenario of the course."""

    pin: Point
    rc: Point
    mark: Point
    left_corner: Point | None
    right_corner: Point | None
    field: tuple[Point, ...] | None  # pin, left corner, mark, right corner, rc
    laylines: Laylines | None
    ladder_rungs: tuple[LadderRung, ...]
    wind_line: WindLine | None
    zones: Zones | None
    port: GroundVector
    stbd: GroundVector
    pin_rotation: float
    rc_rotation: float

    def cog_for(self, tack: Tack | str) -> float:
        """Course over ground sailed on the given tack."""
        return self.port.cog if Tack.parse(tack) is Tack.PORT else self.stbd.cog

    def field_polygon(self) -> ShapelyPolygon | None:
        if self.field is None:
            return None
        return ShapelyPolygon([(point.x, point.y) for point in self.field])


class CourseGeometryBuilder:
    """Builds the course geometry for a configuration.

    The builder holds no state between calls, every call derives the geometry from the
    configuration it is given.

    Args:
        rung_step: Spacing of the ladder rungs in meters
        logger: Optional logger, the module logger otherwise
    """

    def __init__(self, rung_step: float = DEFAULT_RUNG_STEP, logger=None) -> None:
        if rung_step <= 0:
            raise ValueError(f"Rung step must be positive, got {rung_step}")
        self.rung_step = rung_step
        self.__logger = logger

    def build(self, config: CourseConfig, bounds: Bounds) -> CourseGeometry:
        pin, rc = self._start_line(config)
        mark = Point(config.mark_shift, config.course_length)

        port = ground_vector(
            config.wind.direction, config.wind.speed, config.current.direction, config.current.speed, Tack.PORT
        )
        stbd = ground_vector(
            config.wind.direction, config.wind.speed, config.current.direction, config.current.speed, Tack.STBD
        )

        left_corner, right_corner = self._corners(config, pin, rc, mark, port, stbd)

        field = None
        laylines = None
        wind_line = None
        zones = None
        if left_corner is not None and right_corner is not None:
            field = (pin, left_corner, mark, right_corner, rc)
            if config.show_laylines:
                laylines = Laylines(
                    pin_to_left=(pin, left_corner),
                    left_to_mark=(left_corner, mark),
                    rc_to_right=(rc, right_corner),
                    right_to_mark=(right_corner, mark),
                )
            if config.show_wind_line:
                wind_line = self._wind_line(config, pin, rc, mark, left_corner, right_corner)
            if config.show_zones:
                zones = build_zones(
                    pin,
                    rc,
                    mark,
                    left_corner,
                    right_corner,
                    config.wind.direction,
                    config.course_length,
                    logger=self.__logger,
                )
        else:
            self._log("Playing field is open, a layline never meets the start side", level="debug")

        ladder_rungs: tuple[LadderRung, ...] = ()
        if config.show_ladder_rungs:
            ladder_rungs = tuple(
                build_ladder_rungs(mark, config.wind.direction, config.course_length, bounds, self.rung_step)
            )

        return CourseGeometry(
            pin=pin,
            rc=rc,
            mark=mark,
            left_corner=left_corner,
            right_corner=right_corner,
            field=field,
            laylines=laylines,
            ladder_rungs=ladder_rungs,
            wind_line=wind_line,
            zones=zones,
            port=port,
            stbd=stbd,
            pin_rotation=-config.start_line_bias,
            rc_rotation=config.wind.direction,
        )

    def _start_line(self, config: CourseConfig) -> tuple[Point, Point]:
        """Pin and committee boat, symmetric about the origin before the bias rotation."""
        half = config.start_line_length / 2
        pin = rotate_point(Point(-half, 0.0), ORIGIN, config.start_line_bias)
        rc = rotate_point(Point(half, 0.0), ORIGIN, config.start_line_bias)
        return pin, rc

    def _corners(
        self,
        config: CourseConfig,
        pin: Point,
        rc: Point,
        mark: Point,
        port: GroundVector,
        stbd: GroundVector,
    ) -> tuple[Point | None, Point | None]:
        """Where a boat leaving each end of the line on the long tack meets the layline to the mark.

        A corner collapses to its start mark when the mark's layline reaches the start
        side beyond that mark, or when the crossing lies behind the start line.
        """
        mark_port_layline = normalize_angle(port.cog + 180)
        mark_stbd_layline = normalize_angle(stbd.cog + 180)

        left_corner = intersect_lines(pin, stbd.cog, mark, mark_port_layline)
        right_corner = intersect_lines(rc, port.cog, mark, mark_stbd_layline)
        if left_corner is None:
            self._log("Starboard track from the pin runs parallel to the port layline", level="debug")
        if right_corner is None:
            self._log("Port track from the committee boat runs parallel to the starboard layline", level="debug")

        if x_at_y0(mark_port_layline, config.course_length) > pin.x:
            self._log("Port layline passes inside the pin, left corner collapses to the pin", level="debug")
            left_corner = pin
        if x_at_y0(mark_stbd_layline, config.course_length) < rc.x:
            self._log("Starboard layline passes inside the committee boat, right corner collapses", level="debug")
            right_corner = rc

        if left_corner is not None and left_corner.y < 0:
            self._log("Left corner lies behind the start line, collapsing to the pin", level="debug")
            left_corner = pin
        if right_corner is not None and right_corner.y < 0:
            self._log("Right corner lies behind the start line, collapsing to the committee boat", level="debug")
            right_corner = rc

        return left_corner, right_corner

    def _wind_line(
        self,
        config: CourseConfig,
        pin: Point,
        rc: Point,
        mark: Point,
        left_corner: Point,
        right_corner: Point,
    ) -> WindLine:
        """Line from the mark downwind, cut at the nearest edge of the field below the mark."""
        downwind = normalize_angle(config.wind.direction + 180)

        edges = ((left_corner, pin), (pin, rc), (rc, right_corner))
        candidates = []
        for edge_start, edge_end in edges:
            crossing = segment_intersection(edge_start, edge_end, mark, downwind)
            if crossing is not None and crossing.y < mark.y:
                candidates.append(crossing)

        end = None
        shortest = float("inf")
        for candidate in candidates:
            length = candidate.distance(mark)
            if MIN_WIND_LINE_LENGTH < length < shortest:
                shortest = length
                end = candidate

        if end is None:
            self._log("Wind line does not meet the field edge, using a fixed length", level="debug")
            return WindLine(start=mark, end=project_point(mark, downwind, config.course_length), clipped=False)
        return WindLine(start=mark, end=end, clipped=True)

    def _log(self, message: str, level: str = "info") -> None:
        """Logs a message using the injected logger, or the module logger.

        Args:
            message (str): The message to log.
            level (str): The logging level (default is "info").
        """
        logger = self.__logger or _logger
        if level == "debug":
            logger.debug(message)
        elif level == "info":
            logger.info(message)
        elif level == "warning":
            logger.warning(message)
        elif level == "error":
            logger.error(message)
        else:
            raise ValueError(f"Unknown logging level: {level}")


def _as_config(config: CourseConfig | Mapping[str, Any]) -> CourseConfig:
    if isinstance(config, CourseConfig):
        return config
    return CourseConfig.model_validate(dict(config))


def _as_bounds(bounds: Bounds | Mapping[str, float] | None, config: CourseConfig) -> Bounds:
    if bounds is None:
        return Bounds.around(config)
    if isinstance(bounds, Bounds):
        return bounds
    return Bounds.model_validate(dict(bounds))


def build_course_geometry(
    config: CourseConfig | Mapping[str, Any],
    viewport_bounds: Bounds | Mapping[str, float] | None = None,
    logger=None,
) -> CourseGeometry:
    """Builds the full course geometry for one configuration.

    Args:
        config: The course configuration, or a mapping validated into one
        viewport_bounds: World-space viewport used only to clip the ladder rungs;
            defaults to ``Bounds.around(config)``
        logger: Optional logger for the degenerate-geometry fallbacks

    Raises:
        pydantic.ValidationError: If ``config`` or ``viewport_bounds`` violate their contracts.
    """
    course_config = _as_config(config)
    bounds = _as_bounds(viewport_bounds, course_config)
    return CourseGeometryBuilder(logger=logger).build(course_config, bounds)
