"""Performance model of a one-design keelboat.

The polar is an analytic approximation of a J/70-like boat: it is meant to give
plausible laylines, not to replace measured polars.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast
import math

import numpy as np

from regatta_course.utils import normalize_angle


NO_GO_ANGLE = 30.0
HULL_SPEED_LIMIT = 8.5
PLANING_WIND_SPEED = 14.0

# (wind speed in knots, upwind TWA in degrees)
_POINTING_BREAKPOINTS = ((4.0, 50.0), (10.0, 42.0), (20.0, 38.0))


@dataclass(frozen=True)
class TackingAngles:
    """Compass headings sailed on each tack when beating."""

    port_tack: float
    starboard_tack: float
    twa: float


@dataclass(frozen=True)
class PolarDiagram:
    """Boat speed sampled over the true wind angle for one wind speed."""

    wind_speed: float
    points: tuple[tuple[float, float], ...]  # (twa, boat speed)
    max_speed: float
    scale_max: float
    rings: tuple[float, ...]

    def mirrored(self) -> tuple[tuple[float, float], ...]:
        """Full outline: the sampled side followed by the mirrored side (negative angles)."""
        left = tuple((-angle, speed) for angle, speed in reversed(self.points))
        return self.points + left


def upwind_pointing_angle(wind_speed: float) -> float:
    """Optimal true wind angle for beating, in degrees off the wind.

    50° up to 4 kn, 42° at 10 kn and 38° from 20 kn, linearly interpolated in between.
    """
    speeds, angles = zip(*_POINTING_BREAKPOINTS)
    return cast(float, float(np.interp(wind_speed, speeds, angles)))


def tacking_angles(wind_direction: float, wind_speed: float) -> TackingAngles:
    """Headings on port (wind over the left side) and starboard tack.

    Args:
        wind_direction: The direction the wind blows FROM in degrees
        wind_speed: The true wind speed in knots
    """
    twa = upwind_pointing_angle(wind_speed)
    return TackingAngles(
        port_tack=normalize_angle(wind_direction + twa),
        starboard_tack=normalize_angle(wind_direction - twa),
        twa=twa,
    )


def base_max_speed(wind_speed: float) -> float:
    """Upwind target speed of the boat in knots, capped at hull speed."""
    if wind_speed < 10:
        # ramp up quickly in light air, with a floor so the boat never stalls on screen
        speed = max(0.7 * wind_speed, 3 + wind_speed / 10)
    else:
        # diminishing returns once the hull approaches displacement speed
        speed = 6.2 + 0.1 * (wind_speed - 10)
    return min(speed, HULL_SPEED_LIMIT)


def _smoothstep(t: float) -> float:
    return t * t * (3 - 2 * t)


def boat_speed(twa: float, wind_speed: float) -> float:
    """Speed through the water in knots.

    Args:
        twa: True wind angle in degrees; values above 180 are reflected (``360 - twa``)
        wind_speed: The true wind speed in knots

    Returns:
        float: 0 inside the no-go zone, an eased ramp up to the target speed at the
            optimal pointing angle, then a smoothstep blend through the beam reach
            (1.15x target) to the run (0.95x target, 1.3x when planing above 14 kn),
            never above hull speed
    """
    angle = normalize_angle(twa)
    angle = abs(360 - angle if angle > 180 else angle)

    if angle < NO_GO_ANGLE:
        return 0.0

    max_speed = base_max_speed(wind_speed)
    optimal_twa = upwind_pointing_angle(wind_speed)

    # reach the target exactly at the optimal TWA so the VMG peaks there
    if angle < optimal_twa:
        progress = (angle - NO_GO_ANGLE) / (optimal_twa - NO_GO_ANGLE)
        return max_speed * math.sin(progress * math.pi / 2)

    reach_speed = max_speed * 1.15
    if wind_speed > PLANING_WIND_SPEED:
        downwind_speed = max_speed * 1.3
    else:
        downwind_speed = max_speed * 0.95

    if angle <= 90:
        t = (angle - optimal_twa) / (90 - optimal_twa)  # pylint: disable=invalid-name
        speed = max_speed + (reach_speed - max_speed) * _smoothstep(t)
    else:
        t = (angle - 90) / 90  # pylint: disable=invalid-name
        speed = reach_speed + (downwind_speed - reach_speed) * _smoothstep(t)

    # the reach and planing multipliers may not lift the boat past hull speed either
    return min(speed, HULL_SPEED_LIMIT)


def vmg(twa: float, wind_speed: float) -> float:
    """Velocity made good towards (positive) or away from (negative) the wind, in knots."""
    return boat_speed(twa, wind_speed) * math.cos(math.radians(twa))


def polar_diagram(wind_speed: float, step: float = 2) -> PolarDiagram:
    """Samples the polar from 0° to 180° for display.

    ``scale_max`` is the outer ring: the next even speed above the fastest point plus
    2 kn, never below 10 kn. ``rings`` are the even speeds inside it.
    """
    if step <= 0:
        raise ValueError(f"Polar step must be positive, got {step}")

    angles = np.arange(0, 180 + step / 2, step)
    points = tuple((float(angle), boat_speed(float(angle), wind_speed)) for angle in angles if angle <= 180)
    max_speed = max(speed for _, speed in points)

    scale_max = max(math.ceil(max_speed / 2) * 2 + 2, 10)
    rings = tuple(float(speed) for speed in range(2, scale_max, 2))

    return PolarDiagram(
        wind_speed=wind_speed,
        points=points,
        max_speed=max_speed,
        scale_max=float(scale_max),
        rings=rings,
    )
