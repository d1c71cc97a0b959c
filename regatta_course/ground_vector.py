"""Composition of the through-water velocity with the current."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from regatta_course.performance import boat_speed
from regatta_course.performance import tacking_angles
from regatta_course.utils import direction_vector
from regatta_course.utils import normalize_angle
from regatta_course.utils import to_degrees


class Tack(str, Enum):
    """Side the wind comes over. On port the wind is on the left and the boat heads right of it."""

    PORT = "port"
    STBD = "stbd"

    @classmethod
    def parse(cls, value: Tack | str) -> Tack:
        if isinstance(value, Tack):
            return value
        normalized = str(value).strip().lower()
        if normalized == "starboard":
            normalized = "stbd"
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown tack: {value!r}. Must be 'port' or 'stbd'.") from None

    @property
    def opposite(self) -> Tack:
        return Tack.STBD if self is Tack.PORT else Tack.PORT


@dataclass(frozen=True)
class GroundVector:
    """Motion of the boat on one tack, through the water and over the ground."""

    tack: Tack
    twa: float  # degrees off the wind
    heading: float  # degrees, through the water
    boat_speed: float  # knots, through the water
    cog: float  # degrees, course over ground
    sog: float  # knots, speed over ground


def ground_vector(
    wind_direction: float,
    wind_speed: float,
    current_direction: float,
    current_speed: float,
    tack: Tack | str,
) -> GroundVector:
    """Course and speed over ground when beating on the given tack.

    Args:
        wind_direction: The direction the wind blows FROM in degrees
        wind_speed: The true wind speed in knots
        current_direction: The direction the current flows TO in degrees
        current_speed: The current speed in knots
        tack: ``Tack.PORT`` or ``Tack.STBD``

    Returns:
        GroundVector: heading through the water, COG in ``[0, 360)`` and SOG in knots
    """
    tack = Tack.parse(tack)
    angles = tacking_angles(wind_direction, wind_speed)
    speed = boat_speed(angles.twa, wind_speed)

    heading = angles.port_tack if tack is Tack.PORT else angles.starboard_tack

    boat_velocity = speed * direction_vector(heading)
    current_velocity = current_speed * direction_vector(current_direction)
    ground_velocity = boat_velocity + current_velocity

    cog = normalize_angle(to_degrees(np.arctan2(ground_velocity[0], ground_velocity[1])))
    sog = float(np.linalg.norm(ground_velocity))

    return GroundVector(
        tack=tack,
        twa=angles.twa,
        heading=heading,
        boat_speed=speed,
        cog=cog,
        sog=sog,
    )
