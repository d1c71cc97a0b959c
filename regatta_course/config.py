"""Configuration models for the course geometry with validation."""

from __future__ import annotations

from typing import Any
import math
import warnings

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

from regatta_course.utils import normalize_angle


class WindState(BaseModel):
    """True wind. ``direction`` is the bearing the wind blows FROM."""

    model_config = ConfigDict(frozen=True)

    direction: float = Field(0.0, allow_inf_nan=False, description="Degrees, normalized to [0, 360)")
    speed: float = Field(12.0, ge=0, allow_inf_nan=False, description="Wind speed in knots, at least 0")

    @field_validator("direction")
    @classmethod
    def normalize_direction(cls, direction: float) -> float:
        return normalize_angle(direction)

    @field_validator("speed")
    @classmethod
    def validate_speed(cls, speed: float) -> float:
        if not 1 <= speed <= 30:
            warnings.warn(f"Wind speed of {speed} kn is outside the modelled range of 1 to 30 kn.")
        return speed


class CurrentState(BaseModel):
    """Tidal current. ``direction`` is the bearing the current flows TO."""

    model_config = ConfigDict(frozen=True)

    direction: float = Field(90.0, allow_inf_nan=False, description="Degrees, normalized to [0, 360)")
    speed: float = Field(0.0, ge=0, allow_inf_nan=False, description="Current speed in knots, at least 0")

    @field_validator("direction")
    @classmethod
    def normalize_direction(cls, direction: float) -> float:
        return normalize_angle(direction)

    @field_validator("speed")
    @classmethod
    def validate_speed(cls, speed: float) -> float:
        if speed > 6:
            warnings.warn(f"Current of {speed} kn is stronger than the modelled maximum of 6 kn.")
        return speed


class CourseConfig(BaseModel):
    """Everything needed to lay out one windward leg.

    The world frame is the course frame: the start line is centred on the origin and
    the mark lies straight up the +Y axis at ``course_length``.
    """

    model_config = ConfigDict(frozen=True)

    wind: WindState = Field(default_factory=WindState)
    current: CurrentState = Field(default_factory=CurrentState)

    course_axis: float = Field(0.0, allow_inf_nan=False, description="Bearing from start to mark in degrees")
    course_length: float = Field(1000.0, gt=0, allow_inf_nan=False, description="Course length must be larger than 0")
    start_line_length: float = Field(
        200.0, gt=0, allow_inf_nan=False, description="Start line length must be larger than 0"
    )
    start_line_bias: float = Field(
        0.0, allow_inf_nan=False, description="Rotation of the start line about its middle in degrees"
    )
    mark_shift: float = Field(0.0, allow_inf_nan=False, description="Lateral offset of the mark in meters")

    show_ladder_rungs: bool = True
    show_laylines: bool = True
    show_wind_line: bool = True
    show_zones: bool = False

    @model_validator(mode="before")
    @classmethod
    def fold_flat_fields(cls, data: Any) -> Any:
        """Accept ``wind_direction=...`` style keywords next to the nested states."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for prefix in ("wind", "current"):
            direction = data.pop(f"{prefix}_direction", None)
            speed = data.pop(f"{prefix}_speed", None)
            if direction is None and speed is None:
                continue

            state = data.get(prefix) or {}
            if isinstance(state, BaseModel):
                state = state.model_dump()
            state = dict(state)
            if direction is not None:
                state["direction"] = direction
            if speed is not None:
                state["speed"] = speed
            data[prefix] = state
        return data

    @field_validator("course_axis")
    @classmethod
    def normalize_course_axis(cls, course_axis: float) -> float:
        return normalize_angle(course_axis)

    @field_validator("start_line_length")
    @classmethod
    def validate_start_line_length(cls, start_line_length: float) -> float:
        if not 50 <= start_line_length <= 500:
            warnings.warn(f"Start line length of {start_line_length}m is outside the usual range of 50m to 500m.")
        return start_line_length

    @field_validator("start_line_bias")
    @classmethod
    def validate_start_line_bias(cls, start_line_bias: float) -> float:
        if abs(start_line_bias) > 30:
            warnings.warn(
                f"Start line bias of {start_line_bias}° is beyond ±30°, the line will barely face the wind."
            )
        return start_line_bias

    @field_validator("mark_shift")
    @classmethod
    def validate_mark_shift(cls, mark_shift: float) -> float:
        if abs(mark_shift) > 300:
            warnings.warn(f"Mark shift of {mark_shift}m is beyond ±300m.")
        return mark_shift

    @model_validator(mode="after")
    def validate_proportions(self):
        """Warn when the start line is longer than the leg it starts."""
        if self.start_line_length > self.course_length:
            warnings.warn(
                f"The start line ({self.start_line_length}m) is longer than the course ({self.course_length}m)."
            )
        return self

    @property
    def start_line_offset(self) -> float:
        """How far the favoured end of the start line sits upwind of the other end, in meters."""
        return abs(self.start_line_length * math.sin(math.radians(self.start_line_bias)))

    def with_wind_rotated(self, delta: float) -> CourseConfig:
        """Returns a copy with the wind veered by ``delta`` degrees (backed if negative)."""
        wind = WindState(direction=self.wind.direction + delta, speed=self.wind.speed)
        return self.model_copy(update={"wind": wind})

    def reset(self) -> CourseConfig:
        return DEFAULT_CONFIG

    def __str__(self) -> str:
        return self.model_dump_json(indent=4)


class Bounds(BaseModel):
    """Axis-aligned viewport rectangle in world meters, used to clip ladder rungs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_x: float = Field(..., alias="minX", allow_inf_nan=False)
    max_x: float = Field(..., alias="maxX", allow_inf_nan=False)
    min_y: float = Field(..., alias="minY", allow_inf_nan=False)
    max_y: float = Field(..., alias="maxY", allow_inf_nan=False)

    @model_validator(mode="after")
    def validate_extent(self):
        if self.min_x >= self.max_x or self.min_y >= self.max_y:
            raise ValueError(
                f"Bounds must have min < max on both axes, got x=[{self.min_x}, {self.max_x}], "
                f"y=[{self.min_y}, {self.max_y}]"
            )
        return self

    @classmethod
    def around(cls, config: CourseConfig, margin: float = 0.0) -> Bounds:
        """A square viewport of ``1.4 * course_length`` with the start line at 15% of its height."""
        span = config.course_length * 1.4
        return cls(
            min_x=-span / 2 + margin,
            max_x=span / 2 - margin,
            min_y=-0.15 * span + margin,
            max_y=0.85 * span - margin,
        )

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


DEFAULT_CONFIG = CourseConfig(
    wind=WindState(direction=0, speed=12),
    current=CurrentState(direction=90, speed=0),
    course_axis=0,
    course_length=1000,
    start_line_length=200,
    start_line_bias=0,
    mark_shift=0,
    show_ladder_rungs=True,
    show_laylines=True,
    show_wind_line=True,
    show_zones=False,
)
