"""Boat markers placed on the course by the user."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace

from regatta_course.geometry import CourseGeometry
from regatta_course.ground_vector import Tack
from regatta_course.point import Point


@dataclass(frozen=True)
class Boat:
    """A yacht on the course, drawn along the ground track of its tack."""

    id: str
    position: Point
    tack: Tack
    visible: bool = False

    def moved_to(self, position: Point) -> Boat:
        return replace(self, position=position)

    def with_tack_toggled(self) -> Boat:
        return replace(self, tack=self.tack.opposite)

    def shown(self, visible: bool = True) -> Boat:
        return replace(self, visible=visible)

    def heading_in(self, geometry: CourseGeometry) -> float:
        """Orientation of the marker: the course over ground for its tack in that scenario."""
        return geometry.cog_for(self.tack)


def update_boat(boats: tuple[Boat, ...], boat: Boat) -> tuple[Boat, ...]:
    """Replaces the boat with the same id."""
    if all(existing.id != boat.id for existing in boats):
        raise ValueError(f"Unknown boat: {boat.id}")
    return tuple(boat if existing.id == boat.id else existing for existing in boats)


DEFAULT_BOATS = (
    Boat(id="X", position=Point(-50.0, 150.0), tack=Tack.STBD),
    Boat(id="Y", position=Point(50.0, 150.0), tack=Tack.PORT),
)
