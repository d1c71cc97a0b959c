"""Geometry and kinematics of a windward regatta course."""

from regatta_course.config import Bounds
from regatta_course.config import CourseConfig
from regatta_course.config import CurrentState
from regatta_course.config import DEFAULT_CONFIG
from regatta_course.config import WindState
from regatta_course.geometry import CourseGeometry
from regatta_course.geometry import build_course_geometry
from regatta_course.ground_vector import GroundVector
from regatta_course.ground_vector import Tack
from regatta_course.ground_vector import ground_vector
from regatta_course.performance import boat_speed
from regatta_course.performance import tacking_angles
from regatta_course.performance import upwind_pointing_angle
from regatta_course.point import Point
from regatta_course.scenario import compare_scenarios

__all__ = [
    "Bounds",
    "CourseConfig",
    "CourseGeometry",
    "CurrentState",
    "DEFAULT_CONFIG",
    "GroundVector",
    "Point",
    "Tack",
    "WindState",
    "boat_speed",
    "build_course_geometry",
    "compare_scenarios",
    "ground_vector",
    "tacking_angles",
    "upwind_pointing_angle",
]
