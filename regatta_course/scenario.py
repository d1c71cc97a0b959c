"""Side-by-side comparison of a frozen scenario A and the live scenario B."""

from __future__ import annotations

from dataclasses import dataclass

from regatta_course.config import Bounds
from regatta_course.config import CourseConfig
from regatta_course.geometry import CourseGeometry
from regatta_course.geometry import build_course_geometry


@dataclass(frozen=True)
class ScenarioComparison:
    """Both geometries, untouched. How to tell them apart on screen is up to the renderer."""

    scenario_a: CourseGeometry | None  # frozen snapshot
    scenario_b: CourseGeometry  # live configuration

    @property
    def is_comparing(self) -> bool:
        return self.scenario_a is not None


def freeze(config: CourseConfig) -> CourseConfig:
    """Snapshot of the live configuration to keep as scenario A."""
    return config.model_copy(deep=True)


def toggle_comparison(live: CourseConfig, frozen: CourseConfig | None) -> CourseConfig | None:
    """Leaves comparison mode if it is active, otherwise freezes the live configuration."""
    if frozen is not None:
        return None
    return freeze(live)


def compare_scenarios(
    live: CourseConfig,
    frozen: CourseConfig | None = None,
    viewport_bounds: Bounds | None = None,
    logger=None,
) -> ScenarioComparison:
    """Builds scenario B from ``live`` and, if given, scenario A from ``frozen``.

    The two builds share nothing and may run in any order. Both use the same viewport
    so their ladder rungs line up.
    """
    bounds = viewport_bounds or Bounds.around(live)
    scenario_b = build_course_geometry(live, bounds, logger=logger)
    scenario_a = build_course_geometry(frozen, bounds, logger=logger) if frozen is not None else None
    return ScenarioComparison(scenario_a=scenario_a, scenario_b=scenario_b)
