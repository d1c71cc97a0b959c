#!/usr/bin/env python3
"""
Script to preview a course layout with matplotlib.

Adjust the constants below to set:
- Wind and current
- Course dimensions
- An optional frozen scenario A to compare against
"""

import argparse

import matplotlib.pyplot as plt

from regatta_course.config import Bounds
from regatta_course.config import CourseConfig
from regatta_course.geometry import CourseGeometry
from regatta_course.scenario import compare_scenarios

# =============================================================================
# CONFIGURATION - Adjust these values as needed
# =============================================================================

LIVE = CourseConfig(
    wind_direction=10,     # degrees, wind FROM
    wind_speed=12,         # knots
    current_direction=90,  # degrees, current TO
    current_speed=0.8,     # knots
    course_length=1000,    # meters
    start_line_length=200,  # meters
    start_line_bias=5,     # degrees
    show_zones=True,
)

# Set to None to plot the live scenario only
FROZEN = CourseConfig(wind_direction=0, wind_speed=12)

ZONE_COLORS = {
    "mark_zone": "tab:blue",
    "start_zone": "tab:blue",
    "can_lay": "tab:green",
    "committed_left": "tab:red",
    "committed_right": "tab:red",
}

# =============================================================================
# END CONFIGURATION
# =============================================================================


def plot_geometry(ax, geometry: CourseGeometry, frozen: bool) -> None:
    style = "--" if frozen else "-"
    alpha = 0.6 if frozen else 1.0

    if geometry.zones is not None and not frozen:
        for name, polygon in geometry.zones.as_dict().items():
            ax.fill([p.x for p in polygon], [p.y for p in polygon], color=ZONE_COLORS[name], alpha=0.25, lw=0)

    for rung in geometry.ladder_rungs:
        (a, b) = rung.visible
        ax.plot([a.x, b.x], [a.y, b.y], color="lightgray", linestyle=style, lw=0.8, zorder=1)
        ax.annotate(f"{rung.distance:.0f}m", (rung.label_anchor.x, rung.label_anchor.y), fontsize=7, color="gray")

    if geometry.laylines is not None:
        for (a, b), color in (
            (geometry.laylines.pin_to_left, "tab:green"),
            (geometry.laylines.left_to_mark, "tab:red"),
            (geometry.laylines.rc_to_right, "tab:red"),
            (geometry.laylines.right_to_mark, "tab:green"),
        ):
            ax.plot([a.x, b.x], [a.y, b.y], color=color, linestyle=style, alpha=alpha, lw=1.5 if frozen else 3)

    if geometry.wind_line is not None:
        line = geometry.wind_line
        ax.plot([line.start.x, line.end.x], [line.start.y, line.end.y], color="deepskyblue", linestyle=style)

    ax.plot([geometry.pin.x, geometry.rc.x], [geometry.pin.y, geometry.rc.y], color="black", linestyle=style, lw=3)
    ax.scatter([geometry.mark.x], [geometry.mark.y], color="orange", zorder=5)


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot a course layout")
    parser.add_argument("--output", default="course.png", help="Image file to write")
    args = parser.parse_args()

    bounds = Bounds.around(LIVE)
    comparison = compare_scenarios(LIVE, FROZEN, bounds)

    fig, ax = plt.subplots(figsize=(8, 8))
    if comparison.scenario_a is not None:
        plot_geometry(ax, comparison.scenario_a, frozen=True)
    plot_geometry(ax, comparison.scenario_b, frozen=False)

    ax.set_xlim(bounds.min_x, bounds.max_x)
    ax.set_ylim(bounds.min_y, bounds.max_y)
    ax.set_aspect("equal")
    ax.set_title(f"Wind {LIVE.wind.direction:.0f}° at {LIVE.wind.speed:.0f} kn")
    fig.savefig(args.output)
    print(f"Saved {args.output}")


if __name__ == "__main__":
    main()
