"""Command line entry point: prints the course geometry as JSON."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging
import sys

from pydantic import TypeAdapter
from pydantic import ValidationError

from regatta_course.config import Bounds
from regatta_course.config import CourseConfig
from regatta_course.config import DEFAULT_CONFIG
from regatta_course.geometry import CourseGeometry
from regatta_course.scenario import ScenarioComparison
from regatta_course.scenario import compare_scenarios


logger = logging.getLogger("regatta_course")

_VALUE_FLAGS = (
    "wind_direction",
    "wind_speed",
    "current_direction",
    "current_speed",
    "course_length",
    "start_line_length",
    "start_line_bias",
    "mark_shift",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regatta-course",
        description="Compute the laylines, ladder rungs and zones of a windward leg.",
    )
    parser.add_argument("--config", type=Path, help="JSON file with a course configuration")
    parser.add_argument("--compare", type=Path, help="JSON file with the frozen scenario A")
    parser.add_argument("--wind-direction", type=float, help="degrees, direction the wind blows from")
    parser.add_argument("--wind-speed", type=float, help="knots")
    parser.add_argument("--current-direction", type=float, help="degrees, direction the current flows to")
    parser.add_argument("--current-speed", type=float, help="knots")
    parser.add_argument("--course-length", type=float, help="meters")
    parser.add_argument("--start-line-length", type=float, help="meters")
    parser.add_argument("--start-line-bias", type=float, help="degrees")
    parser.add_argument("--mark-shift", type=float, help="meters")
    parser.add_argument("--zones", action="store_true", help="include the tactical zones")
    parser.add_argument("--no-ladder", action="store_true", help="leave out the ladder rungs")
    parser.add_argument("--no-laylines", action="store_true", help="leave out the layline segments")
    parser.add_argument("--no-wind-line", action="store_true", help="leave out the wind line")
    parser.add_argument(
        "--viewport",
        type=float,
        nargs=4,
        metavar=("MIN_X", "MAX_X", "MIN_Y", "MAX_Y"),
        help="world-space viewport used to clip the ladder rungs",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log the geometry fallbacks")
    return parser


def load_config(args: argparse.Namespace) -> CourseConfig:
    """Starts from ``--config`` (or the defaults) and applies the flags on top."""
    if args.config is not None:
        base = CourseConfig.model_validate_json(args.config.read_text())
    else:
        base = DEFAULT_CONFIG

    data = base.model_dump()
    for flag in _VALUE_FLAGS:
        value = getattr(args, flag)
        if value is not None:
            data[flag] = value

    if args.zones:
        data["show_zones"] = True
    if args.no_ladder:
        data["show_ladder_rungs"] = False
    if args.no_laylines:
        data["show_laylines"] = False
    if args.no_wind_line:
        data["show_wind_line"] = False

    return CourseConfig.model_validate(data)


def main(argv: list[str] | None = None) -> int:
    """The main entry point of the command line."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args)
        frozen = CourseConfig.model_validate_json(args.compare.read_text()) if args.compare else None
        bounds = None
        if args.viewport is not None:
            min_x, max_x, min_y, max_y = args.viewport
            bounds = Bounds(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
    except (OSError, ValidationError) as err:
        logger.error(f"Config validation failed: {err}")
        return 2

    logger.info(f"Config loaded successfully:\n{config}")

    comparison = compare_scenarios(config, frozen, bounds)
    if comparison.is_comparing:
        output = TypeAdapter(ScenarioComparison).dump_json(comparison, indent=4)
    else:
        output = TypeAdapter(CourseGeometry).dump_json(comparison.scenario_b, indent=4)

    sys.stdout.write(output.decode() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
