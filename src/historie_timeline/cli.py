"""
Historie Timeline CLI

Computes a timeline layout from JSON datasets and prints it as JSON on
stdout. Log output goes to stderr so the JSON stays parseable.

Usage:
    historie-timeline layout data/historie.json --podcast data/podcast.json --width 1200
    historie-timeline layout data/historie.json --region china --region japan --zoom 3
    python -m historie_timeline.cli regions data/historie.json
"""
import argparse
import json
import sys
from typing import List, Optional

from .core import TimelineEngine
from .dataset import HistorieData, JsonFileSource, load_json
from .errors import TimelineError
from .filters import TimelineFilters, available_eras, available_regions
from .settings import JsonPreferencesRepository, TimelineSettingsManager
from .types import TimeRange
from .utils.message import Log


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="historie-timeline",
        description="Compute timeline lane layouts from Historie datasets."
    )
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR")
    subparsers = parser.add_subparsers(dest="command", required=True)

    layout = subparsers.add_parser("layout", help="Print the computed layout as JSON")
    layout.add_argument("data", help="History dataset (events, media, idioms)")
    layout.add_argument("--podcast", help="Podcast dataset (series)")
    layout.add_argument("--width", type=float, default=1200, help="Container width in pixels")
    layout.add_argument("--region", action="append", default=[], help="Region filter (repeatable)")
    layout.add_argument("--era", action="append", default=[], help="Era filter (repeatable)")
    layout.add_argument("--year-from", type=int, help="Start of the year filter")
    layout.add_argument("--year-to", type=int, help="End of the year filter")
    layout.add_argument("--hide-short", action="store_true", help="Hide short podcast series")
    layout.add_argument("--zoom", type=int, default=0,
                        help="Zoom steps from the default scale (negative zooms out)")
    layout.add_argument("--center-year", type=float, help="Pan so this year is centered")
    layout.add_argument("--settings", help="JSON preferences file holding timeline settings")
    layout.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")

    regions = subparsers.add_parser("regions", help="List regions and eras present in a dataset")
    regions.add_argument("data", help="History dataset")

    return parser


def _filters_from_args(args: argparse.Namespace) -> TimelineFilters:
    year_range = None
    if args.year_from is not None or args.year_to is not None:
        if args.year_from is None or args.year_to is None:
            raise TimelineError("--year-from and --year-to must be given together")
        year_range = TimeRange(args.year_from, args.year_to)

    return TimelineFilters(
        selected_regions=list(args.region),
        selected_eras=list(args.era),
        year_range=year_range,
        show_short_series=not args.hide_short,
    )


def _run_layout(args: argparse.Namespace) -> int:
    settings_manager = TimelineSettingsManager(
        JsonPreferencesRepository(args.settings) if args.settings else None
    )

    engine = TimelineEngine(
        settings=settings_manager.settings,
        container_width=args.width,
        filters=_filters_from_args(args),
    )
    engine.load(JsonFileSource(args.data, args.podcast))

    for _ in range(abs(args.zoom)):
        if args.zoom > 0:
            engine.zoom.zoom_in()
        else:
            engine.zoom.zoom_out()
    if args.center_year is not None:
        engine.zoom.center_on_year(args.center_year)

    layout = engine.layout()
    print(json.dumps(layout.to_dict(), ensure_ascii=False, indent=args.indent or None))
    return 0


def _run_regions(args: argparse.Namespace) -> int:
    events = HistorieData.from_dict(load_json(args.data)).events
    print(json.dumps({
        'regions': available_regions(events),
        'eras': available_eras(events),
    }, ensure_ascii=False, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    Log.set_level(args.log_level)

    try:
        if args.command == "layout":
            return _run_layout(args)
        return _run_regions(args)
    except OSError as e:
        Log.error(f"Cannot read dataset: {e}")
        return 1
    except (TimelineError, ValueError) as e:
        Log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
