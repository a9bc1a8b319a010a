#!/usr/bin/env python3
"""
Validate a pacing grid and report the pace needed to finish each race.

Usage examples:
  - Default grid file (./grid.json or $RACEGRID_GRID_PATH):
      racegrid
  - Explicit file with per-race totals:
      racegrid --grid samples/grid.json --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from loguru import logger

from racegrid.core.config import settings
from racegrid.core.errors import PacingError
from racegrid.core.logger import setup_logger
from racegrid.grid.codec import load_grid_file
from racegrid.grid.report import build_report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Validate a pacing grid and compute finishing paces")
    ap.add_argument("--grid", default=settings.grid_path, help="Path to json file that contains the requested pace segments")
    ap.add_argument("--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING or ERROR")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logger(args.log_level.upper())

    try:
        grid = load_grid_file(args.grid)
        reports = build_report(grid)
    except (PacingError, OSError) as e:
        logger.bind(error=str(e), grid=args.grid).error("Invalid pace grid file")
        return 1

    races = "race" if len(grid.races) == 1 else "races"
    logger.bind(totalDistance=grid.total_distance_text, totalDuration=str(grid.total_duration)).info(
        "Parsed pacing grid with {} {}...", len(grid.races), races
    )

    for report in reports:
        for number, line in enumerate(report.segments, start=1):
            logger.bind(race=report.number, segment=number).info(
                "{} completed in {} with a pace of {} {}", line.distance, line.duration, line.pace, line.units
            )
        finish = report.finish
        logger.bind(race=report.number).info(
            "A pace of {} {} is required to complete the remaining {} of {} in {} to achieve a time of {}",
            finish.pace, finish.units, finish.distance, grid.total_distance_text,
            finish.duration, grid.total_duration,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
