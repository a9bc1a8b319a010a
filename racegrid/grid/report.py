from __future__ import annotations

from dataclasses import dataclass
from typing import List

from racegrid.grid.course import CourseGrid, Race
from racegrid.grid.segment import CourseSegment, Resolution
from racegrid.pacing.distance import Distance
from racegrid.pacing.duration import Duration
from racegrid.pacing.pace import calculate


@dataclass(frozen=True)
class SegmentLine:
    distance: str   # e.g. "13.10 mi"
    duration: str   # e.g. "1:25:09"
    pace: str       # e.g. "6:30"
    units: str      # e.g. "min/mile"


@dataclass(frozen=True)
class RaceReport:
    number: int
    segments: List[SegmentLine]
    finish: SegmentLine


def finish_race(race: Race, total_distance: Distance, total_duration: Duration) -> CourseSegment:
    """The segment a runner still has to cover to finish the course on time."""
    completed, elapsed = race.totals()
    time_remaining = total_duration.subtract(elapsed)
    distance_remaining = total_distance - completed

    pace = calculate(time_remaining, distance_remaining, race.unit)
    return CourseSegment(pace, distance_remaining, time_remaining, race.unit, Resolution.distance_duration)


def segment_line(segment: CourseSegment, race: Race) -> SegmentLine:
    pace, distance, duration = segment.stats()
    return SegmentLine(
        distance=race.unit.distance_string(distance),
        duration=str(duration),
        pace=str(pace),
        units=pace.unit.label,
    )


def build_report(grid: CourseGrid) -> List[RaceReport]:
    reports = []
    for number, race in enumerate(grid.races, start=1):
        finish = finish_race(race, grid.total_distance, grid.total_duration)
        reports.append(
            RaceReport(
                number=number,
                segments=[segment_line(s, race) for s in race.segments],
                finish=segment_line(finish, race),
            )
        )
    return reports
