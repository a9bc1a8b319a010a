from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from loguru import logger

from racegrid.core.errors import GridConsistencyError
from racegrid.grid.segment import CourseSegment
from racegrid.pacing.distance import Distance
from racegrid.pacing.duration import Duration
from racegrid.pacing.units import PaceUnit


@dataclass(frozen=True)
class Race:
    segments: Tuple[CourseSegment, ...]
    unit: PaceUnit

    def totals(self) -> Tuple[Distance, Duration]:
        """Distance and time of all segments, summed in order."""
        distance, duration = Distance(), Duration()
        for segment in self.segments:
            _, seg_distance, seg_duration = segment.stats()
            distance += seg_distance
            duration += seg_duration
        return distance, duration


def validate_race(
    race: Race,
    total_distance: Distance,
    total_duration: Duration,
    number: Optional[int] = None,
) -> Tuple[Distance, Duration]:
    """
    Require a race to finish strictly inside the course totals.

    Both the distance and the time of the segments must be below the course
    totals; reaching either one, up to float rounding of the distance sum, leaves
    nothing to finish and fails.
    """
    distance, duration = race.totals()
    # float sums of segment distances count as reaching a total they land next to
    short_of_distance = distance < total_distance and not math.isclose(
        distance.mm, total_distance.mm, rel_tol=1e-9
    )
    if short_of_distance and duration < total_duration:
        return distance, duration

    unit = race.unit
    suffix = unit.distance_unit.suffix
    label = f"race {number}" if number is not None else "race"
    raise GridConsistencyError(
        f"invalid {label} in grid: course segments total "
        f"{unit.distance_in_units(distance):.2f}{suffix} and {duration} "
        f"where course totals {unit.distance_in_units(total_distance):.2f}{suffix} and {total_duration}"
    )


@dataclass(frozen=True)
class CourseGrid:
    """
    A course and the races planned on it.

    Every race is validated when the grid is created, so an existing grid is
    always consistent.
    """

    total_distance_text: str
    total_distance: Distance
    total_duration: Duration
    races: Tuple[Race, ...]

    def __post_init__(self):
        for number, race in enumerate(self.races, start=1):
            distance, duration = validate_race(race, self.total_distance, self.total_duration, number)
            logger.bind(race=number).debug(
                "Race covers {} in {} of {} in {}",
                race.unit.distance_string(distance), duration,
                self.total_distance_text, self.total_duration,
            )
