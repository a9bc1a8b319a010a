from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from racegrid.core.errors import AmbiguousSegmentError
from racegrid.pacing.distance import Distance
from racegrid.pacing.duration import Duration
from racegrid.pacing.pace import Pace, PaceInput, RawString, calculate
from racegrid.pacing.units import PaceUnit


class Resolution(str, Enum):
    """Which two quantities a segment was given; the third one is derived."""

    pace_distance = "pace+distance"
    pace_duration = "pace+duration"
    distance_duration = "distance+duration"


@dataclass(frozen=True)
class CourseSegment:
    pace: Pace
    distance: Distance
    duration: Duration
    unit: PaceUnit
    resolution: Resolution

    def stats(self) -> Tuple[Pace, Distance, Duration]:
        return self.pace, self.distance, self.duration


def _describe(pace, distance: float, duration: Optional[Duration], unit: PaceUnit) -> str:
    pace_str = pace.text if isinstance(pace, RawString) else (pace or "")
    return (
        f"(pace={pace_str}), "
        f"(distance={distance:.2f} {unit.distance_unit.suffix}), "
        f"(duration={duration or Duration()})"
    )


def resolve_segment(
    pace: Union[str, PaceInput, None],
    distance: float,
    duration: Optional[Duration],
    unit: PaceUnit,
) -> CourseSegment:
    """
    Derive the missing quantity of a segment.

    Valid inputs:
      - pace + distance  -> duration from the pace
      - pace + duration  -> distance from the pace
      - distance + duration (no pace) -> pace from the two
    Empty pace strings, zero distances and zero/absent durations count as missing.
    """
    has_pace = pace is not None and not (isinstance(pace, str) and pace.strip() == "")
    has_distance = distance > 0
    has_duration = duration is not None and duration.ns > 0

    if not math.isfinite(distance) or distance < 0 or (duration is not None and duration.ns < 0):
        raise AmbiguousSegmentError(
            f"invalid course segment, non-finite or negative quantity: {_describe(pace, distance, duration, unit)}",
            pace, distance, duration,
        )

    if has_pace and has_distance != has_duration:
        resolved = RawString(pace).resolve(unit) if isinstance(pace, str) else pace.resolve(unit)
        if has_distance:
            dist = unit.distance(distance)
            return CourseSegment(resolved, dist, resolved.duration(dist), unit, Resolution.pace_distance)
        return CourseSegment(resolved, resolved.distance(duration), duration, unit, Resolution.pace_duration)

    if not has_pace and has_distance and has_duration:
        dist = unit.distance(distance)
        return CourseSegment(calculate(duration, dist, unit), dist, duration, unit, Resolution.distance_duration)

    raise AmbiguousSegmentError(
        f"invalid course segment: {_describe(pace, distance, duration, unit)}",
        pace, distance, duration,
    )
