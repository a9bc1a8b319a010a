from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Union

from racegrid.core.errors import DegenerateArithmeticError, DurationParseError, PaceParseError
from racegrid.pacing.distance import Distance, DistanceUnit
from racegrid.pacing.duration import Duration, parse_duration
from racegrid.pacing.units import PaceUnit

_DECIMAL_RE = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)")


@dataclass(frozen=True)
class Pace:
    """A unit-local rate bound to its pace unit."""

    rate: float
    unit: PaceUnit

    def __post_init__(self):
        if not math.isfinite(self.rate) or self.rate <= 0:
            raise DegenerateArithmeticError(f"invalid {self.unit} pace rate: {self.rate}")

    @classmethod
    def parse(cls, text: str, unit: PaceUnit) -> Pace:
        return RawString(text).resolve(unit)

    @property
    def mps(self) -> float:
        return self.unit.to_mps(self.rate)

    def distance(self, duration: Duration) -> Distance:
        """Distance covered at this pace in ``duration``."""
        return Distance.of(self.mps * duration.seconds, DistanceUnit.METER)

    def duration(self, distance: Distance) -> Duration:
        """Time needed to cover ``distance``, to the nearest second."""
        return Duration.from_seconds(round(distance.meters / self.mps))

    def as_unit(self, unit: PaceUnit) -> Pace:
        return Pace(unit.from_mps(self.mps), unit)

    def __str__(self) -> str:
        return self.unit.format(self.rate)


@dataclass(frozen=True)
class NumericRate:
    """A rate already expressed in the target unit (e.g. 12.5 kph)."""

    rate: float

    def resolve(self, unit: PaceUnit) -> Pace:
        return Pace(float(self.rate), unit)


@dataclass(frozen=True)
class DurationLike:
    """Time per reference distance, e.g. 6:30 per mile."""

    duration: Duration

    def resolve(self, unit: PaceUnit) -> Pace:
        return Pace(unit.duration_in_units(self.duration), unit)


@dataclass(frozen=True)
class RawString:
    """
    Pace text as typed by a person.

    Colon forms ('6:30', '1:02:00') are durations only. Anything else is
    tried as a suffixed duration ('6m30s') and then as a decimal ('12.5').
    """

    text: str

    def resolve(self, unit: PaceUnit) -> Pace:
        text = self.text.strip()
        try:
            duration = parse_duration(text)
        except DurationParseError as e:
            if ":" in text or not _DECIMAL_RE.fullmatch(text):
                raise PaceParseError(f'invalid pace string "{self.text}": {e}', self.text) from None
            return NumericRate(float(text)).resolve(unit)
        return DurationLike(duration).resolve(unit)


PaceInput = Union[NumericRate, DurationLike, RawString]


def calculate(duration: Duration, distance: Distance, unit: PaceUnit) -> Pace:
    """Pace needed to cover ``distance`` in ``duration``, expressed in ``unit``."""
    if duration.ns <= 0 or distance.mm <= 0:
        raise DegenerateArithmeticError(
            f"cannot calculate a pace for {unit.distance_string(distance)} in {duration}"
        )
    return Pace(unit.from_mps(distance.meters / duration.seconds), unit)
