"""Pace units.

A pace unit names a time base and a reference distance and knows how to move
a unit-local rate to and from meters per second. There are two kinds:

  - speed units (kph, mph): distance per time base, rate grows with speed
  - per-distance units (min/km, min/mile): time base per distance, rate
    shrinks with speed

The four registered units are module level constants; ``get_unit`` looks
them up by label.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from racegrid.core.constants import (
    KPH_PER_MPS,
    MIN_KM_PER_MPS,
    MIN_MILE_PER_MPS,
    MPH_PER_MPS,
    NS_PER_HR,
    NS_PER_MIN,
    NS_PER_S,
)
from racegrid.core.errors import DegenerateArithmeticError, UnknownUnitError
from racegrid.core.time_utils import ns_to_clock, seconds_to_clock
from racegrid.pacing.distance import Distance, DistanceUnit, parse_distance
from racegrid.pacing.duration import Duration

DistanceLike = Union[Distance, float, int, str]

_TIME_BASE_LABELS = {
    NS_PER_HR: "hr",
    NS_PER_MIN: "min",
    NS_PER_S: "sec",
}


@dataclass(frozen=True)
class PaceUnit(ABC):
    label: str
    time_base_ns: int
    distance_unit: DistanceUnit
    # m/s <-> unit-local rate factor, see subclasses
    mps_factor: float

    @abstractmethod
    def to_mps(self, rate: float) -> float:
        """Unit-local rate -> meters per second."""

    @abstractmethod
    def from_mps(self, mps: float) -> float:
        """Meters per second -> unit-local rate."""

    @abstractmethod
    def format(self, rate: float) -> str:
        """Human readable rate."""

    @abstractmethod
    def format_exact(self, rate: float) -> str:
        """Rate text that parses back to the same rate."""

    def __str__(self) -> str:
        return self.label

    @property
    def duration_unit(self) -> str:
        return _TIME_BASE_LABELS.get(self.time_base_ns, "ns")

    def distance(self, value: DistanceLike) -> Distance:
        """
        Coerce a value into a Distance:
          - Distance: returned as is
          - number: read in this unit's reference distance unit
          - string: parsed, e.g. '13.1mi'
        """
        if isinstance(value, Distance):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Distance.of(value, self.distance_unit)
        if isinstance(value, str):
            return parse_distance(value)
        raise TypeError(f"invalid distance type: {type(value).__name__}")

    def distance_in_units(self, value: DistanceLike) -> float:
        return self.distance(value).in_units(self.distance_unit)

    def distance_string(self, value: DistanceLike) -> str:
        return f"{self.distance_in_units(value):.2f} {self.distance_unit.suffix}"

    def duration_in_units(self, duration: Duration) -> float:
        """Express a duration in this unit's time base (hours or minutes)."""
        return duration.ns / self.time_base_ns


class SpeedUnit(PaceUnit):
    """Distance per time base; ``mps_factor`` is unit-local rate per m/s."""

    def to_mps(self, rate: float) -> float:
        return rate / self.mps_factor

    def from_mps(self, mps: float) -> float:
        return mps * self.mps_factor

    def format(self, rate: float) -> str:
        return f"{rate:.2f}"

    def format_exact(self, rate: float) -> str:
        return repr(float(rate))


class PerDistanceUnit(PaceUnit):
    """Time base per distance; rate = ``mps_factor`` / (m/s)."""

    def to_mps(self, rate: float) -> float:
        if rate <= 0:
            raise DegenerateArithmeticError(f"{self.label} rate must be positive, got {rate}")
        return self.mps_factor / rate

    def from_mps(self, mps: float) -> float:
        if mps <= 0:
            raise DegenerateArithmeticError(f"cannot express {mps} m/s as {self.label}")
        return self.mps_factor / mps

    def format(self, rate: float) -> str:
        if not math.isfinite(rate):
            return str(rate)
        return seconds_to_clock(rate * self.time_base_ns / NS_PER_S)

    def format_exact(self, rate: float) -> str:
        return ns_to_clock(round(rate * self.time_base_ns))


# KPH represents rates/distance as kilometers per hour
KPH = SpeedUnit("kph", NS_PER_HR, DistanceUnit.KILOMETER, KPH_PER_MPS)

# MPH represents rates/distance as miles per hour
MPH = SpeedUnit("mph", NS_PER_HR, DistanceUnit.MILE, MPH_PER_MPS)

# MIN_KM represents rates/distance as minutes per kilometer
MIN_KM = PerDistanceUnit("min/km", NS_PER_MIN, DistanceUnit.KILOMETER, MIN_KM_PER_MPS)

# MIN_MILE represents rates/distance as minutes per mile
MIN_MILE = PerDistanceUnit("min/mile", NS_PER_MIN, DistanceUnit.MILE, MIN_MILE_PER_MPS)

UNITS: dict[str, PaceUnit] = {u.label: u for u in (KPH, MPH, MIN_KM, MIN_MILE)}


def valid_units() -> str:
    return ", ".join(UNITS)


def get_unit(label: str) -> PaceUnit:
    try:
        return UNITS[label]
    except (KeyError, TypeError):
        raise UnknownUnitError(
            f"invalid unit: {label}. must use one of the following: {valid_units()}", label
        ) from None
