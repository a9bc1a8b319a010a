from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from racegrid.core.constants import MM_PER_CM, MM_PER_IN, MM_PER_KM, MM_PER_M, MM_PER_MI, MM_PER_MM, MM_PER_YD
from racegrid.core.errors import DistanceParseError, UnknownUnitError

_NUMBER_RE = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)")


class DistanceUnit(Enum):
    """Distance units, valued by their exact size in millimeters."""

    MILLIMETER = MM_PER_MM
    CENTIMETER = MM_PER_CM
    METER = MM_PER_M
    KILOMETER = MM_PER_KM
    INCH = MM_PER_IN
    YARD = MM_PER_YD
    MILE = MM_PER_MI

    @property
    def millimeters(self) -> float:
        return self.value

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @classmethod
    def from_suffix(cls, suffix: str) -> DistanceUnit:
        for unit, unit_suffix in _SUFFIXES.items():
            if unit_suffix == suffix:
                return unit
        valid = ", ".join(_SUFFIXES.values())
        raise UnknownUnitError(f"invalid distance units: {suffix}. must use one of the following: {valid}", suffix)

    @classmethod
    def from_millimeters(cls, value: float) -> DistanceUnit:
        """Exact lookup of the unit whose size is ``value`` millimeters."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownUnitError(f"unsupported distance unit: {value:.2f}", value) from None


_SUFFIXES = {
    DistanceUnit.MILLIMETER: "mm",
    DistanceUnit.CENTIMETER: "cm",
    DistanceUnit.METER: "m",
    DistanceUnit.KILOMETER: "km",
    DistanceUnit.INCH: "in",
    DistanceUnit.YARD: "yd",
    DistanceUnit.MILE: "mi",
}

# Longest suffixes first, so "5km" is never read as "5k" + "m"
_PARSE_ORDER = ("mi", "km", "yd", "in", "cm", "mm", "m")


def distance_unit_string(unit: DistanceUnit | float) -> str:
    """Suffix for a unit (or for a millimeter factor); '' if it is not one of the constants."""
    if isinstance(unit, DistanceUnit):
        return unit.suffix
    try:
        return DistanceUnit.from_millimeters(unit).suffix
    except UnknownUnitError:
        return ""


@dataclass(frozen=True, order=True)
class Distance:
    """A distance, stored in millimeters."""

    mm: float = 0.0

    @classmethod
    def of(cls, value: float, unit: DistanceUnit) -> Distance:
        return cls(float(value) * unit.millimeters)

    def in_units(self, unit: DistanceUnit) -> float:
        return self.mm / unit.millimeters

    @property
    def millimeters(self) -> float:
        return self.mm

    @property
    def centimeters(self) -> float:
        return self.in_units(DistanceUnit.CENTIMETER)

    @property
    def meters(self) -> float:
        return self.in_units(DistanceUnit.METER)

    @property
    def kilometers(self) -> float:
        return self.in_units(DistanceUnit.KILOMETER)

    @property
    def inches(self) -> float:
        return self.in_units(DistanceUnit.INCH)

    @property
    def yards(self) -> float:
        return self.in_units(DistanceUnit.YARD)

    @property
    def miles(self) -> float:
        return self.in_units(DistanceUnit.MILE)

    def __add__(self, other: Distance) -> Distance:
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.mm + other.mm)

    def __sub__(self, other: Distance) -> Distance:
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.mm - other.mm)

    def __bool__(self) -> bool:
        return self.mm != 0


def parse_distance(text: str) -> Distance:
    """
    Parse '<decimal><suffix>' -> Distance.
    Example: '26.2mi', '5km', '1,500m', '-3yd'
    """
    s = text.strip()
    suffix = next((u for u in _PARSE_ORDER if s.endswith(u)), None)
    if suffix is None:
        raise DistanceParseError(f"invalid distance: {text}", text)

    number = s[: -len(suffix)].replace(",", "")
    if not _NUMBER_RE.fullmatch(number):
        raise DistanceParseError(f"invalid distance value {number!r} in {text!r}", text)

    return Distance.of(float(number), DistanceUnit.from_suffix(suffix))
