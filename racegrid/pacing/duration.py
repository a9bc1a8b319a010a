from __future__ import annotations

from dataclasses import dataclass

from racegrid.core.constants import NS_PER_HR, NS_PER_MIN, NS_PER_S
from racegrid.core.errors import DurationParseError
from racegrid.core.time_utils import colon_to_span, ns_to_clock, span_to_ns


@dataclass(frozen=True, order=True)
class Duration:
    """A span of time in whole nanoseconds."""

    ns: int = 0

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        return cls(round(seconds * NS_PER_S))

    @property
    def seconds(self) -> float:
        return self.ns / NS_PER_S

    @property
    def minutes(self) -> float:
        return self.ns / NS_PER_MIN

    @property
    def hours(self) -> float:
        return self.ns / NS_PER_HR

    def add(self, other: Duration) -> Duration:
        return Duration(self.ns + other.ns)

    def subtract(self, other: Duration) -> Duration:
        """Difference that never goes below zero."""
        return Duration(max(self.ns - other.ns, 0))

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __bool__(self) -> bool:
        return self.ns != 0

    def __str__(self) -> str:
        return ns_to_clock(self.ns)


def parse_duration(text: str) -> Duration:
    """
    Parse a duration string.

    Accepts:
      - 'hh:mm:ss' and 'mm:ss'
      - suffixed spans such as '1h30m', '45m10.5s', '300ms'
    """
    try:
        return Duration(span_to_ns(colon_to_span(text)))
    except ValueError:
        raise DurationParseError(f"invalid duration: {text}", text) from None
