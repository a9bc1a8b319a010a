import re
from decimal import Decimal

from racegrid.core.constants import NS_PER_HR, NS_PER_MIN, NS_PER_MS, NS_PER_S, NS_PER_US

# Suffixes accepted in compound spans such as "1h30m" or "45m10.5s"
SPAN_UNITS = {
    "ns": 1,
    "us": NS_PER_US,
    "µs": NS_PER_US,  # micro sign
    "μs": NS_PER_US,  # greek mu
    "ms": NS_PER_MS,
    "s": NS_PER_S,
    "m": NS_PER_MIN,
    "h": NS_PER_HR,
}

# "ms" has to be tried before "m" and "s"
_UNIT_PATTERN = "ns|us|µs|μs|ms|s|m|h"
_NUMBER_PATTERN = r"\d+\.?\d*|\.\d+"
_SPAN_PART_RE = re.compile(rf"({_NUMBER_PATTERN})({_UNIT_PATTERN})")
_SPAN_RE = re.compile(rf"([-+]?)((?:(?:{_NUMBER_PATTERN})(?:{_UNIT_PATTERN}))+)")


def colon_to_span(value: str) -> str:
    """
    Rewrite colon-delimited clock strings into suffixed spans.
    Example: '1:05:30' -> '1h05m30s', '6:30' -> '6m30s'
    Anything without exactly one or two colons is returned unchanged.
    """
    parts = value.split(":")
    if len(parts) == 3:
        hours, minutes, seconds = parts
        return f"{hours}h{minutes}m{seconds}s"
    if len(parts) == 2:
        minutes, seconds = parts
        return f"{minutes}m{seconds}s"
    return value


def span_to_ns(value: str) -> int:
    """
    Convert a suffixed span -> total nanoseconds (int).
    Example: '1h30m' -> 5400000000000, '-1.5s' -> -1500000000

    A bare '0' is the only unitless value accepted.
    """
    s = value.strip()
    if s in ("0", "+0", "-0"):
        return 0

    match = _SPAN_RE.fullmatch(s)
    if match is None:
        raise ValueError(f"invalid duration {value!r}")

    sign, body = match.groups()
    total = Decimal(0)
    for number, unit in _SPAN_PART_RE.findall(body):
        total += Decimal(number) * SPAN_UNITS[unit]

    ns = int(total)
    return -ns if sign == "-" else ns


def ns_to_clock(total_ns: int) -> str:
    """
    Format nanoseconds -> 'H:MM:SS' or 'M:SS'.
    Sub-second remainders are kept as a trimmed decimal fraction.
    Example: 5430000000000 -> '1:30:30', 330500000000 -> '5:30.5'
    """
    sign = "-" if total_ns < 0 else ""
    total_ns = abs(total_ns)

    hours, rem = divmod(total_ns, NS_PER_HR)
    minutes, rem = divmod(rem, NS_PER_MIN)
    seconds, fraction = divmod(rem, NS_PER_S)

    if hours:
        clock = f"{hours}:{minutes:02d}:{seconds:02d}"
    else:
        clock = f"{minutes}:{seconds:02d}"

    if fraction:
        clock += "." + f"{fraction:09d}".rstrip("0")
    return sign + clock


def seconds_to_clock(total_seconds: float) -> str:
    """Round a number of seconds to the nearest whole second and format it as a clock."""
    return ns_to_clock(round(total_seconds) * NS_PER_S)
