import pytest

from racegrid.core.constants import NS_PER_S
from racegrid.core.errors import DurationParseError
from racegrid.core.time_utils import colon_to_span, ns_to_clock, seconds_to_clock, span_to_ns
from racegrid.pacing.duration import Duration, parse_duration


def test_colon_to_span():
    assert colon_to_span("1:05:30") == "1h05m30s"
    assert colon_to_span("6:30") == "6m30s"
    assert colon_to_span("1h") == "1h"


def test_span_to_ns():
    assert span_to_ns("1h30m") == 5400 * NS_PER_S
    assert span_to_ns("-1.5s") == -1_500_000_000
    assert span_to_ns("300ms") == 300_000_000
    assert span_to_ns("2us") == 2_000
    assert span_to_ns("0") == 0

    for bad in ("", "5", "1x", "h", "1h 30m"):
        with pytest.raises(ValueError):
            span_to_ns(bad)


def test_ns_to_clock():
    assert ns_to_clock(5430 * NS_PER_S) == "1:30:30"
    assert ns_to_clock(330 * NS_PER_S) == "5:30"
    assert ns_to_clock(330_500_000_000) == "5:30.5"
    assert ns_to_clock(0) == "0:00"
    assert ns_to_clock(-90 * NS_PER_S) == "-1:30"
    assert seconds_to_clock(389.6) == "6:30"


@pytest.mark.parametrize(
    "text, seconds",
    [
        ("1:00:00", 3600),
        ("45:00", 2700),
        ("0:45", 45),
        ("1h30m", 5400),
        ("1.5h", 5400),
        ("45m10.5s", 2710.5),
    ],
)
def test_parse_duration(text, seconds):
    assert parse_duration(text).seconds == seconds


@pytest.mark.parametrize("text", ["", "bogus", "1:xx:00", "1:2:3:4", "90"])
def test_parse_duration_invalid(text):
    with pytest.raises(DurationParseError, match="invalid duration"):
        parse_duration(text)


def test_duration_formats_as_clock():
    assert str(parse_duration("1:05:30")) == "1:05:30"
    assert str(parse_duration("6:30")) == "6:30"
    assert str(parse_duration("4h")) == "4:00:00"


def test_duration_add_and_saturating_subtract():
    ten = Duration.from_seconds(10)
    twenty = Duration.from_seconds(20)
    assert ten.add(twenty) == Duration.from_seconds(30)
    assert ten + twenty == Duration.from_seconds(30)
    assert twenty.subtract(ten) == ten
    assert ten.subtract(twenty) == Duration(0)
    assert ten < twenty


def test_duration_accessors():
    d = parse_duration("1:30:00")
    assert d.hours == 1.5
    assert d.minutes == 90
    assert d.seconds == 5400
