import pytest

from racegrid.core.errors import GridConsistencyError
from racegrid.grid.course import CourseGrid, Race, validate_race
from racegrid.grid.segment import resolve_segment
from racegrid.pacing.distance import parse_distance
from racegrid.pacing.duration import parse_duration
from racegrid.pacing.units import MIN_KM, MIN_MILE


def make_grid(total_distance, total_time, *races):
    return CourseGrid(
        total_distance_text=total_distance,
        total_distance=parse_distance(total_distance),
        total_duration=parse_duration(total_time),
        races=tuple(races),
    )


def mile_race(*segments):
    return Race(
        segments=tuple(resolve_segment(p, d, parse_duration(t) if t else None, MIN_MILE) for p, d, t in segments),
        unit=MIN_MILE,
    )


def test_race_totals():
    race = mile_race(("8:00", 10, None), ("7:45", 0, "1:17:30"))
    distance, duration = race.totals()
    assert distance.miles == pytest.approx(20)
    assert str(duration) == "2:37:30"


def test_grid_within_totals():
    race = mile_race(("8:00", 10, None), ("7:45", 0, "1:17:30"))
    grid = make_grid("26.2mi", "3:30:00", race)
    assert grid.races == (race,)


def test_exact_distance_is_rejected():
    race = mile_race(("7:00", 13.1, None), ("7:00", 13.1, None))
    with pytest.raises(GridConsistencyError, match="course segments total 26.20mi"):
        make_grid("26.2mi", "4:00:00", race)


def test_exact_time_is_rejected():
    race = mile_race(("10:00", 0, "2:00:00"), ("10:00", 0, "2:00:00"))
    with pytest.raises(GridConsistencyError, match="and 4:00:00 where course totals"):
        make_grid("26.2mi", "4:00:00", race)


def test_consistency_error_message():
    race = mile_race(("6:30", 27, None))
    with pytest.raises(GridConsistencyError) as exc:
        make_grid("26.2mi", "4:00:00", race)
    assert str(exc.value) == (
        "invalid race 1 in grid: course segments total 27.00mi and 2:55:30 "
        "where course totals 26.20mi and 4:00:00"
    )


def test_totals_reported_in_race_units():
    race = Race(segments=(resolve_segment("5:00", 12, None, MIN_KM),), unit=MIN_KM)
    with pytest.raises(GridConsistencyError, match="total 12.00km and 1:00:00 where course totals 10.00km and 1:00:00"):
        validate_race(race, parse_distance("10km"), parse_duration("1:00:00"))


def test_one_bad_race_rejects_the_grid():
    good = mile_race(("8:00", 10, None))
    bad = mile_race(("8:00", 30, None))
    with pytest.raises(GridConsistencyError, match="invalid race 2 in grid"):
        make_grid("26.2mi", "5:00:00", good, bad)


def test_empty_race_is_valid():
    grid = make_grid("10km", "1:00:00", Race(segments=(), unit=MIN_KM))
    assert len(grid.races) == 1


def test_distance_sum_landing_on_the_total_is_rejected():
    # 0.1 + 25.9 + 0.2 sums to a hair under 26.2 in floats
    race = mile_race(("8:00", 0.1, None), ("8:00", 25.9, None), ("8:00", 0.2, None))
    with pytest.raises(GridConsistencyError, match="course segments total 26.20mi"):
        make_grid("26.2mi", "4:00:00", race)


def test_distance_just_short_of_the_total_is_accepted():
    race = mile_race(("8:00", 26.19, None))
    grid = make_grid("26.2mi", "4:00:00", race)
    assert grid.races == (race,)
