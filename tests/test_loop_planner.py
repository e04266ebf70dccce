import math

import pytest
from haversine import haversine

from dailywalker.services.geodesy import project
from dailywalker.services.loop_planner import (
    SIDE_LENGTH_DIVISOR,
    bearing_from_seed,
    plan_loop,
    seed_hash,
)


@pytest.mark.parametrize("seed, expected", [
    ("", 0),
    ("a", 97),
    ("ab", 3105),
    ("hello", 99162322),
    ("polygenelubricants", -2147483648),
    ("\U0001F600", 1772899),  # surrogate pair
    ("\ud800", 55296),  # lone surrogate
])
def test_seed_hash(seed, expected):
    assert seed_hash(seed) == expected


def test_seed_hash_stays_in_int32():
    for seed in ["1700000000000", "x" * 500, "route-" * 40]:
        assert -2**31 <= seed_hash(seed) < 2**31


def test_bearing_is_deterministic_and_in_range():
    for i in range(500):
        seed = str(1700000000000 + i)
        bearing = bearing_from_seed(seed)
        assert 0 <= bearing < 360
        assert bearing_from_seed(seed) == bearing


def test_bearing_changes_with_seed():
    bearings = {bearing_from_seed(str(1700000000000 + i)) for i in range(50)}
    assert len(bearings) == 50


def test_empty_seed_points_north():
    assert bearing_from_seed("") == 0.0


def test_side_length_divisor():
    assert SIDE_LENGTH_DIVISOR == 4.0


def test_plan_loop_shape(origin):
    plan = plan_loop(origin, 5.0, "1700000000000")

    assert len(plan.waypoints) == 2
    assert plan.destination == origin
    assert plan.side_length_km == pytest.approx(1.25)
    assert plan.points[0] == plan.points[-1] == origin

    legs = [
        haversine(a.as_tuple(), b.as_tuple())
        for a, b in zip(plan.points, plan.points[1:])
    ]
    assert legs[0] == pytest.approx(1.25, rel=1e-3)
    assert legs[1] == pytest.approx(1.25, rel=1e-3)
    assert legs[2] == pytest.approx(1.25, rel=1e-2)


def test_plan_loop_reference_values(origin):
    seed = "1700000000000"
    plan = plan_loop(origin, 5.0, seed)

    assert seed_hash(seed) == -1916704694
    assert plan.bearing_deg == pytest.approx(128.09751510406345, abs=1e-9)
    first, second = plan.waypoints
    assert first.lat == pytest.approx(39.99306338949415, abs=1e-9)
    assert first.lng == pytest.approx(-72.98845269592104, abs=1e-9)
    assert second.lat == pytest.approx(39.98886919116642, abs=1e-9)
    assert second.lng == pytest.approx(-73.00206601612823, abs=1e-9)


def test_plan_loop_follows_projector(origin):
    seed = "1700000000000"
    plan = plan_loop(origin, 5.0, seed)
    bearing = bearing_from_seed(seed)

    first = project(origin, 1.25, bearing)
    second = project(first, 1.25, (bearing + 120) % 360)

    assert plan.bearing_deg == bearing
    assert plan.waypoints == (first, second)


def test_plan_loop_is_reproducible(origin):
    assert plan_loop(origin, 8.0, "seed-42") == plan_loop(origin, 8.0, "seed-42")
    assert plan_loop(origin, 8.0, "seed-42") != plan_loop(origin, 8.0, "seed-43")


def test_tiny_distance_stays_near_origin(origin):
    plan = plan_loop(origin, 1e-6, "1")
    for point in plan.waypoints:
        assert haversine(origin.as_tuple(), point.as_tuple()) < 1e-5


@pytest.mark.parametrize("distance", [0, -1.0, math.nan, math.inf])
def test_plan_loop_rejects_bad_distance(origin, distance):
    with pytest.raises(ValueError):
        plan_loop(origin, distance, "1700000000000")
