import pytest

from dailywalker.models import LoopRouteRequest
from dailywalker.services.geodesy import Coordinate
from dailywalker.services.loop_planner import plan_loop
from dailywalker.services.route_service import RouteService


@pytest.fixture
def service():
    return RouteService()


def test_end_to_end_kilometers(service, origin):
    seed = "1700000000000"
    route = service.generate_loop(LoopRouteRequest(start_location="40.0, -73.0", distance=5, seed=seed))
    plan = plan_loop(origin, 5.0, seed)

    assert route.distance_km == 5
    assert route.side_length_km == pytest.approx(1.25)
    assert route.seed == seed
    assert [(p.lat, p.lng) for p in route.waypoints] == [p.as_tuple() for p in plan.waypoints]
    assert "origin=40.0,-73.0&destination=40.0,-73.0&" in route.maps_url
    assert route.maps_url.endswith("&travelmode=walking")

    w1, w2 = plan.waypoints
    assert f"waypoints={w1.lat},{w1.lng}|{w2.lat},{w2.lng}&" in route.maps_url
    assert route.straight_line_km == pytest.approx(3 * 1.25, rel=1e-2)


def test_miles_are_converted(service):
    route = service.generate_loop(LoopRouteRequest(start_location="40.0, -73.0", distance=2, unit="miles", seed="1"))
    assert route.distance_km == pytest.approx(2 * 1.60934)
    assert route.side_length_km == pytest.approx(2 * 1.60934 / 4)


def test_steps_are_converted(service):
    request = LoopRouteRequest(start_location="40.0, -73.0", distance=8000, unit="steps", height_cm=180, seed="1")
    route = service.generate_loop(request)
    assert route.distance_km == pytest.approx(8000 * 180 * 0.415 / 100000)


def test_cycling_mode(service):
    route = service.generate_loop(LoopRouteRequest(start_location="40.0, -73.0", distance=20, mode="cycling", seed="1"))
    assert route.mode.value == "cycling"
    assert route.maps_url.endswith("&travelmode=bicycling")


def test_default_seed_is_timestamp(service):
    route = service.generate_loop(LoopRouteRequest(start_location="40.0, -73.0", distance=5))
    assert route.seed.isdigit()
    assert len(route.seed) >= 13


def test_unparseable_start_location(service):
    with pytest.raises(ValueError):
        service.generate_loop(LoopRouteRequest(start_location="Times Square", distance=5))


def test_start_point_is_parsed(service):
    route = service.generate_loop(LoopRouteRequest(start_location="51.5, -0.12", distance=3, seed="x"))
    assert (route.start_point.lat, route.start_point.lng) == Coordinate(51.5, -0.12).as_tuple()


def test_empty_seed_is_not_replaced(service, origin):
    route = service.generate_loop(LoopRouteRequest(start_location="40.0, -73.0", distance=5, seed=""))
    assert route.seed == ""
    assert route.bearing == 0.0
    # due north first leg
    assert route.waypoints[0].lng == pytest.approx(origin.lng, abs=1e-12)
    assert route.waypoints[0].lat > origin.lat
