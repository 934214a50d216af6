"""Tests for nearby and name station queries."""

import asyncio

import pytest

from conftest import FakeNOAAClient
from features.common.exceptions.query_exceptions import (
    ParseError,
    QueryValidationError,
    UpstreamFetchError,
)
from features.common.models.query_types import Coordinate, QueryConfig, UnitSystem
from features.stations.services.station_query_service import StationQueryService, parse_station

BOSTON = Coordinate(latitude=42.3601, longitude=-71.0589)


class TestParseStation:
    def test_string_coordinates(self, make_station):
        record = parse_station(make_station("1", "Boston", "42.355", "-71.060"))
        assert record.coordinate.latitude == 42.355
        assert record.coordinate.longitude == -71.06
        assert record.distance_from_origin is None

    def test_numeric_coordinates(self, make_station):
        record = parse_station(make_station("1", "Boston", 42.355, -71.06))
        assert record.coordinate.latitude == 42.355

    @pytest.mark.parametrize("lat,lng", [
        ("abc", "-71.0"),
        ("42.0", ""),
        (None, "-71.0"),
        ("nan", "-71.0"),
        ("95.0", "-71.0"),
        ("42.0", "-181.0"),
    ])
    def test_unparsable(self, make_station, lat, lng):
        with pytest.raises(ParseError):
            parse_station(make_station("1", "Bad", lat, lng))

    def test_missing_name(self):
        with pytest.raises(ParseError):
            parse_station({"id": "1", "lat": "42", "lng": "-71"})


class TestNearbyStations:
    async def test_boston_example(self, boston_stations):
        service = StationQueryService(FakeNOAAClient(boston_stations))
        result = await service.get_nearby_stations(BOSTON, 50)

        assert [s.id for s in result] == ["8443970"]
        assert result[0].distance_from_origin == 1

    async def test_default_radius_is_32_2_km(self, make_station):
        stations = [
            make_station("near", "Near", "42.60", "-71.0589"),  # ~26.7 km north
            make_station("far", "Far", "42.70", "-71.0589"),  # ~37.8 km north
        ]
        service = StationQueryService(FakeNOAAClient(stations))
        result = await service.get_nearby_stations(BOSTON)
        assert [s.id for s in result] == ["near"]

    async def test_default_radius_same_in_miles(self, make_station):
        stations = [make_station("near", "Near", "42.60", "-71.0589")]
        service = StationQueryService(FakeNOAAClient(stations))
        result = await service.get_nearby_stations(BOSTON, config=QueryConfig(units=UnitSystem.IMPERIAL))
        assert [s.id for s in result] == ["near"]
        assert result[0].distance_from_origin == 17

    async def test_sorted_and_within_radius(self, make_station):
        stations = [
            make_station("c", "C", "42.60", "-71.0589"),
            make_station("a", "A", "42.40", "-71.0589"),
            make_station("out", "Out", "43.50", "-71.0589"),
            make_station("b", "B", "42.50", "-71.0589"),
        ]
        service = StationQueryService(FakeNOAAClient(stations))
        result = await service.get_nearby_stations(BOSTON, 40)

        assert [s.id for s in result] == ["a", "b", "c"]
        distances = [s.distance_from_origin for s in result]
        assert distances == sorted(distances)
        assert all(d <= 40 for d in distances)

    async def test_ties_keep_upstream_order(self, make_station):
        stations = [
            make_station("first", "First", "42.40", "-71.0589"),
            make_station("second", "Second", "42.40", "-71.0589"),
        ]
        service = StationQueryService(FakeNOAAClient(stations))
        result = await service.get_nearby_stations(BOSTON, 20)
        assert [s.id for s in result] == ["first", "second"]

    async def test_imperial_radius_and_display(self, make_station):
        stations = [
            make_station("in", "In", "42.60", "-71.0589"),  # ~16.6 mi
            make_station("out", "Out", "42.70", "-71.0589"),  # ~23.5 mi
        ]
        service = StationQueryService(FakeNOAAClient(stations))
        result = await service.get_nearby_stations(
            BOSTON, 20, QueryConfig(units=UnitSystem.IMPERIAL)
        )
        assert [s.id for s in result] == ["in"]
        assert result[0].distance_from_origin == 17

    async def test_unparsable_station_is_skipped(self, make_station):
        stations = [
            make_station("bad", "Bad", "not-a-number", "-71.06"),
            make_station("good", "Good", "42.355", "-71.060"),
        ]
        service = StationQueryService(FakeNOAAClient(stations))
        result = await service.get_nearby_stations(BOSTON, 10)
        assert [s.id for s in result] == ["good"]

    async def test_no_matches_is_empty(self, boston_stations):
        service = StationQueryService(FakeNOAAClient(boston_stations))
        origin = Coordinate(latitude=0, longitude=0)
        assert await service.get_nearby_stations(origin, 10) == []

    async def test_negative_radius_rejected_before_fetch(self, boston_stations):
        client = FakeNOAAClient(boston_stations)
        service = StationQueryService(client)
        with pytest.raises(QueryValidationError, match="max_distance"):
            await service.get_nearby_stations(BOSTON, -1)
        assert client.station_calls == 0

    async def test_upstream_error_propagates(self):
        error = UpstreamFetchError("NOAA tide stations", status=503, reason="Service Unavailable")
        service = StationQueryService(FakeNOAAClient(error=error))
        with pytest.raises(UpstreamFetchError, match="503"):
            await service.get_nearby_stations(BOSTON, 10)


class TestStationsByName:
    async def test_harbor_example(self, harbor_stations):
        service = StationQueryService(FakeNOAAClient(harbor_stations))
        result = await service.get_stations_by_name("harbor")
        assert [s.name for s in result] == ["Boston Harbor", "Harborview Pier"]
        assert all(s.distance_from_origin is None for s in result)

    @pytest.mark.parametrize("query", ["boston", "HARBOR", "ton har"])
    async def test_case_insensitive_substring(self, harbor_stations, query):
        service = StationQueryService(FakeNOAAClient(harbor_stations))
        result = await service.get_stations_by_name(query)
        assert "Boston Harbor" in [s.name for s in result]

    async def test_no_match(self, harbor_stations):
        service = StationQueryService(FakeNOAAClient(harbor_stations))
        assert await service.get_stations_by_name("reef") == []

    @pytest.mark.parametrize("name", ["", "   "])
    async def test_empty_name_rejected_before_fetch(self, harbor_stations, name):
        client = FakeNOAAClient(harbor_stations)
        service = StationQueryService(client)
        with pytest.raises(QueryValidationError):
            await service.get_stations_by_name(name)
        assert client.station_calls == 0

    async def test_upstream_error_propagates(self):
        error = UpstreamFetchError("NOAA tide stations", reason="Connection refused")
        service = StationQueryService(FakeNOAAClient(error=error))
        with pytest.raises(UpstreamFetchError, match="Connection refused"):
            await service.get_stations_by_name("harbor")

    async def test_unparsable_station_is_skipped(self, make_station):
        stations = [
            make_station("bad", "Boston Harbor", "x", "-71.05"),
            make_station("ok", "Harbor Two", "42.35", "-71.05"),
        ]
        service = StationQueryService(FakeNOAAClient(stations))
        result = await service.get_stations_by_name("harbor")
        assert [s.id for s in result] == ["ok"]


class TestConcurrentQueries:
    async def test_results_keep_their_own_units(self, make_station):
        stations = [
            make_station("a", "Alpha Harbor", "42.40", "-71.0589"),  # ~4.4 km, ~2.8 mi
            make_station("b", "Bravo Point", "42.60", "-71.0589"),  # ~26.7 km, ~16.6 mi
        ]
        service = StationQueryService(FakeNOAAClient(stations))

        metric, imperial, names = await asyncio.gather(
            service.get_nearby_stations(BOSTON, 40, QueryConfig(units=UnitSystem.METRIC)),
            service.get_nearby_stations(BOSTON, 25, QueryConfig(units=UnitSystem.IMPERIAL)),
            service.get_stations_by_name("alpha"),
        )

        assert [(s.id, s.distance_from_origin) for s in metric] == [("a", 5), ("b", 27)]
        assert [(s.id, s.distance_from_origin) for s in imperial] == [("a", 3), ("b", 17)]
        assert [(s.id, s.distance_from_origin) for s in names] == [("a", None)]
