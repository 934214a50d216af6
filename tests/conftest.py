"""Shared fixtures for the tide query tests."""

from typing import Any, Dict, List, Optional

import pytest

from features.common.models.query_types import TidePredictionWindow


class FakeNOAAClient:
    """In-memory stand-in for NOAAClient that records what it was asked."""

    def __init__(
        self,
        stations: Optional[List[Dict[str, Any]]] = None,
        predictions: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ):
        self.stations = stations or []
        self.predictions = predictions if predictions is not None else {}
        self.error = error
        self.station_calls = 0
        self.windows: List[TidePredictionWindow] = []

    async def fetch_stations(self) -> Dict[str, Any]:
        self.station_calls += 1
        if self.error:
            raise self.error
        return {"stations": [dict(s) for s in self.stations]}

    async def fetch_predictions(self, window: TidePredictionWindow) -> Dict[str, Any]:
        self.windows.append(window)
        if self.error:
            raise self.error
        return self.predictions

    async def close(self):
        pass


def station(station_id: str, name: str, lat: Any, lng: Any) -> Dict[str, Any]:
    """Build a station entry shaped like the NOAA metadata API's."""
    return {"id": station_id, "name": name, "lat": lat, "lng": lng, "state": "MA"}


@pytest.fixture
def boston_stations():
    return [
        station("8443970", "Boston", "42.355", "-71.060"),
        station("8518750", "The Battery", "40.7128", "-74.0060"),
    ]


@pytest.fixture
def harbor_stations():
    return [
        station("1", "Boston Harbor", "42.35", "-71.05"),
        station("2", "Harborview Pier", "41.50", "-70.70"),
        station("3", "Lakeside Dock", "41.00", "-71.00"),
    ]


@pytest.fixture
def make_station():
    return station
