import logging
import math
from typing import Any, Dict, List, Optional
from pydantic import ValidationError

from core.config import settings
from features.common.exceptions.query_exceptions import ParseError, QueryValidationError
from features.common.models.query_types import Coordinate, QueryConfig, UnitSystem
from features.common.services.noaa_client import NOAAClient
from features.common.utils.conversions import UnitConversions
from features.stations.models.station_types import RawStation, StationRecord
from utils.grid import GridUtils

logger = logging.getLogger(__name__)

def parse_station(entry: Dict[str, Any]) -> StationRecord:
    """Build a station record from a raw NOAA entry.

    Raises:
        ParseError: if the entry is malformed or its coordinates are not
            finite, in-range numbers.
    """
    try:
        raw = RawStation.model_validate(entry)
        lat = float(raw.lat)
        lng = float(raw.lng)
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise ValueError(f"non-finite coordinate ({raw.lat}, {raw.lng})")
        coordinate = Coordinate(latitude=lat, longitude=lng)
    except (ValidationError, ValueError, TypeError) as e:
        station_id = entry.get("id") if isinstance(entry, dict) else None
        raise ParseError(f"Unparsable station {station_id!r}: {e}") from e

    return StationRecord(id=raw.id, name=raw.name, coordinate=coordinate)

class StationQueryService:
    """Resolves station queries against the NOAA station list."""

    def __init__(self, client: NOAAClient):
        self.client = client

    async def _fetch_stations(self) -> List[Dict[str, Any]]:
        data = await self.client.fetch_stations()
        return data["stations"]

    def _parse_stations(self, entries: List[Dict[str, Any]]) -> List[StationRecord]:
        """Parse raw entries, dropping the ones that cannot be parsed."""
        stations = []
        for entry in entries:
            try:
                stations.append(parse_station(entry))
            except ParseError as e:
                logger.warning(f"Skipping station: {e}")
        return stations

    async def get_nearby_stations(
        self,
        origin: Coordinate,
        max_distance_from_origin: Optional[float] = None,
        config: Optional[QueryConfig] = None
    ) -> List[StationRecord]:
        """Get stations within a radius of the origin, nearest first.

        The radius is in kilometers or miles depending on ``config.units``.
        Without a radius, ``settings.default_max_distance_km`` is used in
        either unit system.
        """
        units = config.units if config else settings.default_units

        if max_distance_from_origin is None:
            radius_m = UnitConversions.to_meters(settings.default_max_distance_km, UnitSystem.METRIC)
        elif max_distance_from_origin < 0 or not math.isfinite(max_distance_from_origin):
            raise QueryValidationError("max_distance must be a non-negative number")
        else:
            radius_m = UnitConversions.to_meters(max_distance_from_origin, units)

        entries = await self._fetch_stations()

        nearby = []
        for station in self._parse_stations(entries):
            distance_m = GridUtils.distance(origin, station.coordinate)
            if GridUtils.within_radius(distance_m, radius_m):
                station.distance_from_origin = UnitConversions.from_meters(distance_m, units)
                nearby.append((distance_m, station))

        # sorted() is stable, so equal distances keep NOAA's order
        nearby = sorted(nearby, key=lambda item: item[0])
        logger.info(
            f"Found {len(nearby)} stations within {radius_m:.0f} m of "
            f"({origin.latitude}, {origin.longitude})"
        )
        return [station for _, station in nearby]

    async def get_stations_by_name(self, name: str) -> List[StationRecord]:
        """Get stations whose name contains ``name``, ignoring case."""
        if not name or not name.strip():
            raise QueryValidationError("name must not be empty")

        needle = name.lower()
        entries = await self._fetch_stations()
        return [
            station
            for station in self._parse_stations(entries)
            if needle in station.name.lower()
        ]
