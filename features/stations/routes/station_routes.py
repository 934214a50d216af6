from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request

from features.common.models.query_types import Coordinate, QueryConfig, UnitSystem
from features.stations.models.station_types import StationRecord
from features.stations.services.station_query_service import StationQueryService
import logging

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/stations",
    tags=["Stations"]
)

def get_service(request: Request) -> StationQueryService:
    """Dependency to get the StationQueryService instance."""
    return request.app.state.station_query_service

@router.get(
    "/nearby",
    response_model=List[StationRecord],
    response_model_exclude_none=True,
    summary="Get tide stations near a location",
    description=(
        "Returns NOAA tide stations within a distance of the given location, nearest first. "
        "distance_from_origin is rounded up to a whole kilometer or mile, so with a fractional "
        "max_distance it can exceed max_distance by less than one unit"
    )
)
async def get_nearby_stations(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    max_distance: Optional[float] = Query(
        None,
        ge=0,
        description="Search radius in kilometers (metric) or miles (english). Defaults to 32.2 km"
    ),
    units: Optional[UnitSystem] = Query(None, description="Unit system for the radius and distances"),
    service: StationQueryService = Depends(get_service)
) -> List[StationRecord]:
    """Get tide stations near a location."""
    config = QueryConfig(units=units) if units else None
    return await service.get_nearby_stations(
        Coordinate(latitude=latitude, longitude=longitude),
        max_distance,
        config
    )

@router.get(
    "/search",
    response_model=List[StationRecord],
    response_model_exclude_none=True,
    summary="Search tide stations by name",
    description="Returns NOAA tide stations whose name contains the given text, ignoring case"
)
async def get_stations_by_name(
    name: str = Query(..., min_length=1),
    service: StationQueryService = Depends(get_service)
) -> List[StationRecord]:
    """Search tide stations by name."""
    return await service.get_stations_by_name(name)
