from typing import Any, Dict, List, Optional
from datetime import date
from fastapi import APIRouter, Depends, Query, Request

from features.common.models.query_types import QueryConfig, UnitSystem
from features.tides.services.tide_service import TideService

router = APIRouter(
    prefix="/tides",
    tags=["Tides"]
)

def get_service(request: Request) -> TideService:
    """Dependency to get the TideService instance."""
    return request.app.state.tide_service

@router.get(
    "/{station_id}/predictions",
    response_model=Optional[List[Dict[str, Any]]],
    summary="Get tide predictions for a station",
    description="Returns NOAA tide predictions for the station. By default, returns the next 10 days in metric units."
)
async def get_tide_predictions(
    station_id: str,
    begin_date: Optional[date] = Query(None, description="First day of predictions (defaults to today)"),
    end_date: Optional[date] = Query(None, description="Last day of predictions (defaults to begin_date + 10 days)"),
    units: Optional[UnitSystem] = Query(None, description="Unit system for tide heights"),
    service: TideService = Depends(get_service)
) -> Optional[List[Dict[str, Any]]]:
    """Get tide predictions for a specific station.

    Args:
        station_id: The NOAA station identifier
        begin_date: Optional start date for predictions (defaults to today)
        end_date: Optional end date for predictions
        units: Optional unit system, ``metric`` or ``english``

    Returns:
        The NOAA prediction records, or null when NOAA has none for the window
    """
    config = QueryConfig(units=units) if units else None
    return await service.get_tide_predictions(station_id, begin_date, end_date, config)
