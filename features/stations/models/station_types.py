from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from features.common.models.query_types import Coordinate

class RawStation(BaseModel):
    """Station entry as published by the NOAA metadata API.

    Coordinates are kept as NOAA sends them and parsed per query.
    """
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: str
    lat: Optional[str] = None
    lng: Optional[str] = None

class StationRecord(BaseModel):
    """Tide station returned by a query."""
    id: str = Field(..., description="Station identifier")
    name: str = Field(..., description="Station name")
    coordinate: Coordinate = Field(..., description="Station location")
    distance_from_origin: Optional[int] = Field(
        None,
        description="Distance from the query origin in the query units, rounded up. Only set by nearby queries"
    )
