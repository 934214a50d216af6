from datetime import date
from enum import Enum
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

class UnitSystem(str, Enum):
    """Unit systems understood by NOAA CO-OPS.

    The imperial value uses NOAA's own name so it can be sent upstream as is.
    """
    METRIC = "metric"
    IMPERIAL = "english"

class Coordinate(BaseModel):
    """A point on the earth in decimal degrees."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")

class QueryConfig(BaseModel):
    """Per-call query options."""
    units: UnitSystem = Field(UnitSystem.METRIC, description="Unit system for distances and heights")

class TidePredictionWindow(BaseModel):
    """Date-bounded request for a single station's predictions."""
    model_config = ConfigDict(frozen=True)

    station_id: str = Field(..., description="NOAA station identifier")
    begin_date: date = Field(..., description="First day of the window")
    end_date: date = Field(..., description="Last day of the window")
    units: UnitSystem = Field(UnitSystem.METRIC, description="Units for prediction heights")

    def to_params(self) -> Dict[str, str]:
        """Request parameters for the NOAA datagetter."""
        return {
            "station": self.station_id,
            "begin_date": self.begin_date.strftime("%Y%m%d"),
            "end_date": self.end_date.strftime("%Y%m%d"),
            "units": self.units.value
        }
