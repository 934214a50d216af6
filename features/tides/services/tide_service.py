import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from core.config import settings
from features.common.exceptions.query_exceptions import QueryValidationError
from features.common.models.query_types import QueryConfig, TidePredictionWindow, UnitSystem
from features.common.services.noaa_client import NOAAClient

logger = logging.getLogger(__name__)

def build_prediction_window(
    station_id: str,
    begin_date: Optional[date] = None,
    end_date: Optional[date] = None,
    config: Optional[QueryConfig] = None,
    today: Optional[date] = None
) -> TidePredictionWindow:
    """Resolve the defaults of a prediction request.

    The window starts today and spans ``settings.prediction_window_days``
    days unless the caller gives explicit dates.
    """
    if not station_id or not station_id.strip():
        raise QueryValidationError("station_id must not be empty")

    begin_date = begin_date or today or date.today()
    end_date = end_date or begin_date + timedelta(days=settings.prediction_window_days)
    if end_date < begin_date:
        raise QueryValidationError(
            f"end_date {end_date.isoformat()} is before begin_date {begin_date.isoformat()}"
        )

    return TidePredictionWindow(
        station_id=station_id,
        begin_date=begin_date,
        end_date=end_date,
        units=config.units if config else settings.default_units
    )

class TideService:
    """Service for NOAA CO-OPS tide predictions."""

    def __init__(self, client: NOAAClient) -> None:
        self.client = client

    async def get_tide_predictions(
        self,
        station_id: str,
        begin_date: Optional[date] = None,
        end_date: Optional[date] = None,
        config: Optional[QueryConfig] = None
    ) -> Optional[List[Dict[str, Any]]]:
        """Get tide predictions for a station, or None when NOAA has none."""
        window = build_prediction_window(station_id, begin_date, end_date, config)
        data = await self.client.fetch_predictions(window)

        predictions = data.get("predictions")
        if predictions is None:
            logger.info(
                f"No predictions for station {window.station_id} "
                f"between {window.begin_date} and {window.end_date}"
            )
        return predictions
