import asyncio
import logging
import aiohttp
from typing import Any, Dict, Optional

from core.config import settings
from features.common.exceptions.query_exceptions import UpstreamFetchError, UpstreamTimeoutError
from features.common.models.query_types import TidePredictionWindow

logger = logging.getLogger(__name__)

NO_PREDICTIONS_MESSAGE = "No Predictions data was found"

class NOAAClient:
    """Client for the NOAA CO-OPS station metadata and data APIs."""

    def __init__(
        self,
        stations_url: Optional[str] = None,
        data_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.stations_url = stations_url or settings.noaa_stations_url
        self.data_url = data_url or settings.noaa_tide_base_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"Accept": "application/json"}
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def _get_json(self, operation: str, url: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """GET a NOAA endpoint and decode the JSON body."""
        session = await self._init_session()
        try:
            async with session.get(url, params=params) as response:
                if response.status != 200:
                    reason = response.reason or ""
                    logger.error(f"NOAA returned {response.status} for {operation}: {reason}")
                    raise UpstreamFetchError(operation, status=response.status, reason=reason)
                data = await response.json(content_type=None)
        except asyncio.TimeoutError:
            logger.error(f"Timed out after {self.timeout}s fetching {operation}")
            raise UpstreamTimeoutError(operation, self.timeout)
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching {operation}: {str(e)}")
            raise UpstreamFetchError(operation, reason=str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.error(f"Invalid JSON in {operation} response: {str(e)}")
            raise UpstreamFetchError(operation, status=200, reason=f"invalid JSON body: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamFetchError(operation, status=200, reason="unexpected response body")
        return data

    async def fetch_stations(self) -> Dict[str, Any]:
        """Get the full NOAA tide station list."""
        data = await self._get_json("NOAA tide stations", self.stations_url)
        if not isinstance(data.get("stations"), list):
            raise UpstreamFetchError("NOAA tide stations", status=200, reason="response has no station list")
        return data

    async def fetch_predictions(self, window: TidePredictionWindow) -> Dict[str, Any]:
        """Get tide predictions for a station window."""
        operation = f"NOAA tide predictions for station {window.station_id}"
        params = {**settings.coops_params, **window.to_params()}
        data = await self._get_json(operation, self.data_url, params=params)

        if "error" in data:
            message = data["error"].get("message", "") if isinstance(data["error"], dict) else str(data["error"])
            if NO_PREDICTIONS_MESSAGE in message:
                # Stations without prediction data are a valid, empty outcome
                logger.info(f"No predictions for station {window.station_id}")
                return {}
            logger.error(f"NOAA error for {operation}: {message}")
            raise UpstreamFetchError(operation, status=200, reason=message or "Unknown error from NOAA API")

        return data
