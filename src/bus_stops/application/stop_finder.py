from __future__ import annotations

import json
import logging

from bus_stops.domain.entities import QueryParameter, StopPoint, TflCredentials
from bus_stops.domain.exceptions import (
    BusStopsError,
    NoStopPointsFoundError,
    StopPointLookupError,
    UnexpectedResponseError,
)
from bus_stops.domain.services import describe_failure, upstream_status
from bus_stops.infrastructure.requestor import HttpRequestor

logger = logging.getLogger(__name__)

TFL_BASE_URL = "https://api.tfl.gov.uk"
STOP_TYPES = "NaptanPublicBusCoachTram"
SEARCH_RADIUS = 1000  # metres

FAILURE_PREFIX = "The following error was encountered while trying to get the nearest bus stops: "
SERVICE_NAME = "StopPoint API"


class StopFinder:
    """Finds the public-transport stops nearest to a position via TfL."""

    def __init__(
        self,
        requestor: HttpRequestor,
        credentials: TflCredentials | None = None,
        base_url: str = TFL_BASE_URL,
    ) -> None:
        self._requestor = requestor
        self._credentials = credentials if credentials is not None else TflCredentials()
        self._base_url = base_url

    async def get_nearest_stop_points(
        self, latitude: float, longitude: float, count: int
    ) -> list[StopPoint]:
        """GET /StopPoint within SEARCH_RADIUS and return the first `count` stops.

        Stops keep the order TfL returned them in. An empty result raises
        NoStopPointsFoundError; every failure is re-raised as StopPointLookupError.
        """
        params = [
            QueryParameter("stopTypes", STOP_TYPES),
            QueryParameter("lat", latitude),
            QueryParameter("lon", longitude),
            QueryParameter("radius", SEARCH_RADIUS),
            QueryParameter("app_id", self._credentials.app_id),
            QueryParameter("app_key", self._credentials.app_key),
        ]
        try:
            body = await self._requestor.get(self._base_url, "StopPoint", params)
            stop_points = self._parse_stop_points(body)[:count]
            if not stop_points:
                raise NoStopPointsFoundError()
            return stop_points
        except BusStopsError as exc:
            logger.info("Stop lookup near (%s, %s) failed: %s", latitude, longitude, exc)
            raise StopPointLookupError(
                describe_failure(FAILURE_PREFIX, exc, SERVICE_NAME),
                status_code=upstream_status(exc),
            ) from exc

    def _parse_stop_points(self, body: str) -> list[StopPoint]:
        """Map every stopPoints entry to a StopPoint, dropping all other fields."""
        try:
            entries = json.loads(body)["stopPoints"]
            return [
                StopPoint(naptan_id=entry["naptanId"], common_name=entry["commonName"])
                for entry in entries
            ]
        except (ValueError, KeyError, TypeError) as exc:
            raise UnexpectedResponseError(
                f"Unexpected response from the StopPoint API: {exc!r}"
            ) from exc
