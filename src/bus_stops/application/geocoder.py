from __future__ import annotations

import json
import logging

from bus_stops.domain.entities import Coordinates
from bus_stops.domain.exceptions import BusStopsError, LocationLookupError, UnexpectedResponseError
from bus_stops.domain.services import describe_failure, upstream_status
from bus_stops.infrastructure.requestor import HttpRequestor

logger = logging.getLogger(__name__)

POSTCODES_BASE_URL = "https://api.postcodes.io"

FAILURE_PREFIX = (
    "The following error was encountered while trying to get the location of the postcode: "
)
SERVICE_NAME = "postcode API"


class GeocoderClient:
    """Resolves UK postcodes to coordinates through postcodes.io."""

    def __init__(self, requestor: HttpRequestor, base_url: str = POSTCODES_BASE_URL) -> None:
        self._requestor = requestor
        self._base_url = base_url

    async def get_location_for_postcode(self, postcode: str) -> Coordinates:
        """GET /postcodes/{postcode} and return result.latitude / result.longitude.

        Every failure is re-raised as LocationLookupError, chained to its cause.
        """
        try:
            body = await self._requestor.get(self._base_url, f"postcodes/{postcode}")
            return self._parse_location(body)
        except BusStopsError as exc:
            logger.info("Location lookup for %r failed: %s", postcode, exc)
            raise LocationLookupError(
                describe_failure(FAILURE_PREFIX, exc, SERVICE_NAME),
                status_code=upstream_status(exc),
            ) from exc

    def _parse_location(self, body: str) -> Coordinates:
        """Map a postcodes.io lookup response to Coordinates."""
        try:
            result = json.loads(body)["result"]
            return Coordinates(latitude=result["latitude"], longitude=result["longitude"])
        except (ValueError, KeyError, TypeError) as exc:
            raise UnexpectedResponseError(
                f"Unexpected response from the postcode API: {exc!r}"
            ) from exc
