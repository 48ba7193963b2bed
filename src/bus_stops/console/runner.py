from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from contextlib import closing
from typing import TextIO

from bus_stops.application.geocoder import GeocoderClient
from bus_stops.application.stop_finder import StopFinder
from bus_stops.domain.entities import StopPoint
from bus_stops.domain.exceptions import BusStopsError
from bus_stops.domain.services import normalize_postcode

logger = logging.getLogger(__name__)

PROMPT = "\nEnter your postcode: "
STOP_POINT_COUNT = 5


class ConsoleRunner:
    """Prompt, geocode, find stops, display. One postcode per run."""

    def __init__(
        self,
        geocoder: GeocoderClient,
        stop_finder: StopFinder,
        stdin: TextIO,
        stdout: TextIO,
    ) -> None:
        self._geocoder = geocoder
        self._stop_finder = stop_finder
        self._stdin = stdin
        self._stdout = stdout

    async def prompt_for_postcode(self) -> str:
        """Read a single line, then close the input stream."""
        with closing(self._stdin):
            self._stdout.write(PROMPT)
            self._stdout.flush()
            return await asyncio.to_thread(self._stdin.readline)

    def display_stop_points(self, stop_points: Sequence[StopPoint]) -> None:
        """Print each stop name on its own line, in the given order."""
        for point in stop_points:
            print(point.common_name, file=self._stdout)

    async def run(self) -> None:
        """Run the whole lookup. Any lookup failure is printed, not raised."""
        try:
            postcode = normalize_postcode(await self.prompt_for_postcode())
            location = await self._geocoder.get_location_for_postcode(postcode)
            stop_points = await self._stop_finder.get_nearest_stop_points(
                location.latitude, location.longitude, STOP_POINT_COUNT
            )
        except BusStopsError as exc:
            logger.debug("Run aborted", exc_info=exc)
            print(exc, file=self._stdout)
            return
        self.display_stop_points(stop_points)
