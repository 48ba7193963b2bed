from __future__ import annotations

import sys
from typing import TextIO

import httpx

from bus_stops.application.geocoder import GeocoderClient
from bus_stops.application.stop_finder import StopFinder
from bus_stops.console.runner import ConsoleRunner
from bus_stops.domain.entities import TflCredentials
from bus_stops.infrastructure.requestor import HttpRequestor


def create_runner(
    requestor: HttpRequestor,
    credentials: TflCredentials,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> ConsoleRunner:
    """Wire the lookup clients around a shared requestor."""
    return ConsoleRunner(
        geocoder=GeocoderClient(requestor),
        stop_finder=StopFinder(requestor, credentials),
        stdin=stdin if stdin is not None else sys.stdin,
        stdout=stdout if stdout is not None else sys.stdout,
    )


async def run_console(
    credentials: TflCredentials,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run one lookup against the live services and release the HTTP client."""
    requestor = HttpRequestor(httpx.AsyncClient(follow_redirects=True))
    try:
        await create_runner(requestor, credentials, stdin, stdout).run()
    finally:
        await requestor.close()
