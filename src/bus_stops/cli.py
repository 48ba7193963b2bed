"""Nearest bus stops: console entry point.

Usage:
    bus-stops                  # prompts for a postcode
    python -m bus_stops

Environment:
    TFL_APP_ID, TFL_APP_KEY    TfL API credentials (blank by default)
    LOG_LEVEL                  logging level, logs go to stderr (default WARNING)
"""
from __future__ import annotations

import asyncio
import logging
import os

from bus_stops.console import run_console
from bus_stops.domain.entities import TflCredentials

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def load_credentials() -> TflCredentials:
    return TflCredentials(
        app_id=os.environ.get("TFL_APP_ID", ""),
        app_key=os.environ.get("TFL_APP_KEY", ""),
    )


def configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format=LOG_FORMAT,
    )


def main() -> None:
    configure_logging()
    asyncio.run(run_console(load_credentials()))


if __name__ == "__main__":
    main()
