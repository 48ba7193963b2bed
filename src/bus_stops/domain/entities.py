from __future__ import annotations

from dataclasses import dataclass

QueryValue = str | int | float


@dataclass(frozen=True)
class Coordinates:
    """WGS84 position resolved from a postcode."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class StopPoint:
    """A bus, coach or tram stop returned by the TfL StopPoint API."""

    naptan_id: str  # NaPTAN access node id, e.g. "490008660N"
    common_name: str


@dataclass(frozen=True)
class QueryParameter:
    """A single query-string pair. Order within a request is preserved."""

    name: str
    value: QueryValue


@dataclass(frozen=True)
class TflCredentials:
    """app_id / app_key pair for the TfL API. Blank values are sent as-is."""

    app_id: str = ""
    app_key: str = ""
