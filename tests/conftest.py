"""Shared pytest fixtures for the nearest-bus-stops test suite."""
from __future__ import annotations

import pytest


def make_stop_point_raw(index: int) -> dict:  # type: ignore[type-arg]
    """Raw StopPoint entry shaped like the TfL /StopPoint response."""
    return {
        "$type": "Tfl.Api.Presentation.Entities.StopPoint, Tfl.Api.Presentation.Entities",
        "naptanId": f"4900{index:05d}N",
        "commonName": f"Stop {index}",
        "distance": 50.0 * index,
        "modes": ["bus"],
        "stopType": "NaptanPublicBusCoachTram",
        "lat": 51.5,
        "lon": -0.14,
    }


@pytest.fixture
def sample_postcode_raw() -> dict:  # type: ignore[type-arg]
    """Sample postcodes.io /postcodes/{postcode} response."""
    return {
        "status": 200,
        "result": {
            "postcode": "SW1A 1AA",
            "latitude": 51.5,
            "longitude": -0.1,
            "country": "England",
            "admin_district": "Westminster",
        },
    }


@pytest.fixture
def sample_stop_points_raw() -> dict:  # type: ignore[type-arg]
    """Sample TfL /StopPoint response holding eight stops."""
    return {
        "centrePoint": [51.5, -0.1],
        "stopPoints": [make_stop_point_raw(i) for i in range(1, 9)],
        "pageSize": 8,
        "total": 8,
        "page": 1,
    }
