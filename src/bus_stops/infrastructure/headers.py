from __future__ import annotations

USER_AGENT = "bus-stops/0.1.0 (python-httpx)"


def make_headers() -> dict[str, str]:
    """Return the headers sent with every upstream request.

    Both postcodes.io and the TfL API answer in JSON; the User-Agent
    identifies this tool in their access logs.
    """
    return {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
