from __future__ import annotations


class BusStopsError(Exception):
    """Base exception for all nearest-bus-stop lookup errors."""


class ResponseError(BusStopsError):
    """Raised when an upstream request fails.

    status_code is 0 when no HTTP response was received (DNS failure, refused
    connection, timeout) and the received status otherwise.
    """

    def __init__(self, status_code: int = 0, message: str = "") -> None:
        self.status_code = status_code
        if not message:
            if status_code > 0:
                message = f"Upstream API rejected the request ({status_code})."
            else:
                message = "No response was received from the upstream API."
        super().__init__(message)

    def is_response_error(self) -> bool:
        """True when the server answered with a non-success status."""
        return self.status_code > 0


class UnexpectedResponseError(BusStopsError):
    """Raised when a response body does not have the expected shape."""


class NoStopPointsFoundError(BusStopsError):
    """Raised when the stop lookup succeeds but yields no stops."""

    def __init__(self, message: str = "No TfL bus stops found near that postcode.") -> None:
        super().__init__(message)


class LookupFailedError(BusStopsError):
    """A stage failure decorated with the stage that was running.

    status_code is the upstream HTTP status when one is known, else None.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class LocationLookupError(LookupFailedError):
    """Raised when a postcode could not be resolved to coordinates."""


class StopPointLookupError(LookupFailedError):
    """Raised when the nearest stops could not be fetched."""
