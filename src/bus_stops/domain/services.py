from __future__ import annotations

import re

from bus_stops.domain.exceptions import ResponseError

_WHITESPACE = re.compile(r"\s")


def normalize_postcode(postcode: str) -> str:
    """Remove every whitespace character. Case is left untouched."""
    return _WHITESPACE.sub("", postcode)


def upstream_status(exc: BaseException) -> int | None:
    """Return the HTTP status an upstream server answered with, if any.

    Transport failures (status 0) and errors that never saw a response
    return None.
    """
    if isinstance(exc, ResponseError) and exc.is_response_error():
        return exc.status_code
    return None


def describe_failure(prefix: str, exc: BaseException, service: str) -> str:
    """Build the user-facing message for a failed lookup stage.

    The message is the stage prefix followed by the cause's message and,
    when the upstream status is known, a sentence naming the service.
    """
    message = prefix + str(exc)
    status = upstream_status(exc)
    if status is not None:
        message += f" The {service} returned status code {status}."
    return message
