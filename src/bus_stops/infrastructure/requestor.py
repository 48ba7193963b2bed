from __future__ import annotations

import logging
from collections.abc import Sequence
from urllib.parse import urlencode, urljoin

import httpx

from bus_stops.domain.entities import QueryParameter
from bus_stops.domain.exceptions import ResponseError
from bus_stops.infrastructure.headers import make_headers

logger = logging.getLogger(__name__)


def build_url(base_url: str, endpoint: str, parameters: Sequence[QueryParameter]) -> str:
    """Resolve endpoint against base_url and append parameters in order.

    Values are stringified with str() and never validated. Repeated names are
    kept where they appear, so the query string holds exactly the given pairs.
    Raises httpx.InvalidURL when the result is not a valid URL.
    """
    url = httpx.URL(urljoin(base_url, endpoint))
    if not parameters:
        return str(url)
    query = urlencode([(p.name, str(p.value)) for p in parameters])
    if url.query:
        query = url.query.decode("ascii") + "&" + query
    return str(url.copy_with(query=query.encode("ascii")))


class HttpRequestor:
    """Issues single GET requests and classifies the outcome.

    One httpx.AsyncClient is shared by every request of a run. Nothing is
    retried or cached.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def get(
        self,
        base_url: str,
        endpoint: str,
        parameters: Sequence[QueryParameter] = (),
    ) -> str:
        """GET base_url/endpoint and return the raw body of a 200 response.

        Raises ResponseError with status_code 0 when no usable response arrives
        (invalid URL, transport failure, redirect loop, undecodable body) and
        with the received status for anything other than 200.
        """
        target = urljoin(base_url, endpoint)
        try:
            url = build_url(base_url, endpoint, parameters)
            logger.debug("GET %s", url)
            response = await self._http.get(url, headers=make_headers())
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning("GET %s failed before a response arrived: %r", target, exc)
            raise ResponseError(message=f"Could not get a response from {target!r}.") from exc

        if response.status_code != 200:
            logger.warning("GET %s returned %d", url, response.status_code)
            raise ResponseError(response.status_code, f"Request to {url} was rejected.")
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()
