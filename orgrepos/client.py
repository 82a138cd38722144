from __future__ import annotations

from types import TracebackType
from typing import Callable

import httpx
from loguru import logger

from orgrepos.decoder import DecodeReport, decode_repositories
from orgrepos.endpoints import DEFAULT_BASE_URL, DEFAULT_ORG, Endpoint, GitHubAPI, HTTPMethod
from orgrepos.errors import ErrorKind, NetworkError, classify_status
from orgrepos.result import Failure, Result, Success


class NetworkClient:
    """Single-shot GitHub REST client.

    Each call sends exactly one request: no retries, no auth, no custom
    headers. Outcomes are returned as :class:`Success` or :class:`Failure`
    rather than raised.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api = GitHubAPI(base_url)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    # -- context manager ---------------------------------------------------

    async def __aenter__(self) -> NetworkClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # -- public API ---------------------------------------------------------

    async def fetch(self, url: str) -> Result[bytes]:
        """GET ``url`` and return the raw body on a 2xx response."""
        return await self._send(HTTPMethod.GET, url)

    async def fetch_with_completion(
        self, url: str, completion: Callable[[Result[bytes]], None]
    ) -> None:
        """Fetch ``url`` and hand the result to ``completion``."""
        completion(await self.fetch(url))

    async def request(self, endpoint: Endpoint) -> Result[bytes]:
        """Send ``endpoint`` using its method and parameters."""
        if endpoint.method is HTTPMethod.GET:
            return await self._send(endpoint.method, endpoint.url, params=endpoint.parameters)
        return await self._send(endpoint.method, endpoint.url, json=endpoint.parameters)

    async def fetch_repositories(self, org: str | None = None) -> Result[DecodeReport]:
        """Fetch and decode the repositories of ``org`` (default LearnSwiftSD).

        A failed fetch is returned as-is and nothing is decoded.
        """
        org = org or DEFAULT_ORG
        endpoint = self.api.get_repositories(org)
        fetched = await self.request(endpoint)
        if not fetched.ok:
            return fetched

        try:
            report = decode_repositories(fetched.value)
        except NetworkError as e:
            e.url = endpoint.url
            logger.error("Could not decode response from {}: {}", endpoint.url, e)
            return Failure(e)

        logger.info(
            "Decoded {} repos from {} ({} skipped)",
            len(report), endpoint.url, report.skipped,
        )
        return Success(report)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------

    async def _send(self, method: HTTPMethod, url: str, **kwargs) -> Result[bytes]:
        try:
            resp = await self._client.request(method.value, url, **kwargs)
        except (httpx.ProtocolError, httpx.DecodingError) as e:
            logger.warning("Malformed response from {}: {}", url, e)
            return Failure(
                NetworkError(ErrorKind.INVALID_RESPONSE, str(e), url=url, cause=e)
            )
        except httpx.TransportError as e:
            logger.warning("Request to {} failed: {}", url, e)
            return Failure(
                NetworkError(ErrorKind.NETWORK_REQUEST, str(e), url=url, cause=e)
            )

        kind = classify_status(resp.status_code)
        if kind is not None:
            logger.warning("{} {} returned HTTP {}", method.value, url, resp.status_code)
            return Failure(
                NetworkError(
                    kind,
                    resp.reason_phrase,
                    status_code=resp.status_code,
                    url=url,
                )
            )

        if not resp.content:
            return Failure(
                NetworkError(
                    ErrorKind.NO_DATA,
                    "empty response body",
                    status_code=resp.status_code,
                    url=url,
                )
            )

        logger.debug("{} {} -> {} bytes", method.value, url, len(resp.content))
        return Success(resp.content)
