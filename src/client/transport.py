"""How requests reach the game service.

The controller never builds URLs itself: it is handed a client, which is handed a transport.
Tests swap the transport (or the whole client) for a double.
"""

import logging
from typing import Any, Optional, Protocol, Self

import httpx

from src.core.exceptions import RemoteServiceError

logger = logging.getLogger(__name__)

JSON = Any


class Transport(Protocol):
    """Send one request to the game service and return the decoded JSON body."""

    async def request(
        self, method: str, path: str, payload: Optional[JSON] = None
    ) -> JSON:
        """Raise RemoteServiceError when the service is unreachable or its answer is not JSON."""
        ...


class HttpTransport:
    """Transport over HTTP using httpx."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def request(
        self, method: str, path: str, payload: Optional[JSON] = None
    ) -> JSON:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = await self._client.request(method, path, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as exc:
            raise RemoteServiceError(f"{method} {path} failed: {exc}") from exc
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError
            raise RemoteServiceError(f"{method} {path} returned invalid JSON: {exc}") from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
