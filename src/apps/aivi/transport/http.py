"""
httpx-based async HTTP transport for the AIVI service.

Turns httpx exceptions and 4xx/5xx responses into TransportError subclasses.
"""

from __future__ import annotations

import logging
import ssl
from typing import Any

import httpx

from apps.aivi.models.errors import DecodeError, NetworkError, ServerError
from apps.aivi.models.models import ResponseType

logger = logging.getLogger(__name__)

ACCEPT_HEADERS = {
    ResponseType.JSON: "application/json",
    ResponseType.BINARY: "application/octet-stream, audio/*",
}


def make_httpx_client(**kwargs: Any) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` verified against the system certificate store.

    Accepts the same keyword arguments as ``httpx.AsyncClient``.
    """
    kwargs.setdefault("verify", ssl.create_default_context())
    return httpx.AsyncClient(**kwargs)


class HttpTransport:
    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 30.0):
        self.client = client if client is not None else make_httpx_client()
        self.timeout = timeout

    async def get(self, url, response_type=ResponseType.JSON, timeout=None):
        return await self._send(
            "GET",
            url,
            headers={"Accept": ACCEPT_HEADERS[response_type]},
            timeout=timeout,
        )

    async def post(self, url, body, timeout=None):
        return await self._send(
            "POST",
            url,
            json=body,
            headers={"Accept": ACCEPT_HEADERS[ResponseType.JSON]},
            timeout=timeout,
        )

    async def _send(self, method, url, timeout=None, **kwargs) -> httpx.Response:
        timeout = self.timeout if timeout is None else timeout
        try:
            # Bodies are read eagerly, so decoding failures are raised here too
            response = await self.client.request(method, url, timeout=timeout, **kwargs)
        except httpx.DecodingError as e:
            raise DecodeError(f"Failed to decode response: {e}", url=url) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Failed to connect to {url}: {e}", url=url) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        if response.status_code >= 400:
            raise ServerError(response.status_code, url=url, body=response.text)
        return response

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
