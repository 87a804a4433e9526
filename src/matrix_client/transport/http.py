"""
The default ``Transport``, built on httpx.
"""

import logging
from typing import Mapping, Optional

import httpx

from matrix_client.transport.base import TransportResponse

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "matrix-client-py/0.1.0"

logger = logging.getLogger(__name__)


class HttpTransport:
    """Sends requests over a shared ``httpx.AsyncClient``. Does not retry."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
        )

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        resp = await self._client.request(method, url, headers=dict(headers), content=body)
        logger.debug(f"{method} {resp.url.path} -> {resp.status_code} ({len(resp.content)} bytes)")
        return TransportResponse(
            status_code=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
