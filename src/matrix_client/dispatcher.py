"""
Dispatcher — executes a ``MatrixRequest`` against a homeserver.

Stateless: the access token is passed in per call, nothing is cached and
nothing is retried. Rate-limit handling (``retry_after_ms``) is left to the
caller.
"""

import asyncio
import logging
from typing import Any, Optional, TypeVar

from pydantic import ValidationError

from matrix_client.decoding import decode_response
from matrix_client.errors import (
    AuthRequired,
    Cancelled,
    MalformedErrorBody,
    MatrixClientError,
    ServerRejected,
    TransportFailure,
)
from matrix_client.models.error import ServerError
from matrix_client.request import MatrixRequest
from matrix_client.transport.base import Transport

R = TypeVar("R")

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, homeserver: str, transport: Transport):
        self._homeserver = homeserver.rstrip("/")
        self._transport = transport

    @property
    def homeserver(self) -> str:
        return self._homeserver

    def url_for(self, path: str) -> str:
        return f"{self._homeserver}{path}"

    async def execute(
        self,
        request: MatrixRequest[Any, R],
        params: Any = None,
        access_token: Optional[str] = None,
    ) -> R:
        """Send ``request`` and decode the response as ``request.response_type``.

        Raises ``AuthRequired`` without touching the network when the request
        needs a token and none is given.
        """
        if request.requires_auth and not access_token:
            raise AuthRequired()

        path = request.render_path(params)
        body = request.encoded_body()

        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"
        if request.requires_auth:
            headers["Authorization"] = f"Bearer {access_token}"

        method = request.method.value
        logger.debug(f"{method} {path}")
        try:
            response = await self._transport.send(method, self.url_for(path), headers, body)
        except asyncio.CancelledError as e:
            raise Cancelled(f"{method} {path} cancelled") from e
        except MatrixClientError:
            raise
        except Exception as e:
            logger.warning(f"{method} {path} failed in transport: {e!r}")
            raise TransportFailure(e) from e

        if response.status_code == 200:
            return decode_response(response.content, request.response_type)

        try:
            server_error = ServerError.from_response(response.status_code, response.content)
        except ValidationError as e:
            logger.warning(f"{method} {path} -> HTTP {response.status_code} with an unparseable error body")
            raise MalformedErrorBody(response.status_code, response.content) from e

        logger.warning(f"{method} {path} -> HTTP {response.status_code} {server_error.errcode}")
        raise ServerRejected(server_error)
