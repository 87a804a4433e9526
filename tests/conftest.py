"""Shared fixtures: an in-memory transport that records every request."""

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

import pytest

from matrix_client import AsyncMatrixClient, Dispatcher
from matrix_client.transport.base import TransportResponse

HOMESERVER = "https://matrix.example.org"


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: Optional[bytes]

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    def json(self) -> Any:
        return json.loads(self.body) if self.body is not None else None


def reply(status: int = 200, body: Union[dict, list, bytes, None] = None) -> TransportResponse:
    if isinstance(body, bytes):
        content = body
    else:
        content = json.dumps(body if body is not None else {}).encode()
    return TransportResponse(status_code=status, content=content)


class RecordingTransport:
    """Answers from a ``(method, path) -> TransportResponse`` table and records requests.

    Unmatched requests get a 404 ``M_UNRECOGNIZED``. ``raises`` makes every
    send fail with that exception instead.
    """

    def __init__(
        self,
        responses: Optional[dict[tuple[str, str], TransportResponse]] = None,
        raises: Optional[BaseException] = None,
    ):
        self.responses = responses or {}
        self.raises = raises
        self.sent: list[SentRequest] = []
        self.closed = False

    def on(self, method: str, path: str, status: int = 200, body: Union[dict, list, bytes, None] = None) -> None:
        self.responses[(method, path)] = reply(status, body)

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        request = SentRequest(method, url, dict(headers), body)
        self.sent.append(request)
        if self.raises is not None:
            raise self.raises
        return self.responses.get(
            (method, request.path),
            reply(404, {"errcode": "M_UNRECOGNIZED", "error": "not mocked"}),
        )

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def dispatcher(transport: RecordingTransport) -> Dispatcher:
    return Dispatcher(HOMESERVER, transport)


@pytest.fixture
def client(transport: RecordingTransport) -> AsyncMatrixClient:
    return AsyncMatrixClient(HOMESERVER, access_token="syt_secret", transport=transport)


def make_event(event_type: str, content: Optional[dict[str, Any]] = None, **extra: Any) -> dict[str, Any]:
    event: dict[str, Any] = {
        "type": event_type,
        "event_id": "$143273582443PhrSn:example.org",
        "sender": "@alice:example.org",
        "origin_server_ts": 1632891234567,
        "unsigned": {"age": 1234},
        "content": content if content is not None else {},
    }
    event.update(extra)
    return event
