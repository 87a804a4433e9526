"""Basic unit tests for the matrix-client package."""

import asyncio

from matrix_client import (
    AsyncMatrixClient,
    AuthRequired,
    Cancelled,
    ConfigurationError,
    DecodeError,
    EncodingFailure,
    ErrorCode,
    HttpMethod,
    InvalidParameters,
    MalformedErrorBody,
    MalformedEvent,
    MatrixClient,
    MatrixClientError,
    ServerError,
    ServerRejected,
    TransportFailure,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert MatrixClient is not None
    assert AsyncMatrixClient is not None


def test_error_hierarchy():
    for cls in (
        AuthRequired, ConfigurationError, InvalidParameters, EncodingFailure, TransportFailure, Cancelled,
        ServerRejected, MalformedErrorBody, MalformedEvent, DecodeError,
    ):
        assert issubclass(cls, MatrixClientError)


def test_cancelled_is_asyncio_cancellation():
    assert issubclass(Cancelled, asyncio.CancelledError)
    assert not issubclass(TransportFailure, asyncio.CancelledError)


def test_error_attributes():
    err = MatrixClientError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    cause = OSError("connection reset")
    failure = TransportFailure(cause)
    assert failure.code == "transport_failure"
    assert failure.cause is cause

    malformed = MalformedEvent(None, "'type' is missing or not a string")
    assert malformed.event_type is None
    assert "<missing type>" in str(malformed)


def test_server_rejected_exposes_server_error():
    server_error = ServerError(errcode=ErrorCode.LIMIT_EXCEEDED, error="too fast", status=429, retry_after_ms=500)
    err = ServerRejected(server_error)
    assert err.code == "M_LIMIT_EXCEEDED"
    assert err.status == 429
    assert err.retry_after_ms == 500
    assert err.details == {"errcode": "M_LIMIT_EXCEEDED", "error": "too fast", "status": 429, "retry_after_ms": 500}
    assert server_error.is_rate_limited


def test_http_methods_carrying_a_body():
    assert [m for m in HttpMethod if m.carries_body] == [HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH]
    assert HttpMethod.GET == "GET"
