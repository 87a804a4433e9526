"""
Matrix client error types.

Every failure of a client call surfaces as one of these. Unknown event
types are not errors; they decode to ``UnknownEvent``.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from matrix_client.models.error import ServerError


class MatrixClientError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class AuthRequired(MatrixClientError):
    """Raised locally, before any network call, when a request needs a token."""

    def __init__(self, message: str = "this request requires an access token"):
        super().__init__("auth_required", message)


class ConfigurationError(MatrixClientError):
    """The client could not be built from its environment."""

    def __init__(self, message: str):
        super().__init__("configuration_error", message)


class InvalidParameters(MatrixClientError):
    def __init__(self, message: str):
        super().__init__("invalid_parameters", message)


class EncodingFailure(MatrixClientError):
    def __init__(self, message: str):
        super().__init__("encoding_failure", message)


class TransportFailure(MatrixClientError):
    def __init__(self, cause: BaseException):
        super().__init__("transport_failure", f"transport failed: {cause!r}")
        self.cause = cause


class Cancelled(MatrixClientError, asyncio.CancelledError):
    """The in-flight call was cancelled.

    Subclasses ``asyncio.CancelledError`` so task cancellation still
    propagates through ``asyncio`` as usual.
    """

    def __init__(self, message: str = "request cancelled"):
        super().__init__("cancelled", message)


class ServerRejected(MatrixClientError):
    """The homeserver answered with a non-200 status and a standard error body."""

    def __init__(self, server_error: ServerError):
        super().__init__(
            server_error.errcode,
            f"HTTP {server_error.status}: {server_error.errcode}: {server_error.error}",
            details=server_error.model_dump(exclude_none=True),
        )
        self.server_error = server_error

    @property
    def errcode(self) -> str:
        return self.server_error.errcode

    @property
    def status(self) -> int:
        return self.server_error.status

    @property
    def retry_after_ms(self) -> Optional[int]:
        return self.server_error.retry_after_ms


class MalformedErrorBody(MatrixClientError):
    """A non-200 response whose body is not a Matrix error envelope."""

    def __init__(self, status: int, content: bytes):
        super().__init__("malformed_error_body", f"HTTP {status}: {content[:200]!r}")
        self.status = status
        self.content = content


class MalformedEvent(MatrixClientError):
    def __init__(self, event_type: Optional[str], detail: str):
        label = event_type if event_type is not None else "<missing type>"
        super().__init__("malformed_event", f"malformed {label} event: {detail}")
        self.event_type = event_type
        self.detail = detail


class DecodeError(MatrixClientError):
    def __init__(self, target: str, detail: str, path: Optional[str] = None, size: int = 0):
        where = f" at {path}" if path else ""
        super().__init__(
            "decode_error",
            f"could not decode {target}{where} ({size} bytes): {detail}",
            details={"target": target, "path": path, "size": size},
        )
        self.target = target
        self.detail = detail
        self.path = path
        self.size = size
