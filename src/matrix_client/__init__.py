"""
matrix-client — Matrix client-server API client for Python.

Declarative request descriptors, a stateless dispatcher, and typed
room-event decoding with a forward-compatible fallback for unknown types.
"""

from matrix_client.client import AsyncMatrixClient, MatrixClient
from matrix_client.dispatcher import Dispatcher
from matrix_client.errors import (
    AuthRequired,
    Cancelled,
    ConfigurationError,
    DecodeError,
    EncodingFailure,
    InvalidParameters,
    MalformedErrorBody,
    MalformedEvent,
    MatrixClientError,
    ServerRejected,
    TransportFailure,
)
from matrix_client.events import EventRegistry, RoomEvent, UnknownEvent, decode_event, default_registry
from matrix_client.models.error import ErrorCode, ServerError
from matrix_client.request import HttpMethod, MatrixRequest

__version__ = "0.1.0"
__all__ = [
    "AsyncMatrixClient",
    "MatrixClient",
    "Dispatcher",
    "MatrixRequest",
    "HttpMethod",
    "EventRegistry",
    "RoomEvent",
    "UnknownEvent",
    "decode_event",
    "default_registry",
    "ServerError",
    "ErrorCode",
    "MatrixClientError",
    "AuthRequired",
    "ConfigurationError",
    "InvalidParameters",
    "EncodingFailure",
    "TransportFailure",
    "Cancelled",
    "ServerRejected",
    "MalformedErrorBody",
    "MalformedEvent",
    "DecodeError",
]
