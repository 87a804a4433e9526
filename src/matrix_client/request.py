"""
Request descriptors.

A ``MatrixRequest`` describes one API call as data: method, whether it needs
an access token, how to build the path from caller parameters, the body, and
the type the response decodes into. ``Dispatcher`` is the only code that
turns one into a network call.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar
from urllib.parse import quote

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from matrix_client.errors import EncodingFailure, InvalidParameters

P = TypeVar("P")
R = TypeVar("R")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"

    @property
    def carries_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


@dataclass(frozen=True)
class MatrixRequest(Generic[P, R]):
    method: HttpMethod
    requires_auth: bool
    path: Callable[[P], str]
    response_type: Any
    body: Any = None

    def render_path(self, params: P) -> str:
        try:
            path = self.path(params)
        except InvalidParameters:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidParameters(f"could not build request path: {e}") from e
        if not isinstance(path, str) or not path.startswith("/"):
            raise InvalidParameters(f"request path must start with '/', got {path!r}")
        return path

    def encoded_body(self) -> Optional[bytes]:
        """The serialised body, or None for methods that never send one."""
        if not self.method.carries_body:
            return None
        return encode_body(self.body)


def encode_body(body: Any) -> bytes:
    """Serialise a request body to JSON. ``None`` becomes ``{}``."""
    if body is None:
        return b"{}"
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return json.dumps(body, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingFailure(f"could not encode {type(body).__name__} request body: {e}") from e


def path_segment(value: Any, name: str) -> str:
    """Percent-encode one path segment. Empty or non-string values are rejected."""
    if not isinstance(value, str) or not value:
        raise InvalidParameters(f"{name} must be a non-empty string, got {value!r}")
    return quote(value, safe="")
