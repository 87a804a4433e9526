"""
Response decoder — raw response bytes to a statically declared result type.
"""

from functools import lru_cache
from typing import Any, Optional, TypeVar, get_origin

from pydantic import TypeAdapter, ValidationError

from matrix_client.errors import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def type_name(target: Any) -> str:
    if get_origin(target) is None and hasattr(target, "__name__"):
        return target.__name__
    return repr(target)


def describe_validation_error(err: ValidationError) -> tuple[Optional[str], str]:
    """Return (dotted field path or None, message) for the first validation error."""
    errors = err.errors()
    if not errors:
        return None, str(err)
    first = errors[0]
    path = ".".join(str(part) for part in first.get("loc", ())) or None
    return path, first.get("msg", str(err))


def decode_response(data: bytes, target: type[T]) -> T:
    """Decode ``data`` as ``target``.

    Epoch-millisecond ``Timestamp`` fields become aware datetimes. Embedded
    room events go through the event registry and fail with ``MalformedEvent``.
    Anything else that does not fit raises ``DecodeError``; there is no
    default instance.
    """
    try:
        return _adapter(target).validate_json(data)
    except ValidationError as err:
        path, detail = describe_validation_error(err)
        raise DecodeError(type_name(target), detail, path=path, size=len(data)) from err
