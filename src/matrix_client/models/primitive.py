"""
Identifier aliases and the wire timestamp type.
"""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, NewType

from pydantic import BeforeValidator, PlainSerializer

UserID = NewType("UserID", str)
UserID.__doc__ = "A Matrix user ID (``@user:example.com``)"
EventID = NewType("EventID", str)
EventID.__doc__ = "A Matrix event ID (``$base64`` or ``$legacyid:example.com``)"
RoomID = NewType("RoomID", str)
RoomID.__doc__ = "An internal Matrix room ID (``!randomstring:example.com``)"
DeviceID = NewType("DeviceID", str)
FilterID = NewType("FilterID", str)
FilterID.__doc__ = "An opaque filter ID returned by ``POST /user/{userId}/filter``"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def from_millis(value: Any) -> Any:
    """Epoch milliseconds -> aware UTC datetime. Datetimes pass through."""
    if isinstance(value, bool):
        raise ValueError("timestamp must be an integer, not a boolean")
    if isinstance(value, int):
        try:
            return EPOCH + value * _MILLISECOND
        except OverflowError as e:
            raise ValueError(f"timestamp {value} is out of range") from e
    if isinstance(value, datetime):
        return value
    raise ValueError(f"timestamp must be integer epoch milliseconds, got {type(value).__name__}")


def to_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _MILLISECOND


Timestamp = Annotated[datetime, BeforeValidator(from_millis), PlainSerializer(to_millis, return_type=int)]
