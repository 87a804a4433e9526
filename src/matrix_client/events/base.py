"""
Room event envelope and base event types.

Every event shares the same envelope (``type``, ``event_id``, ``sender``,
``origin_server_ts``, ``unsigned`` and, for state events, ``state_key``).
The envelope is parsed once by the registry; variants only describe their
``content`` and any extra top-level keys they care about.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from matrix_client.models.primitive import EventID, RoomID, Timestamp, UserID


class EventEnvelope(BaseModel):
    """Common top-level event fields. Unrecognised keys are kept as extras."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    event_id: EventID
    sender: UserID
    origin_server_ts: Timestamp
    unsigned: Optional[dict[str, Any]] = None
    state_key: Optional[str] = None
    room_id: Optional[RoomID] = None

    @property
    def is_state(self) -> bool:
        return self.state_key is not None


class RoomEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_type: ClassVar[str] = ""

    type: str
    event_id: EventID
    sender: UserID
    origin_server_ts: Timestamp
    unsigned: Optional[dict[str, Any]] = None
    room_id: Optional[RoomID] = None
    content: Any = None

    @classmethod
    def from_envelope(cls, envelope: EventEnvelope, content: dict[str, Any]) -> "RoomEvent":
        """Build the variant from an already parsed envelope and its raw content."""
        return cls.model_validate({**dict(envelope), "content": content})

    @property
    def redacted(self) -> bool:
        return bool(self.unsigned and "redacted_because" in self.unsigned)


class StateEvent(RoomEvent):
    state_key: Optional[str] = None


class UnknownEvent(RoomEvent):
    """An event whose ``type`` has no registered decoder.

    ``content`` and any unrecognised top-level keys are kept as received, so
    ``model_dump(mode="json", exclude_none=True)`` reproduces the wire event.
    """

    model_config = ConfigDict(extra="allow")

    state_key: Optional[str] = None
    content: dict[str, Any]
