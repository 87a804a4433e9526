"""
State events.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from matrix_client.events.base import StateEvent
from matrix_client.events.registry import default_registry
from matrix_client.models.primitive import UserID


@default_registry.register
class EncryptionEvent(StateEvent):
    """``m.room.encryption``: the room's encryption algorithm and rotation parameters."""

    event_type: ClassVar[str] = "m.room.encryption"

    class Content(BaseModel):
        algorithm: str
        rotation_period_ms: Optional[int] = None
        rotation_period_msgs: Optional[int] = None

    content: Content


@default_registry.register
class NameEvent(StateEvent):
    event_type: ClassVar[str] = "m.room.name"

    class Content(BaseModel):
        name: str

    content: Content


@default_registry.register
class TopicEvent(StateEvent):
    event_type: ClassVar[str] = "m.room.topic"

    class Content(BaseModel):
        topic: str

    content: Content


@default_registry.register
class MemberEvent(StateEvent):
    """``m.room.member``; ``state_key`` is the user whose membership changed."""

    event_type: ClassVar[str] = "m.room.member"

    class Content(BaseModel):
        model_config = ConfigDict(extra="allow")

        membership: str
        displayname: Optional[str] = None
        avatar_url: Optional[str] = None
        reason: Optional[str] = None

    content: Content

    @property
    def target(self) -> Optional[UserID]:
        return UserID(self.state_key) if self.state_key is not None else None


@default_registry.register
class CreateEvent(StateEvent):
    event_type: ClassVar[str] = "m.room.create"

    class Content(BaseModel):
        model_config = ConfigDict(extra="allow", populate_by_name=True)

        creator: Optional[UserID] = None
        room_version: str = "1"
        federate: bool = Field(default=True, alias="m.federate")

    content: Content
