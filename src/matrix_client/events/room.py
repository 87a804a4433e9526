"""
Message-like room events.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from matrix_client.events.base import RoomEvent
from matrix_client.events.registry import default_registry
from matrix_client.models.primitive import EventID


@default_registry.register
class RedactionEvent(RoomEvent):
    """``m.room.redaction``.

    Older room versions carry ``redacts`` at the top level, room version 11
    moves it into ``content``; ``target`` checks both.
    """

    event_type: ClassVar[str] = "m.room.redaction"

    class Content(BaseModel):
        reason: Optional[str] = None
        redacts: Optional[EventID] = None

    content: Content
    redacts: Optional[EventID] = None

    @property
    def target(self) -> Optional[EventID]:
        return self.redacts or self.content.redacts


@default_registry.register
class MessageEvent(RoomEvent):
    """``m.room.message``. Msgtype-specific keys stay on ``content`` as extras."""

    event_type: ClassVar[str] = "m.room.message"

    class Content(BaseModel):
        model_config = ConfigDict(extra="allow")

        msgtype: str
        body: str
        format: Optional[str] = None
        formatted_body: Optional[str] = None

    content: Content
