"""
Room events and the registry that decodes them.

Importing this package registers the built-in variants with ``default_registry``.
"""

from matrix_client.events.base import EventEnvelope, RoomEvent, StateEvent, UnknownEvent
from matrix_client.events.registry import (
    AnyRoomEvent,
    EventRegistry,
    decode_event,
    decode_event_json,
    default_registry,
)
from matrix_client.events.room import MessageEvent, RedactionEvent
from matrix_client.events.state import CreateEvent, EncryptionEvent, MemberEvent, NameEvent, TopicEvent

__all__ = [
    "AnyRoomEvent",
    "CreateEvent",
    "EncryptionEvent",
    "EventEnvelope",
    "EventRegistry",
    "MemberEvent",
    "MessageEvent",
    "NameEvent",
    "RedactionEvent",
    "RoomEvent",
    "StateEvent",
    "TopicEvent",
    "UnknownEvent",
    "decode_event",
    "decode_event_json",
    "default_registry",
]
