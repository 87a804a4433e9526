"""
Decodes room events into the variant registered for their ``type``.

Lookup is an exact string match on ``type``. Unregistered types decode to
``UnknownEvent`` with the raw content kept as is. A registered type whose
content does not match its variant raises ``MalformedEvent``; it is never
downgraded to ``UnknownEvent``.
"""

import json
from collections.abc import Mapping
from typing import Annotated, Any, Callable, Optional, TypeVar

from pydantic import PlainSerializer, PlainValidator, ValidationError

from matrix_client.decoding import describe_validation_error
from matrix_client.errors import MalformedEvent
from matrix_client.events.base import EventEnvelope, RoomEvent, UnknownEvent

EventDecoder = Callable[[EventEnvelope, dict[str, Any]], RoomEvent]
E = TypeVar("E", bound=type[RoomEvent])


def _malformed(event_type: Optional[str], err: ValidationError) -> MalformedEvent:
    path, detail = describe_validation_error(err)
    return MalformedEvent(event_type, f"{path}: {detail}" if path else detail)


class EventRegistry:
    def __init__(self) -> None:
        self._decoders: dict[str, EventDecoder] = {}

    def register(self, event_class: E) -> E:
        """Register a ``RoomEvent`` subclass under its ``event_type``. Usable as a decorator."""
        if not event_class.event_type:
            raise ValueError(f"{event_class.__name__} does not declare an event_type")
        self.register_decoder(event_class.event_type, event_class.from_envelope)
        return event_class

    def register_decoder(self, event_type: str, decoder: EventDecoder) -> None:
        if event_type in self._decoders:
            raise ValueError(f"a decoder for {event_type!r} is already registered")
        self._decoders[event_type] = decoder

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._decoders

    @property
    def known_types(self) -> list[str]:
        return sorted(self._decoders)

    def copy(self) -> "EventRegistry":
        clone = EventRegistry()
        clone._decoders = dict(self._decoders)
        return clone

    def decode(self, raw: Any) -> RoomEvent:
        if not isinstance(raw, Mapping):
            raise MalformedEvent(None, f"expected a JSON object, got {type(raw).__name__}")
        event_type = raw.get("type")
        if not isinstance(event_type, str):
            raise MalformedEvent(None, "'type' is missing or not a string")

        content = raw.get("content")
        if not isinstance(content, Mapping):
            raise MalformedEvent(event_type, "'content' is missing or not an object")

        try:
            envelope = EventEnvelope.model_validate({k: v for k, v in raw.items() if k != "content"})
        except ValidationError as err:
            raise _malformed(event_type, err) from err

        decoder = self._decoders.get(event_type)
        if decoder is None:
            return UnknownEvent.from_envelope(envelope, dict(content))

        try:
            return decoder(envelope, dict(content))
        except ValidationError as err:
            raise _malformed(event_type, err) from err
        except (TypeError, ValueError) as err:
            raise MalformedEvent(event_type, str(err)) from err


default_registry = EventRegistry()


def decode_event(raw: Any, registry: Optional[EventRegistry] = None) -> RoomEvent:
    """Decode one event object (already parsed JSON)."""
    if isinstance(raw, RoomEvent):
        return raw
    return (registry if registry is not None else default_registry).decode(raw)


def decode_event_json(data: bytes, registry: Optional[EventRegistry] = None) -> RoomEvent:
    try:
        raw = json.loads(data)
    except ValueError as err:
        raise MalformedEvent(None, f"invalid JSON: {err}") from err
    return decode_event(raw, registry)


def _validate_event(value: Any) -> RoomEvent:
    return decode_event(value)


def _dump_event(event: RoomEvent) -> dict[str, Any]:
    return event.model_dump(mode="json", exclude_none=True)


# Use as a field type in response models to route embedded events through
# the default registry.
AnyRoomEvent = Annotated[RoomEvent, PlainValidator(_validate_event), PlainSerializer(_dump_event)]
