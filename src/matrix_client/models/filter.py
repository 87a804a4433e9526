"""
Filter models, uploaded with ``set_filter`` and downloaded with ``get_filter``.
"""

from typing import Literal, Optional

from pydantic import BaseModel

from matrix_client.models.primitive import FilterID, RoomID, UserID


class EventFilter(BaseModel):
    limit: Optional[int] = None
    not_senders: Optional[list[UserID]] = None
    not_types: Optional[list[str]] = None
    senders: Optional[list[UserID]] = None
    types: Optional[list[str]] = None


class RoomEventFilter(EventFilter):
    not_rooms: Optional[list[RoomID]] = None
    rooms: Optional[list[RoomID]] = None
    contains_url: Optional[bool] = None
    lazy_load_members: Optional[bool] = None
    include_redundant_members: Optional[bool] = None


class RoomFilter(BaseModel):
    not_rooms: Optional[list[RoomID]] = None
    rooms: Optional[list[RoomID]] = None
    ephemeral: Optional[RoomEventFilter] = None
    include_leave: Optional[bool] = None
    state: Optional[RoomEventFilter] = None
    timeline: Optional[RoomEventFilter] = None
    account_data: Optional[RoomEventFilter] = None


class Filter(BaseModel):
    event_fields: Optional[list[str]] = None
    event_format: Optional[Literal["client", "federation"]] = None
    presence: Optional[EventFilter] = None
    account_data: Optional[EventFilter] = None
    room: Optional[RoomFilter] = None


class FilterUpload(BaseModel):
    """Response body of ``POST /user/{userId}/filter``."""

    filter_id: FilterID


class FilterId(BaseModel):
    """A filter ID is only meaningful together with the user that created it."""

    user_id: UserID
    filter_id: FilterID
