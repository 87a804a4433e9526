"""
Room request/response bodies.
"""

from typing import Optional

from pydantic import BaseModel

from matrix_client.models.primitive import EventID


class RedactRequest(BaseModel):
    reason: Optional[str] = None


class EventIdResponse(BaseModel):
    event_id: EventID
