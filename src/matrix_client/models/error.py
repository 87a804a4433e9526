"""
Standard Matrix error body: ``{"errcode": ..., "error": ..., "retry_after_ms"?: ...}``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode:
    FORBIDDEN = "M_FORBIDDEN"
    UNKNOWN_TOKEN = "M_UNKNOWN_TOKEN"
    MISSING_TOKEN = "M_MISSING_TOKEN"
    BAD_JSON = "M_BAD_JSON"
    NOT_JSON = "M_NOT_JSON"
    NOT_FOUND = "M_NOT_FOUND"
    LIMIT_EXCEEDED = "M_LIMIT_EXCEEDED"
    UNKNOWN = "M_UNKNOWN"
    UNRECOGNIZED = "M_UNRECOGNIZED"
    USER_DEACTIVATED = "M_USER_DEACTIVATED"
    INVALID_PARAM = "M_INVALID_PARAM"


class ErrorBody(BaseModel):
    """The error envelope exactly as it appears on the wire. Other keys are ignored."""

    model_config = ConfigDict(frozen=True)

    errcode: str
    error: str = ""
    retry_after_ms: Optional[int] = None


class ServerError(ErrorBody):
    status: int = 0  # HTTP status of the response

    @classmethod
    def from_response(cls, status: int, content: bytes) -> "ServerError":
        """Parse an error body. Raises ``pydantic.ValidationError`` if it isn't one."""
        body = ErrorBody.model_validate_json(content)
        return cls(status=status, **body.model_dump())

    @property
    def is_rate_limited(self) -> bool:
        return self.errcode == ErrorCode.LIMIT_EXCEEDED
