"""
One request descriptor per protocol action.

Each factory returns a fresh ``MatrixRequest``; path parameters are supplied
to ``Dispatcher.execute`` separately.
"""

from typing import Optional

from matrix_client.errors import InvalidParameters
from matrix_client.events.registry import AnyRoomEvent
from matrix_client.models.filter import Filter, FilterId, FilterUpload
from matrix_client.models.login import EmptyResponse, LoginFlows, LoginRequest, LoginResponse
from matrix_client.models.room import EventIdResponse, RedactRequest
from matrix_client.models.server import ServerVersions, WellKnown
from matrix_client.request import HttpMethod, MatrixRequest, path_segment

CLIENT_PREFIX = "/_matrix/client"
CLIENT_R0 = f"{CLIENT_PREFIX}/r0"


def versions() -> MatrixRequest[None, ServerVersions]:
    return MatrixRequest(HttpMethod.GET, False, lambda _: f"{CLIENT_PREFIX}/versions", ServerVersions)


def well_known() -> MatrixRequest[None, WellKnown]:
    return MatrixRequest(HttpMethod.GET, False, lambda _: "/.well-known/matrix/client", WellKnown)


def login_flows() -> MatrixRequest[None, LoginFlows]:
    return MatrixRequest(HttpMethod.GET, False, lambda _: f"{CLIENT_R0}/login", LoginFlows)


def login(request: LoginRequest) -> MatrixRequest[None, LoginResponse]:
    return MatrixRequest(HttpMethod.POST, False, lambda _: f"{CLIENT_R0}/login", LoginResponse, body=request)


def _logout_path(all_devices: bool) -> str:
    if not isinstance(all_devices, bool):
        raise InvalidParameters(f"logout expects a bool, got {all_devices!r}")
    return f"{CLIENT_R0}/logout/all" if all_devices else f"{CLIENT_R0}/logout"


def logout() -> MatrixRequest[bool, EmptyResponse]:
    """Params: ``True`` invalidates every token of the user, ``False`` only the current one."""
    return MatrixRequest(HttpMethod.POST, True, _logout_path, EmptyResponse)


def _filter_upload_path(user_id: str) -> str:
    return f"{CLIENT_R0}/user/{path_segment(user_id, 'user_id')}/filter"


def set_filter(filter: Filter) -> MatrixRequest[str, FilterUpload]:
    return MatrixRequest(HttpMethod.POST, True, _filter_upload_path, FilterUpload, body=filter)


def _filter_path(filter_id: FilterId) -> str:
    user = path_segment(filter_id.user_id, "user_id")
    return f"{CLIENT_R0}/user/{user}/filter/{path_segment(filter_id.filter_id, 'filter_id')}"


def get_filter() -> MatrixRequest[FilterId, Filter]:
    return MatrixRequest(HttpMethod.GET, True, _filter_path, Filter)


def _event_path(params: tuple[str, str]) -> str:
    room_id, event_id = params
    return f"{CLIENT_R0}/rooms/{path_segment(room_id, 'room_id')}/event/{path_segment(event_id, 'event_id')}"


def get_event() -> MatrixRequest[tuple[str, str], AnyRoomEvent]:
    """Params: ``(room_id, event_id)``."""
    return MatrixRequest(HttpMethod.GET, True, _event_path, AnyRoomEvent)


def _state_path(room_id: str) -> str:
    return f"{CLIENT_R0}/rooms/{path_segment(room_id, 'room_id')}/state"


def room_state() -> MatrixRequest[str, list[AnyRoomEvent]]:
    return MatrixRequest(HttpMethod.GET, True, _state_path, list[AnyRoomEvent])


def _redact_path(params: tuple[str, str, str]) -> str:
    room_id, event_id, txn_id = params
    return (
        f"{CLIENT_R0}/rooms/{path_segment(room_id, 'room_id')}"
        f"/redact/{path_segment(event_id, 'event_id')}/{path_segment(txn_id, 'txn_id')}"
    )


def redact(reason: Optional[str] = None) -> MatrixRequest[tuple[str, str, str], EventIdResponse]:
    """Params: ``(room_id, event_id, txn_id)``."""
    return MatrixRequest(HttpMethod.PUT, True, _redact_path, EventIdResponse, body=RedactRequest(reason=reason))
