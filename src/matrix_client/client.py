"""
AsyncMatrixClient / MatrixClient — Matrix client-server API clients.
"""

import asyncio
import os
import uuid
from typing import Any, Optional

from matrix_client import endpoints
from matrix_client.dispatcher import Dispatcher
from matrix_client.errors import ConfigurationError
from matrix_client.events.base import RoomEvent
from matrix_client.models.filter import Filter, FilterId
from matrix_client.models.login import LoginFlow, LoginRequest, LoginResponse, UserIdentifier
from matrix_client.models.primitive import EventID
from matrix_client.models.server import ServerVersions, WellKnown
from matrix_client.transport.base import Transport
from matrix_client.transport.http import DEFAULT_TIMEOUT, HttpTransport


class AsyncMatrixClient:
    """Async Matrix client (primary).

    Holds at most one access token. Each call hands the token it sees at call
    time to the dispatcher, so replacing ``access_token`` between calls is safe.
    """

    def __init__(
        self,
        homeserver: str,
        access_token: Optional[str] = None,
        transport: Optional[Transport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.access_token = access_token
        self._transport = transport or HttpTransport(timeout=timeout)
        self._dispatcher = Dispatcher(homeserver, self._transport)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncMatrixClient":
        """Build a client from ``MATRIX_HOMESERVER`` and ``MATRIX_ACCESS_TOKEN``."""
        homeserver = os.environ.get("MATRIX_HOMESERVER")
        if not homeserver:
            raise ConfigurationError("MATRIX_HOMESERVER is not set")
        return cls(homeserver, access_token=os.environ.get("MATRIX_ACCESS_TOKEN") or None, **kwargs)

    @property
    def homeserver(self) -> str:
        return self._dispatcher.homeserver

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def get_versions(self) -> ServerVersions:
        """Spec versions supported by the server. No auth."""
        return await self._dispatcher.execute(endpoints.versions(), None, self.access_token)

    async def get_well_known(self) -> WellKnown:
        """Discovery information for the homeserver's domain. No auth."""
        return await self._dispatcher.execute(endpoints.well_known())

    async def get_login_flows(self) -> list[str]:
        """Login types the server accepts (``m.login.password``, ``m.login.token``, ...)."""
        flows = await self._dispatcher.execute(endpoints.login_flows(), None, self.access_token)
        return [flow.type for flow in flows.flows]

    async def login(
        self,
        username: str,
        password: str,
        token: bool = False,
        display_name: Optional[str] = None,
        device_id: Optional[str] = None,
    ) -> LoginResponse:
        """Log in with a password, or with a login token when ``token`` is set.

        ``password`` carries the login token in the token flow.
        """
        request = LoginRequest(
            type=LoginFlow.TOKEN if token else LoginFlow.PASSWORD,
            identifier=UserIdentifier(user=username),
            device_id=device_id,
            initial_device_display_name=display_name,
        )
        if token:
            request.token = password
        else:
            request.password = password
        return await self.login_with(request)

    async def login_with(self, request: LoginRequest) -> LoginResponse:
        result = await self._dispatcher.execute(endpoints.login(request), None, self.access_token)
        self.access_token = result.access_token
        return result

    async def logout(self) -> None:
        """Invalidate the current access token and its device."""
        await self._dispatcher.execute(endpoints.logout(), False, self.access_token)
        self.access_token = None

    async def logout_all(self) -> None:
        """Invalidate every access token of the user, including this one."""
        await self._dispatcher.execute(endpoints.logout(), True, self.access_token)
        self.access_token = None

    async def set_filter(self, user_id: str, filter: Filter) -> FilterId:
        """Upload a filter; the returned id is paired with ``user_id``."""
        upload = await self._dispatcher.execute(endpoints.set_filter(filter), user_id, self.access_token)
        return FilterId(user_id=user_id, filter_id=upload.filter_id)

    async def get_filter(self, user_id: str, filter_id: str) -> Filter:
        return await self.get_filter_by_id(FilterId(user_id=user_id, filter_id=filter_id))

    async def get_filter_by_id(self, id: FilterId) -> Filter:
        return await self._dispatcher.execute(endpoints.get_filter(), id, self.access_token)

    async def get_event(self, room_id: str, event_id: str) -> RoomEvent:
        return await self._dispatcher.execute(endpoints.get_event(), (room_id, event_id), self.access_token)

    async def get_room_state(self, room_id: str) -> list[RoomEvent]:
        return await self._dispatcher.execute(endpoints.room_state(), room_id, self.access_token)

    async def redact(
        self,
        room_id: str,
        event_id: str,
        reason: Optional[str] = None,
        txn_id: Optional[str] = None,
    ) -> EventID:
        """Redact an event. Returns the event id of the redaction."""
        txn_id = txn_id or uuid.uuid4().hex
        result = await self._dispatcher.execute(
            endpoints.redact(reason), (room_id, event_id, txn_id), self.access_token,
        )
        return result.event_id

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> "AsyncMatrixClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class MatrixClient:
    """Sync wrapper around AsyncMatrixClient. Runs the event loop internally."""

    def __init__(self, homeserver: str, **kwargs: Any):
        self._async = AsyncMatrixClient(homeserver, **kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def access_token(self) -> Optional[str]:
        return self._async.access_token

    @access_token.setter
    def access_token(self, value: Optional[str]) -> None:
        self._async.access_token = value

    def get_versions(self) -> ServerVersions:
        return self._run(self._async.get_versions())

    def get_well_known(self) -> WellKnown:
        return self._run(self._async.get_well_known())

    def get_login_flows(self) -> list[str]:
        return self._run(self._async.get_login_flows())

    def login(self, username: str, password: str, **kwargs: Any) -> LoginResponse:
        return self._run(self._async.login(username, password, **kwargs))

    def login_with(self, request: LoginRequest) -> LoginResponse:
        return self._run(self._async.login_with(request))

    def logout(self) -> None:
        self._run(self._async.logout())

    def logout_all(self) -> None:
        self._run(self._async.logout_all())

    def set_filter(self, user_id: str, filter: Filter) -> FilterId:
        return self._run(self._async.set_filter(user_id, filter))

    def get_filter(self, user_id: str, filter_id: str) -> Filter:
        return self._run(self._async.get_filter(user_id, filter_id))

    def get_filter_by_id(self, id: FilterId) -> Filter:
        return self._run(self._async.get_filter_by_id(id))

    def get_event(self, room_id: str, event_id: str) -> RoomEvent:
        return self._run(self._async.get_event(room_id, event_id))

    def get_room_state(self, room_id: str) -> list[RoomEvent]:
        return self._run(self._async.get_room_state(room_id))

    def redact(self, room_id: str, event_id: str, **kwargs: Any) -> EventID:
        return self._run(self._async.redact(room_id, event_id, **kwargs))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
