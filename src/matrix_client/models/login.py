"""
Login / logout models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from matrix_client.models.primitive import DeviceID, UserID
from matrix_client.models.server import WellKnown


class LoginFlow:
    PASSWORD = "m.login.password"
    TOKEN = "m.login.token"
    SSO = "m.login.sso"
    APPLICATION_SERVICE = "m.login.application_service"


class LoginFlowType(BaseModel):
    type: str


class LoginFlows(BaseModel):
    flows: list[LoginFlowType]


class UserIdentifier(BaseModel):
    type: str = "m.id.user"
    user: str


class LoginRequest(BaseModel):
    """POST /login body. Exactly one of ``password`` / ``token`` is set."""

    type: str
    identifier: UserIdentifier
    password: Optional[str] = None
    token: Optional[str] = None
    device_id: Optional[DeviceID] = None
    initial_device_display_name: Optional[str] = None


class LoginResponse(BaseModel):
    user_id: UserID
    access_token: str
    device_id: DeviceID
    home_server: Optional[str] = None
    well_known: Optional[WellKnown] = None


class EmptyResponse(BaseModel):
    """``{}`` bodies returned by endpoints such as logout."""

    model_config = ConfigDict(extra="allow")
