"""
Server discovery models: ``/versions`` and ``/.well-known/matrix/client``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ServerVersions(BaseModel):
    """Spec versions (``rX.Y.Z`` / ``vX.Y``) and unstable features the server advertises."""

    versions: list[str]
    unstable_features: dict[str, bool] = Field(default_factory=dict)

    def supports(self, version: str) -> bool:
        return version in self.versions


class ServerInformation(BaseModel):
    base_url: str


class WellKnown(BaseModel):
    """Discovery info. Extra keys (Java package naming, e.g. ``com.example.app.prop``) are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    homeserver: ServerInformation = Field(alias="m.homeserver")
    identity_server: Optional[ServerInformation] = Field(default=None, alias="m.identity_server")
