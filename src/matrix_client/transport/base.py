"""
Transport capability consumed by the dispatcher.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol, runtime_checkable


@dataclass
class TransportResponse:
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        """Send one request. Network-level failures are raised as exceptions."""
        ...

    async def close(self) -> None: ...
