"""Application-owned message publishing port (hexagonal architecture).

The notification use case only needs "send this JSON payload to a topic
under a key"; the concrete broker client lives in infrastructure.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


# Header carrying the event's operation type (CREATE/READ/UPDATE/DELETE)
EVENT_OPERATION_HEADER = "x-event-operation"


@runtime_checkable
class MessagePublisherPort(Protocol):
    async def send(
        self,
        topic: str,
        key: str,
        payload: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> None: ...

    async def aclose(self) -> None: ...


__all__ = ["EVENT_OPERATION_HEADER", "MessagePublisherPort"]
