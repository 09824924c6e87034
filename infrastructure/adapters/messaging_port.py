"""Infrastructure adapter that implements the application MessagePublisherPort
by delegating to a messaging Publisher (Kafka / in-memory).
"""
from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional

import structlog

from application.ports.messaging import MessagePublisherPort
from infrastructure.external.messaging import Envelope, Publisher
from infrastructure.external.messaging.envelope import H_CORR_ID, H_VERSION, SCHEMA_VERSION, set_header


class PublisherPortAdapter(MessagePublisherPort):
    def __init__(self, publisher: Publisher):
        self.publisher = publisher

    async def send(
        self,
        topic: str,
        key: str,
        payload: Mapping[str, Any],
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        env = Envelope(payload=dict(payload), key=key.encode("utf-8"))
        set_header(env.headers, H_VERSION, SCHEMA_VERSION)
        request_id = structlog.contextvars.get_contextvars().get("request_id")
        if request_id:
            set_header(env.headers, H_CORR_ID, str(request_id))
        for name, value in (headers or {}).items():
            set_header(env.headers, name, value)
        # Publisher is sync (waits for the delivery report); offload to a thread
        await asyncio.to_thread(self.publisher.publish, topic, env)

    async def aclose(self) -> None:
        await asyncio.to_thread(self.publisher.close)


__all__ = ["PublisherPortAdapter"]
