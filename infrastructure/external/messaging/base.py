from __future__ import annotations

import abc
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol


@dataclass(slots=True)
class Envelope:
    """One outbound record: payload plus the Kafka key and headers it is sent with."""

    payload: Any
    key: Optional[bytes] = None
    headers: Dict[str, bytes] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class PublishResult:
    topic: str
    partition: int
    offset: int
    timestamp: Optional[int] = None


class Serializer(Protocol):
    def dumps(self, obj: Any) -> bytes: ...

    def loads(self, data: bytes) -> Any: ...


class PublishMiddleware(Protocol):
    def before_publish(self, topic: str, env: Envelope) -> Envelope: ...

    def after_publish(self, topic: str, env: Envelope, result: PublishResult) -> None: ...


class Publisher(abc.ABC):
    """Blocking publisher; async callers hand it to a worker thread."""

    def __init__(self, serializer: Serializer, middlewares=None) -> None:
        self.serializer = serializer
        self.middlewares = list(middlewares or [])

    @abc.abstractmethod
    def publish(self, topic: str, env: Envelope) -> PublishResult: ...

    @abc.abstractmethod
    def close(self) -> None: ...

    def _before(self, topic: str, env: Envelope) -> Envelope:
        for mw in self.middlewares:
            env = mw.before_publish(topic, env)
        return env

    def _after(self, topic: str, env: Envelope, result: PublishResult) -> None:
        for mw in self.middlewares:
            mw.after_publish(topic, env, result)

    def _value(self, env: Envelope) -> bytes:
        if isinstance(env.payload, (bytes, bytearray)):
            return bytes(env.payload)
        return self.serializer.dumps(env.payload)
