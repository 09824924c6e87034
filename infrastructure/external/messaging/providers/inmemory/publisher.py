"""In-memory Publisher implementation.

Single-process only. Records every published message per topic; used when no
broker is configured or reachable, and by tests.
"""
from __future__ import annotations

import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from ...base import Envelope, PublishMiddleware, PublishResult, Publisher, Serializer


@dataclass(slots=True)
class RecordedMessage:
    topic: str
    key: Optional[bytes]
    value: bytes
    headers: Dict[str, bytes]
    offset: int


class InMemoryPublisher(Publisher):
    def __init__(
        self,
        serializer: Serializer,
        middlewares: Optional[List[PublishMiddleware]] = None,
    ) -> None:
        super().__init__(serializer, middlewares)
        self._messages: Dict[str, List[RecordedMessage]] = defaultdict(list)
        # publish() runs on worker threads (asyncio.to_thread)
        self._lock = threading.Lock()
        self._closed = False

    def publish(self, topic: str, env: Envelope) -> PublishResult:
        env = self._before(topic, env)
        value = self._value(env)
        with self._lock:
            if self._closed:
                raise RuntimeError("publisher is closed")
            log = self._messages[topic]
            log.append(RecordedMessage(topic=topic, key=env.key, value=value, headers=dict(env.headers), offset=len(log)))
            result = PublishResult(topic=topic, partition=0, offset=len(log) - 1)
        self._after(topic, env, result)
        return result

    def messages(self, topic: str) -> List[RecordedMessage]:
        with self._lock:
            return list(self._messages.get(topic, []))

    def close(self) -> None:
        with self._lock:
            self._closed = True
