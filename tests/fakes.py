"""In-memory doubles for the outbound message port."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SentMessage:
    topic: str
    key: str
    payload: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)


class RecordingPort:
    """MessagePublisherPort fake that keeps every send in memory."""

    def __init__(self) -> None:
        self.sent: List[SentMessage] = []
        self.closed = False

    async def send(self, topic, key, payload, headers=None):
        self.sent.append(SentMessage(topic, key, dict(payload), dict(headers or {})))

    async def aclose(self):
        self.closed = True


class FailingPort(RecordingPort):
    """Every send fails as a broker outage would."""

    def __init__(self, exc: Optional[Exception] = None) -> None:
        super().__init__()
        self.exc = exc or RuntimeError("broker unavailable")
        self.attempts = 0

    async def send(self, topic, key, payload, headers=None):
        self.attempts += 1
        raise self.exc
