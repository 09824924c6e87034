from __future__ import annotations

from typing import Optional

import structlog

from ..base import Envelope, PublishMiddleware, PublishResult


class LoggingMiddleware(PublishMiddleware):
    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None) -> None:
        self.log = logger or structlog.get_logger("messaging")

    def before_publish(self, topic: str, env: Envelope) -> Envelope:  # type: ignore[override]
        self.log.debug(
            "publishing",
            topic=topic,
            key=(env.key or b"").decode("utf-8", errors="replace"),
            headers=list(env.headers.keys()),
        )
        return env

    def after_publish(self, topic: str, env: Envelope, result: PublishResult) -> None:  # type: ignore[override]
        self.log.info(
            "published",
            topic=topic,
            partition=result.partition,
            offset=result.offset,
            key=(env.key or b"").decode("utf-8", errors="replace"),
        )
