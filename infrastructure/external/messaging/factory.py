from __future__ import annotations

from typing import List, Optional

from .base import PublishMiddleware, Publisher, Serializer
from .config import MessagingConfig
from .providers.aiokafka.publisher import AiokafkaPublisher
from .providers.inmemory.publisher import InMemoryPublisher
from .providers.kafka.publisher import KafkaPublisher


_KAFKA_DRIVERS = {
    "confluent": KafkaPublisher,
    "aiokafka": AiokafkaPublisher,
}


def create_publisher(
    cfg: MessagingConfig,
    serializer: Serializer,
    middlewares: Optional[List[PublishMiddleware]] = None,
) -> Publisher:
    """Instantiate the publisher selected by ``cfg.provider`` / ``cfg.kafka.driver``."""
    if cfg.provider == "inmemory":
        return InMemoryPublisher(serializer, middlewares)
    if cfg.provider != "kafka":
        raise ValueError(f"Unsupported provider: {cfg.provider}")
    try:
        publisher_cls = _KAFKA_DRIVERS[cfg.kafka.driver]
    except KeyError:
        raise ValueError(f"Unsupported kafka driver: {cfg.kafka.driver}") from None
    return publisher_cls(cfg.kafka, serializer, middlewares)
