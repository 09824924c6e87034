"""Publisher bootstrap shared by the HTTP and gRPC entrypoints."""
from __future__ import annotations

from core.config import KafkaSettings, settings
from core.logging_config import get_logger

from .base import Publisher
from .config_builder import messaging_config_from_settings
from .factory import create_publisher
from .middlewares import LoggingMiddleware
from .providers.inmemory.publisher import InMemoryPublisher
from .serializers import JsonSerializer


logger = get_logger(__name__)


def init_publisher(kafka_settings: KafkaSettings | None = None) -> Publisher:
    """按配置创建 Publisher；Kafka 客户端不可用时回退到内存版，保证业务接口可用"""
    cfg = messaging_config_from_settings(kafka_settings or settings.kafka)
    serializer = JsonSerializer()
    middlewares = [LoggingMiddleware()]
    try:
        publisher = create_publisher(cfg, serializer, middlewares)
        logger.info(
            "event_publisher_selected",
            provider=cfg.provider,
            driver=cfg.kafka.driver if cfg.provider == "kafka" else None,
            bootstrap_servers=cfg.kafka.bootstrap_servers if cfg.provider == "kafka" else None,
        )
        return publisher
    except Exception as exc:
        logger.error("event_publisher_init_failed", provider=cfg.provider, error=str(exc))
    logger.warning("event_publisher_selected", provider="inmemory", fallback=True)
    return InMemoryPublisher(serializer, middlewares)


__all__ = ["init_publisher"]
