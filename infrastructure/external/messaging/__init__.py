from .base import (
    Envelope,
    PublishResult,
    Publisher,
    Serializer,
)
from .config import (
    MessagingConfig,
    KafkaConfig,
    ProducerTuning,
    TLSConfig,
    SASLConfig,
)
from .exceptions import MessagingError, PublishError, SerializationError
from .factory import create_publisher

__all__ = [
    "Envelope",
    "PublishResult",
    "Publisher",
    "Serializer",
    "MessagingConfig",
    "KafkaConfig",
    "ProducerTuning",
    "TLSConfig",
    "SASLConfig",
    "MessagingError",
    "PublishError",
    "SerializationError",
    "create_publisher",
]
