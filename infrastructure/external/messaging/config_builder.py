"""Map the `kafka` settings group onto the messaging dataclasses.

The settings groups mirror the dataclasses field for field, so the mapping
is a straight copy; only provider/driver names are normalized here.
"""
from __future__ import annotations

from core.config import KafkaSettings

from .config import (
    MessagingConfig,
    KafkaConfig,
    TLSConfig,
    SASLConfig,
    ProducerTuning,
)


def messaging_config_from_settings(ks: KafkaSettings) -> MessagingConfig:
    """Unknown providers are treated as "kafka"; unknown drivers as "confluent"."""
    kafka = KafkaConfig(
        bootstrap_servers=ks.bootstrap_servers,
        client_id=ks.client_id,
        tls=TLSConfig(**ks.tls.model_dump()),
        sasl=SASLConfig(**ks.sasl.model_dump()),
        producer=ProducerTuning(**ks.producer.model_dump()),
        driver="aiokafka" if ks.driver.lower() == "aiokafka" else "confluent",
    )
    provider = "inmemory" if (ks.provider or "").lower() == "inmemory" else "kafka"
    return MessagingConfig(provider=provider, kafka=kafka)


__all__ = ["messaging_config_from_settings"]
