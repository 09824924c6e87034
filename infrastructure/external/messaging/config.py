from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional


@dataclass(slots=True)
class TLSConfig:
    enable: bool = False
    ca_location: Optional[str] = None
    certificate: Optional[str] = None
    key: Optional[str] = None
    verify: bool = True


@dataclass(slots=True)
class SASLConfig:
    mechanism: Optional[str] = None  # e.g. "PLAIN", "SCRAM-SHA-256", "SCRAM-SHA-512"
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass(slots=True)
class ProducerTuning:
    acks: str = "all"
    enable_idempotence: bool = True
    compression_type: str = "zstd"
    linger_ms: int = 5
    max_in_flight: int = 5
    message_timeout_ms: int = 120_000
    # local waits (seconds) for queue backpressure and the delivery report
    send_wait_s: float = 5.0
    delivery_wait_s: float = 30.0


@dataclass(slots=True)
class KafkaConfig:
    bootstrap_servers: str = "localhost:9092"
    client_id: str = "employee-service"
    tls: TLSConfig = field(default_factory=TLSConfig)
    sasl: SASLConfig = field(default_factory=SASLConfig)
    producer: ProducerTuning = field(default_factory=ProducerTuning)
    driver: Literal["confluent", "aiokafka"] = "confluent"

    @property
    def security_protocol(self) -> str:
        use_sasl = bool(self.sasl.mechanism)
        if self.tls.enable:
            return "SASL_SSL" if use_sasl else "SSL"
        return "SASL_PLAINTEXT" if use_sasl else "PLAINTEXT"


@dataclass(slots=True)
class MessagingConfig:
    provider: Literal["kafka", "inmemory"] = "kafka"
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
