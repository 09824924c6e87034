"""confluent-kafka (librdkafka) publisher.

`publish()` is synchronous: it enqueues the record, then polls until that
record's delivery report arrives. Callers on an event loop run it through
`asyncio.to_thread`.
"""
from __future__ import annotations

import time
from typing import List, Optional

from ...base import Envelope, PublishMiddleware, PublishResult, Publisher, Serializer
from ...config import KafkaConfig
from ...exceptions import PublishError


# seconds; close() gives queued records this long to drain
CLOSE_FLUSH_TIMEOUT_S = 5.0


def build_producer_conf(cfg: KafkaConfig) -> dict:
    """librdkafka configuration for a KafkaConfig."""
    tuning = cfg.producer
    conf: dict = {
        "bootstrap.servers": cfg.bootstrap_servers,
        "client.id": cfg.client_id,
        "security.protocol": cfg.security_protocol,
        "acks": tuning.acks,
        "enable.idempotence": tuning.enable_idempotence,
        "compression.type": tuning.compression_type,
        "linger.ms": tuning.linger_ms,
        "max.in.flight.requests.per.connection": tuning.max_in_flight,
        "message.timeout.ms": tuning.message_timeout_ms,
        "message.send.max.retries": 10,
    }
    if cfg.tls.enable:
        conf["ssl.ca.location"] = cfg.tls.ca_location
        conf["ssl.certificate.location"] = cfg.tls.certificate
        conf["ssl.key.location"] = cfg.tls.key
        conf["enable.ssl.certificate.verification"] = cfg.tls.verify
    if cfg.sasl.mechanism:
        conf["sasl.mechanism"] = cfg.sasl.mechanism
        conf["sasl.username"] = cfg.sasl.username
        conf["sasl.password"] = cfg.sasl.password
    return conf


class _DeliveryReport:
    """Collects the on_delivery callback for exactly one produced record."""

    __slots__ = ("error", "result")

    def __init__(self) -> None:
        self.error = None
        self.result: Optional[PublishResult] = None

    @property
    def done(self) -> bool:
        return self.error is not None or self.result is not None

    def __call__(self, err, msg) -> None:
        if err is not None:
            self.error = err
            return
        self.result = PublishResult(
            topic=msg.topic(),
            partition=msg.partition(),
            offset=msg.offset(),
            timestamp=msg.timestamp()[1],
        )


class KafkaPublisher(Publisher):
    def __init__(
        self,
        cfg: KafkaConfig,
        serializer: Serializer,
        middlewares: Optional[List[PublishMiddleware]] = None,
    ) -> None:
        try:
            from confluent_kafka import Producer  # type: ignore
        except ImportError as e:
            raise ImportError(
                "confluent_kafka is required for KafkaPublisher. Install via `pip install confluent-kafka`."
            ) from e

        super().__init__(serializer, middlewares)
        self.cfg = cfg
        self._producer = Producer(build_producer_conf(cfg))

    def publish(self, topic: str, env: Envelope) -> PublishResult:
        env = self._before(topic, env)
        report = _DeliveryReport()
        self._enqueue(topic, env, self._value(env), report)
        result = self._wait_for(report)
        self._after(topic, env, result)
        return result

    def _enqueue(self, topic: str, env: Envelope, value: bytes, report: _DeliveryReport) -> None:
        # Local queue full: serve callbacks to free space, retry until send_wait_s
        deadline = time.monotonic() + self.cfg.producer.send_wait_s
        while True:
            try:
                self._producer.produce(
                    topic=topic,
                    key=env.key,
                    value=value,
                    headers=list(env.headers.items()),
                    on_delivery=report,
                )
                return
            except BufferError:
                self._producer.poll(0.1)
                if time.monotonic() >= deadline:
                    raise PublishError(f"producer queue full for {topic}, gave up after {self.cfg.producer.send_wait_s}s")

    def _wait_for(self, report: _DeliveryReport) -> PublishResult:
        deadline = time.monotonic() + self.cfg.producer.delivery_wait_s
        while not report.done:
            self._producer.poll(0.05)
            if time.monotonic() >= deadline:
                raise PublishError("timed out waiting for delivery report")
        if report.error is not None:
            raise PublishError(str(report.error))
        return report.result  # type: ignore[return-value]

    def close(self) -> None:
        remaining = self._producer.flush(CLOSE_FLUSH_TIMEOUT_S)
        if remaining:
            raise PublishError(f"{remaining} message(s) still queued after flush timeout")
