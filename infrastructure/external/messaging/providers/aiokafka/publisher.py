"""aiokafka publisher behind the synchronous Publisher contract."""
from __future__ import annotations

import ssl
from typing import Any, Dict, List, Optional

from ...base import Envelope, PublishMiddleware, PublishResult, Publisher, Serializer
from ...config import KafkaConfig
from ...exceptions import PublishError
from ._loop import LoopThread


def _ssl_context(cfg: KafkaConfig) -> Optional[ssl.SSLContext]:
    tls = cfg.tls
    if not tls.enable:
        return None
    ctx = ssl.create_default_context(cafile=tls.ca_location) if tls.verify else ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    if not tls.verify:
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
    if tls.certificate and tls.key:
        ctx.load_cert_chain(certfile=tls.certificate, keyfile=tls.key)
    return ctx


def build_producer_kwargs(cfg: KafkaConfig) -> Dict[str, Any]:
    """AIOKafkaProducer keyword arguments for a KafkaConfig."""
    tuning = cfg.producer
    kwargs: Dict[str, Any] = {
        "bootstrap_servers": cfg.bootstrap_servers,
        "client_id": cfg.client_id,
        "security_protocol": cfg.security_protocol,
        # aiokafka wants "all" or an int
        "acks": tuning.acks if tuning.acks == "all" else int(tuning.acks),
        "enable_idempotence": tuning.enable_idempotence,
        "compression_type": tuning.compression_type,
        "linger_ms": tuning.linger_ms,
        "request_timeout_ms": tuning.message_timeout_ms,
    }
    ctx = _ssl_context(cfg)
    if ctx is not None:
        kwargs["ssl_context"] = ctx
    if cfg.sasl.mechanism:
        kwargs["sasl_mechanism"] = cfg.sasl.mechanism
        kwargs["sasl_plain_username"] = cfg.sasl.username
        kwargs["sasl_plain_password"] = cfg.sasl.password
    return kwargs


class AiokafkaPublisher(Publisher):
    def __init__(
        self,
        cfg: KafkaConfig,
        serializer: Serializer,
        middlewares: Optional[List[PublishMiddleware]] = None,
    ) -> None:
        try:
            from aiokafka import AIOKafkaProducer  # type: ignore
        except ImportError as e:
            raise ImportError(
                "aiokafka is required for AiokafkaPublisher. Install via `pip install aiokafka`."
            ) from e

        super().__init__(serializer, middlewares)
        self.cfg = cfg
        self._runner = LoopThread().start()

        async def _start():
            producer = AIOKafkaProducer(**build_producer_kwargs(cfg))
            await producer.start()
            return producer

        try:
            self._producer = self._runner.run(_start())
        except Exception:
            self._runner.stop()
            raise

    def publish(self, topic: str, env: Envelope) -> PublishResult:
        env = self._before(topic, env)
        send = self._producer.send_and_wait(
            topic,
            value=self._value(env),
            key=env.key,
            headers=list(env.headers.items()),
        )
        try:
            md = self._runner.run(send, timeout=self.cfg.producer.delivery_wait_s)
        except TimeoutError as e:
            raise PublishError("timed out waiting for delivery report") from e
        result = PublishResult(topic=md.topic, partition=md.partition, offset=md.offset, timestamp=md.timestamp)
        self._after(topic, env, result)
        return result

    def close(self) -> None:
        try:
            self._runner.run(self._producer.stop(), timeout=5)
        finally:
            self._runner.stop()
