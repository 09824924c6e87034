import json

import pytest
import structlog

from core.config import KafkaSettings
from infrastructure.adapters.messaging_port import PublisherPortAdapter
from infrastructure.external.messaging import Envelope, MessagingConfig, SerializationError
from infrastructure.external.messaging.client import init_publisher
from infrastructure.external.messaging.config_builder import messaging_config_from_settings
from infrastructure.external.messaging.envelope import get_header
from infrastructure.external.messaging.factory import create_publisher
from infrastructure.external.messaging.providers.inmemory.publisher import InMemoryPublisher
from infrastructure.external.messaging.providers.kafka.publisher import build_producer_conf
from infrastructure.external.messaging.serializers import JsonSerializer


def test_inmemory_publisher_records_per_topic():
    pub = InMemoryPublisher(JsonSerializer())
    r1 = pub.publish("employee-events", Envelope(payload={"a": 1}, key=b"1"))
    r2 = pub.publish("employee-events", Envelope(payload={"a": 2}, key=b"all"))

    assert (r1.offset, r2.offset) == (0, 1)
    msgs = pub.messages("employee-events")
    assert [m.key for m in msgs] == [b"1", b"all"]
    assert json.loads(msgs[0].value) == {"a": 1}
    assert pub.messages("other") == []


def test_closed_inmemory_publisher_rejects_publish():
    pub = InMemoryPublisher(JsonSerializer())
    pub.close()
    with pytest.raises(RuntimeError):
        pub.publish("t", Envelope(payload={}))


def test_json_serializer_errors():
    s = JsonSerializer()
    with pytest.raises(SerializationError):
        s.dumps({"bad": object()})
    with pytest.raises(SerializationError):
        s.loads(b"{not json")


async def test_port_adapter_sends_key_payload_and_headers():
    pub = InMemoryPublisher(JsonSerializer())
    adapter = PublisherPortAdapter(pub)

    with structlog.contextvars.bound_contextvars(request_id="req-9"):
        await adapter.send(
            "employee-events",
            "42",
            {"operation": "CREATE", "employee_id": 42},
            headers={"x-event-operation": "CREATE"},
        )

    [msg] = pub.messages("employee-events")
    assert msg.key == b"42"
    assert json.loads(msg.value) == {"operation": "CREATE", "employee_id": 42}
    assert get_header(msg.headers, "x-event-operation") == "CREATE"
    assert get_header(msg.headers, "x-version") == "v1"
    assert get_header(msg.headers, "x-corr-id") == "req-9"

    await adapter.aclose()
    with pytest.raises(RuntimeError):
        await adapter.send("employee-events", "1", {})


def test_config_builder_maps_settings():
    ks = KafkaSettings(
        provider="INMEMORY",
        driver="aiokafka",
        bootstrap_servers="k1:9092,k2:9092",
        tls={"enable": True},
        sasl={"mechanism": "PLAIN", "username": "u", "password": "p"},
        producer={"acks": "1"},
    )
    cfg = messaging_config_from_settings(ks)

    assert cfg.provider == "inmemory"
    assert cfg.kafka.driver == "aiokafka"
    assert cfg.kafka.bootstrap_servers == "k1:9092,k2:9092"
    assert cfg.kafka.security_protocol == "SASL_SSL"
    assert cfg.kafka.producer.acks == "1"


def test_build_producer_conf():
    cfg = messaging_config_from_settings(KafkaSettings(sasl={"mechanism": "SCRAM-SHA-256", "username": "u"}))
    conf = build_producer_conf(cfg.kafka)

    assert conf["bootstrap.servers"] == "localhost:9092"
    assert conf["client.id"] == "employee-service"
    assert conf["security.protocol"] == "SASL_PLAINTEXT"
    assert conf["sasl.mechanism"] == "SCRAM-SHA-256"
    assert "ssl.ca.location" not in conf


def test_factory_rejects_unknown_driver():
    cfg = MessagingConfig(provider="kafka")
    cfg.kafka.driver = "nope"  # type: ignore[assignment]
    with pytest.raises(ValueError):
        create_publisher(cfg, JsonSerializer())


def test_init_publisher_inmemory():
    pub = init_publisher(KafkaSettings(provider="inmemory"))
    assert isinstance(pub, InMemoryPublisher)


def test_init_publisher_falls_back_when_kafka_client_fails(monkeypatch):
    import infrastructure.external.messaging.client as client

    def _boom(*args, **kwargs):
        raise RuntimeError("no broker")

    monkeypatch.setattr(client, "create_publisher", _boom)
    pub = init_publisher(KafkaSettings(provider="kafka"))
    assert isinstance(pub, InMemoryPublisher)


def test_build_aiokafka_kwargs():
    from infrastructure.external.messaging.providers.aiokafka.publisher import build_producer_kwargs

    cfg = messaging_config_from_settings(KafkaSettings(driver="aiokafka", producer={"acks": "1"}))
    kwargs = build_producer_kwargs(cfg.kafka)

    assert kwargs["acks"] == 1
    assert kwargs["security_protocol"] == "PLAINTEXT"
    assert "ssl_context" not in kwargs
    assert "sasl_mechanism" not in kwargs
