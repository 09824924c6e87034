"""
配置文件 - 项目配置管理
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field, field_validator
from typing import Optional


class GrpcTlsSettings(BaseModel):
    enabled: bool = False
    cert: Optional[str] = None
    key: Optional[str] = None
    ca: Optional[str] = None


class GrpcSettings(BaseModel):
    enabled: bool = True
    host: str = "0.0.0.0"
    port: int = 50051
    # This maps to GRPC option grpc.max_concurrent_streams
    max_concurrent_streams: int = 100
    tls: GrpcTlsSettings = Field(default_factory=GrpcTlsSettings)


class KafkaTlsSettings(BaseModel):
    enable: bool = False
    ca_location: Optional[str] = None
    certificate: Optional[str] = None
    key: Optional[str] = None
    verify: bool = True


class KafkaSaslSettings(BaseModel):
    mechanism: Optional[str] = None  # PLAIN / SCRAM-SHA-256 / SCRAM-SHA-512
    username: Optional[str] = None
    password: Optional[str] = None


class KafkaProducerSettings(BaseModel):
    acks: str = "all"
    enable_idempotence: bool = True
    compression_type: str = "zstd"
    linger_ms: int = 5
    max_in_flight: int = 5
    message_timeout_ms: int = 120_000
    # 本地等待（秒）：队列满时的重试窗口、单条消息的投递回执
    send_wait_s: float = 5.0
    delivery_wait_s: float = 30.0


class KafkaSettings(BaseModel):
    # kafka: 真实 broker；inmemory: 进程内记录（本地开发/测试）
    provider: str = "kafka"
    # confluent (librdkafka) 或 aiokafka
    driver: str = "confluent"
    bootstrap_servers: str = "localhost:9092"
    client_id: str = "employee-service"
    tls: KafkaTlsSettings = Field(default_factory=KafkaTlsSettings)
    sasl: KafkaSaslSettings = Field(default_factory=KafkaSaslSettings)
    producer: KafkaProducerSettings = Field(default_factory=KafkaProducerSettings)


class EventsSettings(BaseModel):
    # 关闭后通知只记录 debug 日志，不发送
    enabled: bool = True
    topic: str = "employee-events"


class DatabaseSettings(BaseModel):
    url: str = "sqlite+aiosqlite:///./employees.db"


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    PROJECT_NAME: str = "Employee Records Service"
    VERSION: str = "1.0.0"
    DEBUG: bool = True
    ENVIRONMENT: str = "development"
    API_PREFIX: str = "/api"

    # 分组配置：Kafka/Database/Events/gRPC 采用嵌套模型
    kafka: KafkaSettings = Field(default_factory=KafkaSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    events: EventsSettings = Field(default_factory=EventsSettings)
    grpc: GrpcSettings = Field(default_factory=GrpcSettings)

    # CORS配置
    CORS_ORIGINS: list = Field(default=["http://localhost:3000", "http://localhost:8000"])

    # 日志/请求体记录配置
    # 日志级别（为空时 DEBUG 模式下为 DEBUG，否则 INFO）
    LOG_LEVEL: Optional[str] = None
    LOG_REQUEST_BODY_ENABLE_BY_DEFAULT: bool = True
    LOG_REQUEST_BODY_MAX_BYTES: int = 2048

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        """允许 JSON 字符串或逗号分隔字符串两种格式。"""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                import json
                try:
                    arr = json.loads(s)
                    if isinstance(arr, list):
                        return arr
                except ValueError:
                    pass
            if "," in s:
                return [item.strip() for item in s.split(",") if item.strip()]
            return [s]
        return v


settings = Settings()
