"""
统一错误响应结构

员工接口成功时直接返回资源本身（或空响应体），
只有校验失败、业务异常和系统异常才使用这里的错误信封：
{"code": 40000, "message": "...", "error": {"type": ..., "request_id": ..., "timestamp": ...}}
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


class ErrorDetail(BaseModel):
    type: str
    details: Optional[dict] = None
    field: Optional[str] = None
    request_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_serializer("timestamp")
    def serialize_timestamp(self, ts: datetime) -> str:
        """UTC ISO8601，以 Z 结尾"""
        ts = ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts.astimezone(timezone.utc)
        return ts.isoformat().replace("+00:00", "Z")


class ErrorResponse(BaseModel):
    code: int
    message: str
    error: ErrorDetail


def error_response(
    code: int,
    message: str,
    error_type: str = "BusinessError",
    details: Optional[dict] = None,
    field: Optional[str] = None,
    request_id: Optional[str] = None,
) -> ErrorResponse:
    return ErrorResponse(
        code=code,
        message=message,
        error=ErrorDetail(type=error_type, details=details, field=field, request_id=request_id),
    )
