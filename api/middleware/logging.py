"""
HTTP 访问日志中间件：请求开始/结束、耗时、可选的请求体（脱敏）
"""
import json
import time
from typing import Any, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from core.logging_config import get_logger
from core.config import settings


logger = get_logger(__name__)

_TRUTHY = {"true", "1", "yes"}
_FALSY = {"false", "0", "no"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    请求日志中间件

    - request_started / request_completed（4xx 为 warning，5xx 为 error）
    - 未处理异常记录 request_failed 后继续抛给全局异常处理器
    - 请求体记录受 LOG_REQUEST_BODY_* 配置与 X-Log-Body 请求头控制
    """

    SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

    # 员工个人信息，日志中以 *** 代替
    MASKED_FIELDS = {"email"}

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.log_body_by_default = settings.LOG_REQUEST_BODY_ENABLE_BY_DEFAULT and settings.DEBUG
        self.max_body_bytes = settings.LOG_REQUEST_BODY_MAX_BYTES

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        fields = await self._describe(request)
        logger.info("request_started", **fields)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "request_failed",
                duration=time.perf_counter() - started,
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=True,
                **fields,
            )
            raise

        duration = time.perf_counter() - started
        status_code = response.status_code
        if status_code >= 500:
            log, event = logger.error, "request_server_error"
        elif status_code >= 400:
            log, event = logger.warning, "request_client_error"
        else:
            log, event = logger.info, "request_completed"
        log(event, status_code=status_code, duration=duration, **fields)

        response.headers["X-Process-Time"] = f"{duration:.3f}"
        return response

    async def _describe(self, request: Request) -> dict:
        fields: dict = {"query_params": dict(request.query_params)}
        user_agent = request.headers.get("User-Agent")
        if user_agent:
            fields["user_agent"] = user_agent
        if request.method in ("POST", "PUT", "PATCH") and self._wants_body(request):
            body = await self._read_body(request)
            if body is not None:
                fields["body"] = body
        return fields

    def _wants_body(self, request: Request) -> bool:
        header = (request.headers.get("X-Log-Body") or "").lower()
        if header in _TRUTHY:
            return True
        if header in _FALSY:
            return False
        return self.log_body_by_default

    async def _read_body(self, request: Request) -> Optional[Any]:
        raw = await request.body()
        if not raw:
            return None
        text = raw[: self.max_body_bytes].decode("utf-8", errors="ignore")
        if "application/json" not in request.headers.get("content-type", "").lower():
            return text
        try:
            return self._mask(json.loads(text))
        except ValueError:
            # 被截断的 JSON，按原文记录
            return text

    def _mask(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: "***" if k.lower() in self.MASKED_FIELDS else self._mask(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._mask(v) for v in data]
        return data
