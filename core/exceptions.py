"""
全局异常处理：把框架层错误和未捕获异常统一成错误信封

员工路由对“不存在”直接返回空响应体的 404，不经过这里；
这里处理参数校验失败、框架抛出的 HTTP 错误（未知路径、方法不允许）以及存储层故障。
"""
import traceback
import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status as http_status
from starlette.exceptions import HTTPException as StarletteHTTPException

from .response import error_response
from shared.codes import BusinessCode
from core.logging_config import get_logger


logger = get_logger(__name__)

# 框架 HTTP 错误的状态码反查业务码，未列出的按系统错误处理
_CODE_BY_HTTP_STATUS = {
    http_status.HTTP_404_NOT_FOUND: BusinessCode.NOT_FOUND,
    http_status.HTTP_405_METHOD_NOT_ALLOWED: BusinessCode.PARAM_ERROR,
}


def http_status_to_business_code(status_code: int) -> BusinessCode:
    return _CODE_BY_HTTP_STATUS.get(status_code, BusinessCode.SYSTEM_ERROR)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


def _error_json(
    request: Request,
    status_code: int,
    *,
    code: int,
    message: str,
    error_type: str,
    details: Optional[dict] = None,
    field: Optional[str] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = error_response(
        code=code,
        message=message,
        error_type=error_type,
        details=details,
        field=field,
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


def register_exception_handlers(app: FastAPI):
    """注册全局异常处理器"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """参数校验失败：只在 message 中展示第一条错误，全部错误放在 details"""
        errors = jsonable_encoder(exc.errors())
        first = errors[0] if errors else {}
        return _error_json(
            request,
            http_status.HTTP_422_UNPROCESSABLE_CONTENT,
            code=BusinessCode.PARAM_VALIDATION_ERROR,
            message=f"Validation failed: {first.get('msg', 'unknown')}",
            error_type="ValidationError",
            details={"errors": errors},
            # loc[0] 是来源（path/query/body），不属于字段名
            field=".".join(str(part) for part in first.get("loc", [])[1:]) or None,
        )

    # 注册在 Starlette 基类上，路由层的 404/405 也会进入这里
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_json(
            request,
            exc.status_code,
            code=http_status_to_business_code(exc.status_code),
            message=str(exc.detail),
            error_type="HTTPError",
            details={"status_code": exc.status_code},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """未捕获异常（包括存储层故障）统一返回 500"""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=True,
        )
        # 调试模式下附带异常与堆栈
        details = {"exception": str(exc), "traceback": traceback.format_exc()} if app.debug else None
        return _error_json(
            request,
            http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=BusinessCode.SYSTEM_ERROR,
            message="Internal server error",
            error_type="SystemError",
            details=details,
        )
