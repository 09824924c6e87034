from __future__ import annotations

import contextvars

import grpc

from core.logging_config import get_logger
from grpc_app.interceptors.base import UnaryUnaryInterceptor
from grpc_app.interceptors.request_id import REQUEST_ID_META_KEY, get_request_id
from domain.common.exceptions import BusinessException
from shared.codes import BusinessCode


logger = get_logger(__name__)

# Set once the current call has been turned into a gRPC status (read by LoggingInterceptor)
_mapped_error: contextvars.ContextVar[bool] = contextvars.ContextVar("grpc_mapped_error", default=False)

_GRPC_STATUS_BY_CODE = {
    BusinessCode.PARAM_ERROR: grpc.StatusCode.INVALID_ARGUMENT,
    BusinessCode.PARAM_VALIDATION_ERROR: grpc.StatusCode.INVALID_ARGUMENT,
    BusinessCode.EMPLOYEE_NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    BusinessCode.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    BusinessCode.SYSTEM_ERROR: grpc.StatusCode.INTERNAL,
}


def is_mapped_error() -> bool:
    return _mapped_error.get()


def business_code_to_grpc_status(code: int) -> grpc.StatusCode:
    return _GRPC_STATUS_BY_CODE.get(code, grpc.StatusCode.FAILED_PRECONDITION)


async def _abort(
    context: grpc.aio.ServicerContext,
    method: str,
    status: grpc.StatusCode,
    code: int,
    error_type: str,
    message: str,
    *,
    exc_info: bool = False,
) -> None:
    request_id = get_request_id()
    trailing = [("x-biz-code", str(int(code))), ("x-error-type", error_type)]
    if request_id:
        trailing.append((REQUEST_ID_META_KEY, request_id))
    context.set_trailing_metadata(tuple(trailing))
    _mapped_error.set(True)

    log = logger.error if status == grpc.StatusCode.INTERNAL else logger.warning
    log(
        "grpc_mapped_error",
        method=method,
        code=str(int(code)),
        status=status.name,
        message=message,
        request_id=request_id,
        exc_info=exc_info,
    )
    await context.abort(status, message)


class ExceptionMappingInterceptor(UnaryUnaryInterceptor):
    """BusinessException -> mapped status with its message; anything else -> INTERNAL."""

    async def around(self, details, request, context, behavior):
        _mapped_error.set(False)
        try:
            return await behavior(request, context)
        except grpc.aio.AbortError:
            # servicer already aborted with its own status
            raise
        except BusinessException as exc:
            await _abort(
                context,
                details.method,
                business_code_to_grpc_status(exc.code),
                exc.code,
                exc.error_type or "BusinessError",
                exc.message,
            )
        except Exception:
            await _abort(
                context,
                details.method,
                grpc.StatusCode.INTERNAL,
                BusinessCode.SYSTEM_ERROR,
                "SystemError",
                "Internal server error",
                exc_info=True,
            )
