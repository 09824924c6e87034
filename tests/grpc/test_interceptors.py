"""UnaryUnaryInterceptor chaining over sync and async unary handlers."""
import grpc
import pytest

from grpc_app.interceptors.base import UnaryUnaryInterceptor
from grpc_app.interceptors.exceptions import business_code_to_grpc_status
from shared.codes import BusinessCode


class _RecordingInterceptor(UnaryUnaryInterceptor):
    def __init__(self):
        self.methods = []

    async def around(self, details, request, context, behavior):
        self.methods.append(details.method)
        return await behavior(request, context)


class _CallDetails:
    method = "/employees.v1.Test/Ping"
    invocation_metadata = ()


def _sync_ping(request, context):
    return f"{request}-sync"


async def _async_ping(request, context):
    return f"{request}-async"


@pytest.mark.parametrize(
    ("behavior", "expected"),
    [(_sync_ping, "ping-sync"), (_async_ping, "ping-async")],
)
async def test_wraps_sync_and_async_handlers(behavior, expected):
    interceptor = _RecordingInterceptor()

    async def continuation(details):
        return grpc.unary_unary_rpc_method_handler(behavior)

    handler = await interceptor.intercept_service(continuation, _CallDetails())

    assert await handler.unary_unary("ping", None) == expected
    assert interceptor.methods == ["/employees.v1.Test/Ping"]


async def test_streaming_handlers_pass_through():
    stream_handler = grpc.unary_stream_rpc_method_handler(lambda request, context: iter(()))

    async def continuation(details):
        return stream_handler

    handler = await _RecordingInterceptor().intercept_service(continuation, _CallDetails())

    assert handler is stream_handler


@pytest.mark.parametrize(
    ("code", "status"),
    [
        (BusinessCode.EMPLOYEE_NOT_FOUND, grpc.StatusCode.NOT_FOUND),
        (BusinessCode.PARAM_VALIDATION_ERROR, grpc.StatusCode.INVALID_ARGUMENT),
        (BusinessCode.SYSTEM_ERROR, grpc.StatusCode.INTERNAL),
        (29999, grpc.StatusCode.FAILED_PRECONDITION),
    ],
)
def test_business_code_to_grpc_status(code, status):
    assert business_code_to_grpc_status(code) == status
