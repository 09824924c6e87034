from __future__ import annotations

import abc
import inspect
from typing import Any, Awaitable, Callable

import grpc


UnaryBehavior = Callable[[Any, grpc.aio.ServicerContext], Awaitable[Any]]


class UnaryUnaryInterceptor(grpc.aio.ServerInterceptor, abc.ABC):
    """Wraps unary-unary handlers; other RPC kinds pass through untouched.

    Subclasses implement `around()`, awaiting `behavior(request, context)`
    to continue down the chain. Handlers registered from sync servicers
    are adapted so `behavior` is always awaitable.
    """

    async def intercept_service(
        self,
        continuation: Callable[[grpc.HandlerCallDetails], Awaitable[grpc.RpcMethodHandler]],
        handler_call_details: grpc.HandlerCallDetails,
    ) -> grpc.RpcMethodHandler:
        handler = await continuation(handler_call_details)
        if handler is None or not handler.unary_unary:
            return handler

        inner = handler.unary_unary

        async def behavior(request, context):
            result = inner(request, context)
            if inspect.isawaitable(result):
                result = await result
            return result

        async def _unary_unary(request, context: grpc.aio.ServicerContext):
            return await self.around(handler_call_details, request, context, behavior)

        return grpc.unary_unary_rpc_method_handler(
            _unary_unary,
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )

    @abc.abstractmethod
    async def around(
        self,
        details: grpc.HandlerCallDetails,
        request: Any,
        context: grpc.aio.ServicerContext,
        behavior: UnaryBehavior,
    ) -> Any: ...
