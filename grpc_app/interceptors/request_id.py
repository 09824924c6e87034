from __future__ import annotations

import uuid
import contextvars

import grpc
import structlog

from grpc_app.interceptors.base import UnaryUnaryInterceptor


REQUEST_ID_META_KEY = "x-request-id"
_request_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("grpc_request_id", default=None)


def get_request_id() -> str | None:
    return _request_id_var.get()


class RequestIdInterceptor(UnaryUnaryInterceptor):
    """Takes x-request-id from metadata (or mints one), echoes it as trailing metadata
    and binds it into the structlog context for logs and event headers."""

    async def around(self, details, request, context, behavior):
        metadata = dict(details.invocation_metadata or ())
        request_id = metadata.get(REQUEST_ID_META_KEY) or str(uuid.uuid4())

        context.set_trailing_metadata(((REQUEST_ID_META_KEY, request_id),))
        token = _request_id_var.set(request_id)
        try:
            with structlog.contextvars.bound_contextvars(request_id=request_id, rpc=details.method):
                return await behavior(request, context)
        finally:
            _request_id_var.reset(token)
