from __future__ import annotations

import time

import grpc

from core.logging_config import get_logger
from grpc_app.interceptors.base import UnaryUnaryInterceptor
from grpc_app.interceptors.exceptions import is_mapped_error


logger = get_logger(__name__)


class LoggingInterceptor(UnaryUnaryInterceptor):
    """Start/finish lines per RPC; request_id comes from the bound structlog context."""

    async def around(self, details, request, context, behavior):
        rpc = details.method.rsplit("/", 1)[-1]
        started = time.perf_counter()
        outcome = "OK"
        logger.info("grpc_request", method=details.method, peer=context.peer())
        try:
            return await behavior(request, context)
        except grpc.aio.AbortError:
            outcome = "ABORTED"
            raise
        except Exception as exc:
            outcome = "ERROR"
            # mapped failures were already logged where they were translated
            if not is_mapped_error():
                logger.error("grpc_unhandled_error", method=details.method, error=str(exc), exc_info=True)
            raise
        finally:
            logger.info(
                "grpc_request_done",
                rpc=rpc,
                outcome=outcome,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
