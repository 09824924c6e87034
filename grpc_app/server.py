from __future__ import annotations

from pathlib import Path
from typing import Optional

import grpc
from grpc_health.v1 import health, health_pb2, health_pb2_grpc

from core.config import GrpcTlsSettings, settings
from core.logging_config import get_logger
from application.services.employee_service import EmployeeApplicationService
from grpc_app.interceptors.request_id import RequestIdInterceptor
from grpc_app.interceptors.logging import LoggingInterceptor
from grpc_app.interceptors.exceptions import ExceptionMappingInterceptor
from grpc_app.generated.employees.v1 import employee_pb2_grpc
from grpc_app.services.employee_service import EmployeeGrpcService


logger = get_logger(__name__)

SERVICE_NAME = "employees.v1.EmployeeGrpcService"


def server_credentials(tls: GrpcTlsSettings) -> grpc.ServerCredentials:
    """TLS credentials; a configured CA turns on mutual TLS."""
    if not (tls.cert and tls.key):
        raise RuntimeError("GRPC TLS enabled but cert/key not provided")
    root_certificates = Path(tls.ca).read_bytes() if tls.ca else None
    return grpc.ssl_server_credentials(
        [(Path(tls.key).read_bytes(), Path(tls.cert).read_bytes())],
        root_certificates=root_certificates,
        require_client_auth=root_certificates is not None,
    )


async def create_server(
    service: EmployeeApplicationService,
    address: Optional[str] = None,
) -> tuple[grpc.aio.Server, int]:
    """Build (not start) the server; returns it with the bound port, which matters for port 0."""
    server = grpc.aio.server(
        # outermost first
        interceptors=(
            RequestIdInterceptor(),
            LoggingInterceptor(),
            ExceptionMappingInterceptor(),
        ),
        options=[("grpc.max_concurrent_streams", max(1, settings.grpc.max_concurrent_streams))],
    )

    employee_pb2_grpc.add_EmployeeGrpcServiceServicer_to_server(EmployeeGrpcService(service), server)

    health_svc = health.aio.HealthServicer()
    health_pb2_grpc.add_HealthServicer_to_server(health_svc, server)
    for name in ("", SERVICE_NAME):
        await health_svc.set(name, health_pb2.HealthCheckResponse.SERVING)

    address = address or f"{settings.grpc.host}:{settings.grpc.port}"
    if settings.grpc.tls.enabled:
        port = server.add_secure_port(address, server_credentials(settings.grpc.tls))
    else:
        port = server.add_insecure_port(address)
    logger.info("grpc_server_bound", address=address, port=port, tls=settings.grpc.tls.enabled)
    return server, port
