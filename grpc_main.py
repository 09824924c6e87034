import asyncio

from application.services.employee_event_service import EmployeeEventService
from application.services.employee_service import EmployeeApplicationService
from core.config import settings
from core.logging_config import configure_logging, get_logger
from grpc_app.server import create_server
from infrastructure.adapters.messaging_port import PublisherPortAdapter
from infrastructure.database import create_tables
from infrastructure.external.messaging.client import init_publisher
from infrastructure.unit_of_work import SQLAlchemyUnitOfWork


configure_logging()
logger = get_logger(__name__)


def build_event_service() -> EmployeeEventService:
    if not settings.events.enabled:
        logger.info("employee_events_disabled", topic=settings.events.topic)
        return EmployeeEventService(None, topic=settings.events.topic, enabled=False)
    return EmployeeEventService(
        PublisherPortAdapter(init_publisher(settings.kafka)),
        topic=settings.events.topic,
    )


async def main() -> None:
    if not settings.grpc.enabled:
        logger.warning("grpc_disabled", message="gRPC disabled by config (GRPC__ENABLED=false)")
        return

    await create_tables()
    events = build_event_service()
    service = EmployeeApplicationService(uow_factory=SQLAlchemyUnitOfWork, events=events)

    server, port = await create_server(service)
    address = f"{settings.grpc.host}:{port}"
    logger.info("grpc_starting", address=address)
    await server.start()
    logger.info("grpc_started", address=address)
    try:
        await server.wait_for_termination()
    finally:
        logger.info("grpc_stopping")
        await server.stop(grace=5)
        await events.aclose()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
