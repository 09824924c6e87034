"""gRPC adapter tests against an in-process grpc.aio server on an ephemeral port."""
from typing import Tuple

import grpc
import pytest
from grpc_health.v1 import health_pb2, health_pb2_grpc

from grpc_app.generated.employees.v1 import employee_pb2, employee_pb2_grpc
from grpc_app.server import SERVICE_NAME, create_server


@pytest.fixture
async def grpc_target(service) -> Tuple[str, object]:
    server, port = await create_server(service, address="127.0.0.1:0")
    await server.start()
    try:
        yield f"127.0.0.1:{port}"
    finally:
        await server.stop(grace=None)


@pytest.fixture
async def stub(grpc_target):
    async with grpc.aio.insecure_channel(grpc_target) as channel:
        yield employee_pb2_grpc.EmployeeGrpcServiceStub(channel)


def _create_req(**overrides):
    data = dict(first_name="John", last_name="Doe", email="john@x.com", department="Eng")
    data.update(overrides)
    return employee_pb2.CreateEmployeeRequest(**data)


async def test_create_then_get(stub, events, port):
    created = await stub.CreateEmployee(_create_req())
    assert created.id >= 1
    assert created.first_name == "John"

    got = await stub.GetEmployee(employee_pb2.GetEmployeeRequest(id=created.id))
    assert got == created

    await events.drain()
    assert [m.payload["operation"] for m in port.sent] == ["CREATE", "READ"]


async def test_get_missing_is_not_found(stub):
    with pytest.raises(grpc.aio.AioRpcError) as ei:
        await stub.GetEmployee(employee_pb2.GetEmployeeRequest(id=999))
    assert ei.value.code() == grpc.StatusCode.NOT_FOUND
    assert ei.value.details() == "Employee not found with id: 999"


async def test_get_all(stub):
    empty = await stub.GetAllEmployees(employee_pb2.GetAllEmployeesRequest())
    assert list(empty.employees) == []

    a = await stub.CreateEmployee(_create_req(first_name="A"))
    b = await stub.CreateEmployee(_create_req(first_name="B"))
    reply = await stub.GetAllEmployees(employee_pb2.GetAllEmployeesRequest())
    assert [e.id for e in reply.employees] == [a.id, b.id]


async def test_update_existing_and_missing(stub):
    created = await stub.CreateEmployee(_create_req())
    updated = await stub.UpdateEmployee(employee_pb2.UpdateEmployeeRequest(
        id=created.id, first_name="Jane", last_name="Roe", email="jane@x.com", department="Ops",
    ))
    assert updated.id == created.id
    assert updated.first_name == "Jane"
    assert updated.department == "Ops"

    with pytest.raises(grpc.aio.AioRpcError) as ei:
        await stub.UpdateEmployee(employee_pb2.UpdateEmployeeRequest(id=999, first_name="X"))
    assert ei.value.code() == grpc.StatusCode.NOT_FOUND
    assert ei.value.details() == "Employee not found with id: 999"


async def test_delete_reports_in_band(stub, events, port):
    created = await stub.CreateEmployee(_create_req())

    ok = await stub.DeleteEmployee(employee_pb2.DeleteEmployeeRequest(id=created.id))
    assert ok.success is True
    assert ok.message == "Employee deleted successfully"

    missing = await stub.DeleteEmployee(employee_pb2.DeleteEmployeeRequest(id=999))
    assert missing.success is False
    assert missing.message == "Employee not found with id: 999"

    await events.drain()
    assert [m.payload["operation"] for m in port.sent] == ["CREATE", "DELETE"]


async def test_request_id_trailing_metadata(stub):
    call = stub.GetAllEmployees(
        employee_pb2.GetAllEmployeesRequest(),
        metadata=(("x-request-id", "rpc-1"),),
    )
    await call
    trailing = await call.trailing_metadata()
    assert trailing.get("x-request-id") == "rpc-1"


@pytest.mark.parametrize("service_name", ["", SERVICE_NAME])
async def test_health_service_reports_serving(grpc_target, service_name):
    async with grpc.aio.insecure_channel(grpc_target) as channel:
        health = health_pb2_grpc.HealthStub(channel)
        reply = await health.Check(health_pb2.HealthCheckRequest(service=service_name))
    assert reply.status == health_pb2.HealthCheckResponse.SERVING


async def test_storage_failure_maps_to_internal(events):
    from sqlalchemy.ext.asyncio import async_sessionmaker

    from application.services.employee_service import EmployeeApplicationService
    from infrastructure.database import create_engine_from_url
    from infrastructure.unit_of_work import SQLAlchemyUnitOfWork

    eng = create_engine_from_url("sqlite+aiosqlite:///:memory:")
    factory = async_sessionmaker(bind=eng, expire_on_commit=False)
    broken = EmployeeApplicationService(
        uow_factory=lambda **kw: SQLAlchemyUnitOfWork(factory, **kw),
        events=events,
    )
    server, port = await create_server(broken, address="127.0.0.1:0")
    await server.start()
    try:
        async with grpc.aio.insecure_channel(f"127.0.0.1:{port}") as channel:
            stub = employee_pb2_grpc.EmployeeGrpcServiceStub(channel)
            with pytest.raises(grpc.aio.AioRpcError) as ei:
                await stub.GetAllEmployees(employee_pb2.GetAllEmployeesRequest())
        assert ei.value.code() == grpc.StatusCode.INTERNAL
        trailing = ei.value.trailing_metadata()
        assert trailing is not None
        assert trailing.get("x-biz-code") == "40000"
        assert trailing.get("x-error-type") == "SystemError"
    finally:
        await server.stop(grace=None)
        await eng.dispose()


async def test_ids_beyond_int32_are_not_found(stub):
    big_id = 2**40
    with pytest.raises(grpc.aio.AioRpcError) as ei:
        await stub.GetEmployee(employee_pb2.GetEmployeeRequest(id=big_id))
    assert ei.value.code() == grpc.StatusCode.NOT_FOUND
    assert ei.value.details() == f"Employee not found with id: {big_id}"

    missing = await stub.DeleteEmployee(employee_pb2.DeleteEmployeeRequest(id=big_id))
    assert missing.success is False
