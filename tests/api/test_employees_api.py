"""REST adapter tests: httpx AsyncClient against the ASGI app, services wired to a test database."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker

from api.dependencies import get_employee_service
from application.services.employee_service import EmployeeApplicationService
from infrastructure.database import create_engine_from_url
from infrastructure.unit_of_work import SQLAlchemyUnitOfWork
from main import app


JOHN = {"first_name": "John", "last_name": "Doe", "email": "john@x.com", "department": "Eng"}


@pytest.fixture
async def client(service):
    app.dependency_overrides[get_employee_service] = lambda: service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


async def test_create_returns_201_and_publishes(client, events, port):
    resp = await client.post("/api/employees", json=JOHN)
    await events.drain()

    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] >= 1
    assert {k: body[k] for k in JOHN} == JOHN
    assert port.sent[0].payload["operation"] == "CREATE"
    assert port.sent[0].payload["employee_id"] == body["id"]


async def test_create_ignores_id_and_defaults_missing_fields(client):
    resp = await client.post("/api/employees", json={"id": 77, "first_name": "Solo"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] != 77
    assert body["last_name"] == ""
    assert body["email"] == ""


async def test_get_existing_and_missing(client):
    created = (await client.post("/api/employees", json=JOHN)).json()

    ok = await client.get(f"/api/employees/{created['id']}")
    assert ok.status_code == 200
    assert ok.json() == created

    missing = await client.get("/api/employees/999")
    assert missing.status_code == 404
    assert missing.content == b""


async def test_list_employees(client):
    empty = await client.get("/api/employees")
    assert empty.status_code == 200
    assert empty.json() == []

    a = (await client.post("/api/employees", json={**JOHN, "first_name": "A"})).json()
    b = (await client.post("/api/employees", json={**JOHN, "first_name": "B"})).json()
    rows = (await client.get("/api/employees")).json()
    assert [r["id"] for r in rows] == [a["id"], b["id"]]


async def test_update_existing_and_missing(client, events, port):
    created = (await client.post("/api/employees", json=JOHN)).json()

    resp = await client.put(
        f"/api/employees/{created['id']}",
        json={"id": 12345, "first_name": "Jane", "last_name": "Roe", "email": "jane@x.com", "department": "Ops"},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "id": created["id"],
        "first_name": "Jane",
        "last_name": "Roe",
        "email": "jane@x.com",
        "department": "Ops",
    }

    missing = await client.put("/api/employees/999", json=JOHN)
    await events.drain()
    assert missing.status_code == 404
    assert missing.content == b""
    assert [m.payload["operation"] for m in port.sent] == ["CREATE", "UPDATE"]


async def test_delete_existing_and_missing(client, events, port):
    created = (await client.post("/api/employees", json=JOHN)).json()

    resp = await client.delete(f"/api/employees/{created['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    again = await client.delete(f"/api/employees/{created['id']}")
    assert again.status_code == 404
    assert again.content == b""

    missing = await client.delete("/api/employees/999")
    assert missing.status_code == 404

    await events.drain()
    assert [m.payload["operation"] for m in port.sent] == ["CREATE", "DELETE"]
    assert port.sent[-1].key == str(created["id"])


async def test_non_integer_id_is_validation_error(client):
    resp = await client.get("/api/employees/abc")
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == 10003
    assert body["error"]["type"] == "ValidationError"


async def test_request_id_is_echoed(client):
    resp = await client.get("/api/employees", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"


async def test_health():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


async def test_storage_failure_returns_500_envelope(events):
    # No tables were created in this database
    eng = create_engine_from_url("sqlite+aiosqlite:///:memory:")
    factory = async_sessionmaker(bind=eng, expire_on_commit=False)
    broken = EmployeeApplicationService(
        uow_factory=lambda **kw: SQLAlchemyUnitOfWork(factory, **kw),
        events=events,
    )
    app.dependency_overrides[get_employee_service] = lambda: broken
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/api/employees")
    finally:
        app.dependency_overrides.clear()
        await eng.dispose()

    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == 40000
    assert body["message"] == "Internal server error"
    assert body["error"]["type"] == "SystemError"
    assert body["error"]["request_id"]


async def test_ids_beyond_int32_are_absent(client):
    big_id = 2**40
    missing = await client.get(f"/api/employees/{big_id}")
    assert missing.status_code == 404
    assert missing.content == b""

    gone = await client.delete(f"/api/employees/{big_id}")
    assert gone.status_code == 404


async def test_unknown_path_uses_error_envelope(client):
    resp = await client.get("/api/departments")
    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == 20006
    assert body["error"]["type"] == "HTTPError"
    assert body["error"]["request_id"]


async def test_unsupported_method_uses_error_envelope(client):
    resp = await client.patch("/api/employees/1", json=JOHN)
    assert resp.status_code == 405
    assert resp.json()["code"] == 10000
    assert "GET" in resp.headers["allow"]
