"""Pytest bootstrap configuration.

Environment variables must be set before any module that reads application
settings is imported.
"""
import os

os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("KAFKA__PROVIDER", "inmemory")
os.environ.setdefault("DEBUG", "false")

import functools

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker

from application.services.employee_event_service import EmployeeEventService
from application.services.employee_service import EmployeeApplicationService
from infrastructure.database import create_engine_from_url, create_tables
from infrastructure.unit_of_work import SQLAlchemyUnitOfWork
from tests.fakes import RecordingPort


TEST_TOPIC = "employee-events"


@pytest.fixture
async def engine():
    eng = create_engine_from_url("sqlite+aiosqlite:///:memory:")
    await create_tables(bind=eng)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def uow_factory(session_factory):
    return functools.partial(SQLAlchemyUnitOfWork, session_factory)


@pytest.fixture
def port() -> RecordingPort:
    return RecordingPort()


@pytest.fixture
def events(port) -> EmployeeEventService:
    return EmployeeEventService(port, topic=TEST_TOPIC)


@pytest.fixture
def service(uow_factory, events) -> EmployeeApplicationService:
    return EmployeeApplicationService(uow_factory=uow_factory, events=events)
