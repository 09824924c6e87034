"""
API依赖项 - 应用服务装配
"""
from fastapi import Depends, Request

from application.services.employee_event_service import EmployeeEventService
from application.services.employee_service import EmployeeApplicationService
from infrastructure.unit_of_work import SQLAlchemyUnitOfWork


async def get_event_service(request: Request) -> EmployeeEventService:
    """事件通知器在应用启动时创建并挂在 app.state 上"""
    return request.app.state.employee_events


async def get_employee_service(
    events: EmployeeEventService = Depends(get_event_service),
) -> EmployeeApplicationService:
    return EmployeeApplicationService(uow_factory=SQLAlchemyUnitOfWork, events=events)
