"""
员工应用服务（application/services）- 编排仓储访问与事件通知
"""
from typing import Callable, List, Optional

from application.dto import EmployeeCreateDTO, EmployeeResponseDTO, EmployeeUpdateDTO
from application.services.employee_event_service import EmployeeEventService
from domain.common.unit_of_work import AbstractUnitOfWork
from domain.employee.entity import Employee


class EmployeeApplicationService:
    """员工应用服务

    每个操作使用独立的 Unit of Work（读操作只读），
    事务结束后才调度事件通知；未命中时不发送任何通知。
    """

    def __init__(
        self,
        uow_factory: Callable[..., AbstractUnitOfWork],
        events: EmployeeEventService,
    ):
        self._uow_factory = uow_factory
        self._events = events

    async def create_employee(self, data: EmployeeCreateDTO) -> EmployeeResponseDTO:
        """创建员工（忽略调用方传入的 id）"""
        employee = Employee(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            department=data.department,
        )
        async with self._uow_factory() as uow:
            saved = await uow.employee_repository.save(employee)

        self._events.publish_create_event(saved)
        return self._to_response_dto(saved)

    async def get_employee(self, employee_id: int) -> Optional[EmployeeResponseDTO]:
        """获取员工；不存在返回 None"""
        async with self._uow_factory(readonly=True) as uow:
            employee = await uow.employee_repository.get_by_id(employee_id)

        if employee is None:
            return None
        self._events.publish_read_event(employee)
        return self._to_response_dto(employee)

    async def list_employees(self) -> List[EmployeeResponseDTO]:
        """获取全部员工（按 id 升序）"""
        async with self._uow_factory(readonly=True) as uow:
            employees = await uow.employee_repository.get_all()

        self._events.publish_read_all_event(employees)
        return [self._to_response_dto(e) for e in employees]

    async def update_employee(
        self, employee_id: int, data: EmployeeUpdateDTO
    ) -> Optional[EmployeeResponseDTO]:
        """整体替换四个字段；不存在返回 None 且不落库"""
        async with self._uow_factory() as uow:
            employee = await uow.employee_repository.get_by_id(employee_id)
            if employee is None:
                return None
            employee.replace_details(
                Employee(
                    first_name=data.first_name,
                    last_name=data.last_name,
                    email=data.email,
                    department=data.department,
                )
            )
            saved = await uow.employee_repository.save(employee)

        self._events.publish_update_event(saved)
        return self._to_response_dto(saved)

    async def delete_employee(self, employee_id: int) -> bool:
        """删除员工；不存在返回 False"""
        async with self._uow_factory() as uow:
            if not await uow.employee_repository.exists_by_id(employee_id):
                return False
            await uow.employee_repository.delete_by_id(employee_id)

        self._events.publish_delete_event(employee_id)
        return True

    def _to_response_dto(self, employee: Employee) -> EmployeeResponseDTO:
        """转换为响应DTO"""
        return EmployeeResponseDTO(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            department=employee.department,
        )
