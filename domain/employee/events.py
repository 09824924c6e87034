"""
员工领域事件 - 描述一次 CRUD 操作的通知
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from .entity import Employee


ALL_EMPLOYEES_KEY = "all"


class OperationType(str, enum.Enum):
    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class EmployeeEvent:
    """员工操作事件（瞬态：构造、发布、丢弃）"""

    operation: OperationType
    message: str
    employee: Optional[Employee] = None
    employee_id: Optional[int] = None

    @property
    def routing_key(self) -> str:
        """消息键：有 employee_id 时为其字符串形式，否则为 "all"（列表汇总）"""
        if self.employee_id is None:
            return ALL_EMPLOYEES_KEY
        return str(self.employee_id)

    def to_payload(self) -> dict[str, Any]:
        return {
            "operation": self.operation.value,
            "employee": self.employee.to_dict() if self.employee is not None else None,
            "employee_id": self.employee_id,
            "message": self.message,
        }

    @classmethod
    def created(cls, employee: Employee) -> "EmployeeEvent":
        return cls(
            operation=OperationType.CREATE,
            employee=employee,
            employee_id=employee.id,
            message="Employee created successfully",
        )

    @classmethod
    def retrieved(cls, employee: Employee) -> "EmployeeEvent":
        return cls(
            operation=OperationType.READ,
            employee=employee,
            employee_id=employee.id,
            message="Employee retrieved successfully",
        )

    @classmethod
    def retrieved_all(cls, count: int) -> "EmployeeEvent":
        return cls(
            operation=OperationType.READ,
            message=f"Retrieved {count} employees",
        )

    @classmethod
    def updated(cls, employee: Employee) -> "EmployeeEvent":
        return cls(
            operation=OperationType.UPDATE,
            employee=employee,
            employee_id=employee.id,
            message="Employee updated successfully",
        )

    @classmethod
    def deleted(cls, employee_id: int) -> "EmployeeEvent":
        return cls(
            operation=OperationType.DELETE,
            employee_id=employee_id,
            message="Employee deleted successfully",
        )
