"""Unit of Work 抽象：一次员工操作对应一个事务边界"""
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.employee.repository import EmployeeRepository


class AbstractUnitOfWork(ABC):
    """
    async with 块正常结束时自动提交，抛出异常时回滚；
    只读模式（查询操作）从不提交。
    """

    employee_repository: EmployeeRepository

    def __init__(self, *, readonly: bool = False) -> None:
        self._readonly = readonly
        self._committed = False
        self.employee_repository = None  # type: ignore[assignment]

    @property
    def readonly(self) -> bool:
        return self._readonly

    async def __aenter__(self) -> "AbstractUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc is not None:
            await self.rollback()
        elif not (self._readonly or self._committed):
            await self.commit()

    @abstractmethod
    async def commit(self) -> None: ...

    @abstractmethod
    async def rollback(self) -> None: ...
