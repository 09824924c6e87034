"""SQLAlchemy Unit of Work 实现"""
from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from domain.common.unit_of_work import AbstractUnitOfWork
from infrastructure.database import AsyncSessionLocal
from infrastructure.repositories.employee_repository import SQLAlchemyEmployeeRepository


class SQLAlchemyUnitOfWork(AbstractUnitOfWork):
    """一个 AsyncSession 对应一次业务操作

    - 写操作：进入时显式 begin()，正常退出提交，异常回滚
    - 只读操作（readonly=True）：不提交，退出时回滚 autobegin 产生的事务
    - 传入外部 session 时不负责关闭它
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession] = AsyncSessionLocal,
        session: Optional[AsyncSession] = None,
        *,
        readonly: bool = False,
    ) -> None:
        super().__init__(readonly=readonly)
        self._session_factory = session_factory
        self._owns_session = session is None
        self.session: Optional[AsyncSession] = session

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        if self.session is None:
            self.session = self._session_factory()
        self.employee_repository = SQLAlchemyEmployeeRepository(self.session)
        if not self._readonly:
            await self.session.begin()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            session, self.session = self.session, None
            if session is not None:
                if session.in_transaction():
                    await session.rollback()
                if self._owns_session:
                    await session.close()
                else:
                    self.session = session
            self.employee_repository = None  # type: ignore[assignment]

    async def commit(self) -> None:
        if not self._readonly and self.session is not None and self.session.in_transaction():
            await self.session.commit()
        self._committed = True

    async def rollback(self) -> None:
        if self.session is not None and self.session.in_transaction():
            await self.session.rollback()
        self._committed = False
