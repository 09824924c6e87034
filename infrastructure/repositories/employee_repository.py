"""
员工仓储实现 - 使用SQLAlchemy实现数据访问
"""
from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func

from domain.employee.entity import Employee
from domain.employee.repository import EmployeeRepository
from infrastructure.models.employee import EmployeeModel


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    """员工仓储的SQLAlchemy实现"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_entity(self, model: EmployeeModel) -> Employee:
        """将数据库模型转换为领域实体"""
        return Employee(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            department=model.department,
        )

    def _to_model(self, entity: Employee) -> EmployeeModel:
        """将领域实体转换为数据库模型"""
        return EmployeeModel(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            department=entity.department,
        )

    async def save(self, employee: Employee) -> Employee:
        """保存员工：无 id 时插入并由数据库分配 id，有 id 时覆盖该行"""
        db_employee = None
        if employee.id is not None:
            db_employee = await self.session.get(EmployeeModel, employee.id)

        if db_employee is None:
            db_employee = self._to_model(employee)
            self.session.add(db_employee)
        else:
            db_employee.first_name = employee.first_name
            db_employee.last_name = employee.last_name
            db_employee.email = employee.email
            db_employee.department = employee.department

        await self.session.flush()  # 获取生成的ID
        await self.session.refresh(db_employee)
        return self._to_entity(db_employee)

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """根据ID获取员工"""
        result = await self.session.execute(
            select(EmployeeModel).where(EmployeeModel.id == employee_id)
        )
        db_employee = result.scalar_one_or_none()
        return self._to_entity(db_employee) if db_employee else None

    async def get_all(self) -> List[Employee]:
        """获取全部员工，按ID升序（插入顺序）"""
        result = await self.session.execute(
            select(EmployeeModel).order_by(EmployeeModel.id.asc())
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def exists_by_id(self, employee_id: int) -> bool:
        """检查员工是否存在"""
        result = await self.session.execute(
            select(func.count()).select_from(EmployeeModel)
            .where(EmployeeModel.id == employee_id)
        )
        return result.scalar() > 0

    async def delete_by_id(self, employee_id: int) -> None:
        """根据ID删除员工"""
        await self.session.execute(
            delete(EmployeeModel).where(EmployeeModel.id == employee_id)
        )
        await self.session.flush()
