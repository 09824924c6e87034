"""
员工仓储接口 - 定义数据访问的抽象接口
"""
from abc import ABC, abstractmethod
from typing import Optional, List
from .entity import Employee


class EmployeeRepository(ABC):
    """员工仓储抽象接口 - 只定义能做什么，不管怎么做"""

    @abstractmethod
    async def save(self, employee: Employee) -> Employee:
        """保存员工（id 为空时新增，否则更新）"""
        pass

    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """根据ID获取员工"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Employee]:
        """获取全部员工（按存储顺序）"""
        pass

    @abstractmethod
    async def exists_by_id(self, employee_id: int) -> bool:
        """检查员工是否存在"""
        pass

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> None:
        """根据ID删除员工"""
        pass
