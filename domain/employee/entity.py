"""
员工领域实体
"""
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class Employee:
    """员工实体 - 仅承载数据，id 由存储层分配"""

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    department: str = ""

    def replace_details(self, details: "Employee") -> None:
        """业务规则：整体替换四个标量字段，保留身份（id）"""
        self.first_name = details.first_name
        self.last_name = details.last_name
        self.email = details.email
        self.department = details.department

    def to_dict(self) -> dict:
        return asdict(self)
