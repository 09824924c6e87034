"""
员工数据库模型 - SQLAlchemy ORM模型
注意：这是基础设施层的实现细节，不是领域模型
"""
from sqlalchemy import BigInteger, Column, Integer, String

from .base import Base


class EmployeeModel(Base):
    """
    员工数据库模型

    这是数据库表的映射，不包含业务逻辑
    """
    __tablename__ = "employees"

    # 主键（由数据库自增分配）；与 proto 的 int64 id 对齐，SQLite 只有 INTEGER 主键才会自增
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True, index=True)

    first_name = Column(String(255), nullable=False, default="", comment="名")
    last_name = Column(String(255), nullable=False, default="", comment="姓")
    email = Column(String(255), nullable=False, default="", comment="邮箱")
    department = Column(String(255), nullable=False, default="", comment="部门")

    def __repr__(self):
        return f"<EmployeeModel(id={self.id}, email='{self.email}', department='{self.department}')>"
