"""
数据传输对象（DTO）- 应用层与表现层之间的数据传输
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DTOBase(BaseModel):
    """DTO 基类：允许从 ORM/领域对象读取属性"""

    model_config = ConfigDict(from_attributes=True)


class EmployeeDetailsDTO(DTOBase):
    """员工创建/更新请求体

    - id 可选，始终被忽略（由存储层分配，路径参数决定更新目标）
    - 缺省的标量字段为空字符串，不做额外校验
    """
    id: Optional[int] = Field(None, description="忽略，由服务端分配")
    first_name: str = Field("", description="名")
    last_name: str = Field("", description="姓")
    email: str = Field("", description="邮箱（不校验、不唯一）")
    department: str = Field("", description="部门")


# 创建与更新共用同一结构
EmployeeCreateDTO = EmployeeDetailsDTO
EmployeeUpdateDTO = EmployeeDetailsDTO


class EmployeeResponseDTO(DTOBase):
    """员工响应DTO"""
    id: int
    first_name: str
    last_name: str
    email: str
    department: str
