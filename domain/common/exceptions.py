"""领域层业务异常定义，供领域与基础设施使用。

核心（core）层仅负责全局映射与异常处理，尽量避免领域层反向依赖核心层。
"""
from __future__ import annotations

from typing import Optional
from shared.codes import BusinessCode


class BusinessException(Exception):
    """业务异常基类"""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "BusinessError",
        details: Optional[dict] = None,
        field: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        self.field = field
        super().__init__(self.message)


class EmployeeNotFoundException(BusinessException):
    def __init__(self, employee_id: Optional[int] = None):
        details = {"employee_id": employee_id} if employee_id is not None else None
        super().__init__(
            code=BusinessCode.EMPLOYEE_NOT_FOUND,
            message=f"Employee not found with id: {employee_id}",
            error_type="EmployeeNotFound",
            details=details,
        )
