"""
Shared business codes used across layers (Domain/Core/API/gRPC).

Values are carried in the REST error envelope (`code`) and in the gRPC
`x-biz-code` trailer.
"""
from enum import IntEnum


class BusinessCode(IntEnum):
    """业务状态码定义（单一来源）"""

    # 参数错误 (1xxxx)
    PARAM_ERROR = 10000
    PARAM_VALIDATION_ERROR = 10003

    # 业务错误 (2xxxx)
    EMPLOYEE_NOT_FOUND = 20001
    NOT_FOUND = 20006  # 资源未找到（通用）

    # 系统错误 (4xxxx)
    SYSTEM_ERROR = 40000


__all__ = ["BusinessCode"]
