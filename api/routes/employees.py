"""
员工API路由 - FastAPI表现层
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_employee_service
from application.dto import EmployeeCreateDTO, EmployeeResponseDTO, EmployeeUpdateDTO
from application.services.employee_service import EmployeeApplicationService

router = APIRouter(
    prefix="/employees",
    tags=["员工管理"]
)


@router.post(
    "",
    summary="创建员工",
    response_model=EmployeeResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    data: EmployeeCreateDTO,
    service: EmployeeApplicationService = Depends(get_employee_service),
):
    """
    创建员工

    - **first_name / last_name / email / department**: 缺省为空字符串
    - **id**: 忽略，由存储层分配
    """
    return await service.create_employee(data)


@router.get("/{employee_id}", summary="获取员工", response_model=EmployeeResponseDTO)
async def get_employee(
    employee_id: int,
    service: EmployeeApplicationService = Depends(get_employee_service),
):
    """根据ID获取员工，不存在时返回空响应体的 404"""
    employee = await service.get_employee(employee_id)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return employee


@router.get("", summary="员工列表", response_model=List[EmployeeResponseDTO])
async def list_employees(
    service: EmployeeApplicationService = Depends(get_employee_service),
):
    """获取全部员工（按ID升序，不分页）"""
    return await service.list_employees()


@router.put("/{employee_id}", summary="更新员工", response_model=EmployeeResponseDTO)
async def update_employee(
    employee_id: int,
    data: EmployeeUpdateDTO,
    service: EmployeeApplicationService = Depends(get_employee_service),
):
    """整体替换员工的四个字段（body 中的 id 被忽略）"""
    employee = await service.update_employee(employee_id, data)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return employee


@router.delete(
    "/{employee_id}",
    summary="删除员工",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_employee(
    employee_id: int,
    service: EmployeeApplicationService = Depends(get_employee_service),
):
    """删除员工：成功 204，不存在 404，均无响应体"""
    if not await service.delete_employee(employee_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
