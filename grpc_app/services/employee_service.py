from __future__ import annotations

import grpc

from application.services.employee_service import EmployeeApplicationService
from domain.common.exceptions import EmployeeNotFoundException
from grpc_app.generated.employees.v1 import employee_pb2, employee_pb2_grpc
from grpc_app.mappers.employee import details_from_request, employee_dto_to_proto


class EmployeeGrpcService(employee_pb2_grpc.EmployeeGrpcServiceServicer):
    """Thin adapter from gRPC messages to the employee application service.

    Get/Update misses raise EmployeeNotFoundException (mapped to NOT_FOUND by
    ExceptionMappingInterceptor); Delete reports the outcome in-band.
    """

    def __init__(self, svc: EmployeeApplicationService) -> None:
        self._svc = svc

    async def CreateEmployee(self, request: employee_pb2.CreateEmployeeRequest, context: grpc.aio.ServicerContext) -> employee_pb2.EmployeeMessage:  # type: ignore[override]
        employee = await self._svc.create_employee(details_from_request(request))
        return employee_dto_to_proto(employee)

    async def GetEmployee(self, request: employee_pb2.GetEmployeeRequest, context: grpc.aio.ServicerContext) -> employee_pb2.EmployeeMessage:  # type: ignore[override]
        employee = await self._svc.get_employee(int(request.id))
        if employee is None:
            raise EmployeeNotFoundException(int(request.id))
        return employee_dto_to_proto(employee)

    async def GetAllEmployees(self, request: employee_pb2.GetAllEmployeesRequest, context: grpc.aio.ServicerContext) -> employee_pb2.GetAllEmployeesResponse:  # type: ignore[override]
        employees = await self._svc.list_employees()
        return employee_pb2.GetAllEmployeesResponse(
            employees=[employee_dto_to_proto(e) for e in employees],
        )

    async def UpdateEmployee(self, request: employee_pb2.UpdateEmployeeRequest, context: grpc.aio.ServicerContext) -> employee_pb2.EmployeeMessage:  # type: ignore[override]
        employee = await self._svc.update_employee(int(request.id), details_from_request(request))
        if employee is None:
            raise EmployeeNotFoundException(int(request.id))
        return employee_dto_to_proto(employee)

    async def DeleteEmployee(self, request: employee_pb2.DeleteEmployeeRequest, context: grpc.aio.ServicerContext) -> employee_pb2.DeleteEmployeeResponse:  # type: ignore[override]
        employee_id = int(request.id)
        if await self._svc.delete_employee(employee_id):
            return employee_pb2.DeleteEmployeeResponse(
                success=True,
                message="Employee deleted successfully",
            )
        return employee_pb2.DeleteEmployeeResponse(
            success=False,
            message=EmployeeNotFoundException(employee_id).message,
        )
