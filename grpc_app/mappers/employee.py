from __future__ import annotations

from application.dto import EmployeeDetailsDTO, EmployeeResponseDTO
from grpc_app.generated.employees.v1 import employee_pb2


def employee_dto_to_proto(dto: EmployeeResponseDTO) -> employee_pb2.EmployeeMessage:
    return employee_pb2.EmployeeMessage(
        id=int(dto.id or 0),  # unassigned id travels as 0
        first_name=dto.first_name or "",
        last_name=dto.last_name or "",
        email=dto.email or "",
        department=dto.department or "",
    )


def details_from_request(request) -> EmployeeDetailsDTO:
    """Build the body DTO from a Create/UpdateEmployeeRequest (proto3 strings default to "")."""
    return EmployeeDetailsDTO(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        department=request.department,
    )
