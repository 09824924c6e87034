"""Employee domain exports."""
from .entity import Employee
from .events import EmployeeEvent, OperationType
from .repository import EmployeeRepository

__all__ = ["Employee", "EmployeeEvent", "OperationType", "EmployeeRepository"]
