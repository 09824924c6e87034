"""Infrastructure models package exports."""
from .base import Base, metadata
from .employee import EmployeeModel

__all__ = [
    "Base",
    "metadata",
    "EmployeeModel",
]
