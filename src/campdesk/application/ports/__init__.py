"""Application ports - interfaces for external adapters."""

from campdesk.application.ports.permission_checker import PermissionChecker
from campdesk.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
