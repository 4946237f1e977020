"""Service modules for calculator functionality."""

from .operation_service import OperationService

__all__ = ["OperationService"]
