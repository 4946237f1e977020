"""
Operation service for loading and executing calculator operations.
"""

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Any, Dict, List, Optional

from ..calculator import Calculator
from ..exceptions import UnknownOperationError
from ..models.schemas import Calculation
from ..operations.base import Operation
from ..utils.logging import get_logger

logger = get_logger(__name__)


class OperationService:
    """Service for loading and executing operations."""

    def __init__(self, calculator: Optional[Calculator] = None, package: str = "calculator.operations"):
        self.calculator = calculator if calculator is not None else Calculator()
        self.package = package
        self.operations: Dict[str, Operation] = {}
        self._loaded = False

    def load_operations(self) -> Dict[str, Operation]:
        """Load all operation plugins from the operations package."""
        if self._loaded:
            return self.operations

        logger.info("Loading operations", package=self.package)

        package = importlib.import_module(self.package)
        module_names = [
            info.name for info in pkgutil.iter_modules(package.__path__)
            if info.name != "base" and not info.name.startswith("_")
        ]

        for operation_name in sorted(module_names):
            try:
                operation_instance = self._load_operation_module(operation_name)
            except Exception as e:
                logger.error("Failed to load operation", operation=operation_name, error=str(e))
                continue

            if operation_instance:
                self.operations[operation_name] = operation_instance
                logger.info("Loaded operation", operation=operation_name)

        self._loaded = True
        logger.info("Loaded operations", count=len(self.operations), operations=list(self.operations.keys()))
        return self.operations

    def _load_operation_module(self, operation_name: str) -> Optional[Operation]:
        """Import a single operation module and instantiate its Operation class."""
        module = importlib.import_module(f"{self.package}.{operation_name}")

        operation_class = _find_operation_class(module)
        if not operation_class:
            logger.error("No Operation class found", module=module.__name__)
            return None

        operation_instance = operation_class()

        # Verify the operation name matches the module name
        if operation_instance.name != operation_name:
            logger.warning(
                "Operation name mismatch",
                module=operation_name,
                name=operation_instance.name
            )

        return operation_instance

    def get_operation(self, name: str) -> Operation:
        """
        Get operation by name.

        Raises:
            UnknownOperationError: If operation not found
        """
        if not self._loaded:
            self.load_operations()

        if name not in self.operations:
            raise UnknownOperationError(
                f"Operation '{name}' not found. Available: {list(self.operations.keys())}"
            )

        return self.operations[name]

    def get_operation_names(self) -> List[str]:
        if not self._loaded:
            self.load_operations()
        return list(self.operations.keys())

    def get_operations_metadata(self) -> List[Dict[str, Any]]:
        if not self._loaded:
            self.load_operations()
        return [op.get_metadata() for op in self.operations.values()]

    def reload_operations(self) -> Dict[str, Operation]:
        """Forget the loaded operations and discover them again."""
        self.operations.clear()
        self._loaded = False
        return self.load_operations()

    def execute_operation(self, operation_name: str, a: int, b: int) -> int:
        """
        Execute an operation with given inputs.

        Raises:
            UnknownOperationError: If operation not found
            CalculatorError: If inputs are invalid or the arithmetic fails
        """
        operation = self.get_operation(operation_name)
        try:
            result = operation.execute(a, b, self.calculator)
        except ArithmeticError as e:
            logger.warning("Operation failed", operation=operation_name, a=a, b=b, error=str(e))
            raise

        logger.debug("Executed operation", operation=operation_name, a=a, b=b, result=result)
        return result

    def calculate(self, operation_name: str, a: int, b: int) -> Calculation:
        """Execute an operation and return the full calculation record."""
        result = self.execute_operation(operation_name, a, b)
        return Calculation(operation=operation_name, a=a, b=b, result=result)


def _find_operation_class(module: ModuleType) -> Optional[type]:
    for _, attr in inspect.getmembers(module, inspect.isclass):
        if (issubclass(attr, Operation) and
                attr is not Operation and
                attr.__module__ == module.__name__ and
                not inspect.isabstract(attr)):
            return attr
    return None
