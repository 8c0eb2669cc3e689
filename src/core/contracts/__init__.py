"""
Contract Violations Module

Ошибки нарушения контрактов операндов при сравнении.
"""

from .violations import (
    OrderContractViolation,
    UnknownOrderError,
    describe_operand,
)

__all__ = [
    # Exceptions
    "OrderContractViolation",
    "UnknownOrderError",
    # Functions
    "describe_operand",
]
