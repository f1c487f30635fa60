"""
Calculator component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.errors import ApiInputError

# --- Error Types ---


class InvalidInput(ApiInputError):
    """An operand is missing or is not a finite number."""

    code = "invalid_input"


class DivisionByZero(ApiInputError):
    """Divisor is zero."""

    code = "division_by_zero"

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")


class NegativeInput(ApiInputError):
    """Square root of a negative number."""

    code = "negative_input"

    def __init__(self) -> None:
        super().__init__("Cannot calculate square root of negative number")


class ZeroTotal(ApiInputError):
    """Percentage of a zero total."""

    code = "zero_total"

    def __init__(self) -> None:
        super().__init__("Total cannot be zero")


# --- Input Models ---
# Operands arrive exactly as decoded from the request body and are
# validated by the entry points before any arithmetic.


@dataclass(frozen=True)
class BinaryInput:
    """Input for add, subtract, multiply, divide and power."""

    a: Any = None
    b: Any = None


@dataclass(frozen=True)
class SqrtInput:
    """Input for square root."""

    number: Any = None


@dataclass(frozen=True)
class PercentageInput:
    """Input for percentage: what percent value is of total."""

    value: Any = None
    total: Any = None


# --- Output Models ---


@dataclass(frozen=True)
class CalculationOutput:
    """Result of one operation, echoing its operands in request order."""

    operation: str
    operands: dict[str, int | float]
    result: float
    extras: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the response body shape."""
        return {
            "operation": self.operation,
            **self.operands,
            "result": self.result,
            **self.extras,
        }
