"""
Calculator component - basic arithmetic.
"""

from .component import (
    BINARY_OPERANDS_MESSAGE,
    PERCENTAGE_OPERANDS_MESSAGE,
    SQRT_OPERAND_MESSAGE,
    format_percentage,
    is_finite_number,
    run_add,
    run_divide,
    run_multiply,
    run_percentage,
    run_power,
    run_sqrt,
    run_subtract,
    safe_pow,
)
from .models import (
    BinaryInput,
    CalculationOutput,
    DivisionByZero,
    InvalidInput,
    NegativeInput,
    PercentageInput,
    SqrtInput,
    ZeroTotal,
)

__all__ = [
    # Entry points
    "run_add",
    "run_subtract",
    "run_multiply",
    "run_divide",
    "run_power",
    "run_sqrt",
    "run_percentage",
    # Input models
    "BinaryInput",
    "SqrtInput",
    "PercentageInput",
    # Output models
    "CalculationOutput",
    # Errors
    "InvalidInput",
    "DivisionByZero",
    "NegativeInput",
    "ZeroTotal",
    # Helpers
    "format_percentage",
    "is_finite_number",
    "safe_pow",
    # Messages
    "BINARY_OPERANDS_MESSAGE",
    "SQRT_OPERAND_MESSAGE",
    "PERCENTAGE_OPERANDS_MESSAGE",
]
