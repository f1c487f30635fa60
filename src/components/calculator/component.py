"""
Calculator component - basic arithmetic.

Eight independent operations over one or two operands. Arithmetic is
IEEE-754 double precision; results that overflow or are undefined are
reported as inf/nan rather than raised.

Invariants:
- I1: Every operand is validated before any arithmetic runs
- I2: Bools, strings, nulls and non-finite values are never operands
- I3: divide rejects b == 0, sqrt rejects number < 0, percentage rejects total == 0
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

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

BINARY_OPERANDS_MESSAGE = "Both a and b must be numbers"
SQRT_OPERAND_MESSAGE = "Number must be provided"
PERCENTAGE_OPERANDS_MESSAGE = "Both value and total must be numbers"


# --- Validation ---


def is_finite_number(value: Any) -> bool:
    """True for int/float values (not bool) that convert to a finite float."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _require_numbers(message: str, *values: Any) -> tuple[float, ...]:
    """Validate every operand first, then convert; raises InvalidInput."""
    if not all(is_finite_number(v) for v in values):
        raise InvalidInput(message)
    return tuple(float(v) for v in values)


def _binary(operation: str, inp: BinaryInput, result: float) -> CalculationOutput:
    return CalculationOutput(
        operation=operation,
        operands={"a": inp.a, "b": inp.b},
        result=result,
    )


# --- Arithmetic Helpers ---


def _is_odd_integer(x: float) -> bool:
    x = float(x)
    return x.is_integer() and math.fmod(x, 2.0) != 0.0


def safe_pow(a: float, b: float) -> float:
    """
    a ** b with IEEE semantics.

    Negative base with a fractional exponent gives nan, overflow gives a
    signed inf, and zero to a negative power gives a signed inf.
    """
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0 and b < 0:
            if math.copysign(1.0, a) < 0 and _is_odd_integer(b):
                return -math.inf
            return math.inf
        return math.nan


def format_percentage(result: float) -> str:
    """
    Two decimal places plus a percent sign ("25.00%").

    Rounds the exact binary value half away from zero.
    """
    if math.isnan(result):
        return "NaN%"
    if math.isinf(result):
        return "Infinity%" if result > 0 else "-Infinity%"
    if result == 0:
        result = 0.0

    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(result).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"


# --- Component Entry Points ---


def run_add(inp: BinaryInput) -> CalculationOutput:
    """a + b."""
    a, b = _require_numbers(BINARY_OPERANDS_MESSAGE, inp.a, inp.b)
    return _binary("addition", inp, a + b)


def run_subtract(inp: BinaryInput) -> CalculationOutput:
    """a - b."""
    a, b = _require_numbers(BINARY_OPERANDS_MESSAGE, inp.a, inp.b)
    return _binary("subtraction", inp, a - b)


def run_multiply(inp: BinaryInput) -> CalculationOutput:
    """a * b."""
    a, b = _require_numbers(BINARY_OPERANDS_MESSAGE, inp.a, inp.b)
    return _binary("multiplication", inp, a * b)


def run_divide(inp: BinaryInput) -> CalculationOutput:
    """
    a / b.

    Raises:
        InvalidInput: If a or b is not a number
        DivisionByZero: If b is zero
    """
    a, b = _require_numbers(BINARY_OPERANDS_MESSAGE, inp.a, inp.b)
    if b == 0:
        raise DivisionByZero()
    return _binary("division", inp, a / b)


def run_power(inp: BinaryInput) -> CalculationOutput:
    """a raised to the power b."""
    a, b = _require_numbers(BINARY_OPERANDS_MESSAGE, inp.a, inp.b)
    return _binary("power", inp, safe_pow(a, b))


def run_sqrt(inp: SqrtInput) -> CalculationOutput:
    """
    Square root.

    Raises:
        InvalidInput: If number is not a number
        NegativeInput: If number is negative
    """
    (number,) = _require_numbers(SQRT_OPERAND_MESSAGE, inp.number)
    if number < 0:
        raise NegativeInput()
    return CalculationOutput(
        operation="square root",
        operands={"number": inp.number},
        result=math.sqrt(number),
    )


def run_percentage(inp: PercentageInput) -> CalculationOutput:
    """
    What percentage value is of total: (value / total) * 100.

    Raises:
        InvalidInput: If value or total is not a number
        ZeroTotal: If total is zero
    """
    value, total = _require_numbers(PERCENTAGE_OPERANDS_MESSAGE, inp.value, inp.total)
    if total == 0:
        raise ZeroTotal()

    result = (value / total) * 100
    return CalculationOutput(
        operation="percentage",
        operands={"value": inp.value, "total": inp.total},
        result=result,
        extras={"formatted": format_percentage(result)},
    )
