"""
Response envelopes.

Every endpoint answers with one of two shapes:
- success: the operation's payload, status 200
- failure: {"error": "<message>"}, status 400

Numbers are rendered the way a JSON client expects them: non-finite
floats become null and integral floats inside the exactly representable
integer range are emitted as integers (5.0 -> 5).
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

MAX_SAFE_INTEGER = 2**53 - 1


def to_json_value(value: Any) -> Any:
    """Convert a payload into JSON-ready primitives."""
    if value is None or isinstance(value, bool | str | int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
            return int(value)
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_json_value(dataclasses.asdict(value))
    if isinstance(value, Mapping):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [to_json_value(v) for v in value]
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def success(payload: Any) -> JSONResponse:
    """Wrap a computed result."""
    return JSONResponse(content=to_json_value(payload), status_code=status.HTTP_200_OK)


def failure(message: str) -> JSONResponse:
    """Wrap a caller error."""
    return JSONResponse(content={"error": message}, status_code=status.HTTP_400_BAD_REQUEST)
