"""
Calculator API.

POST routes, one per operation. Bodies are JSON objects; operands must be
JSON numbers (never strings or booleans) or the request is rejected before
any arithmetic runs.
"""

from __future__ import annotations

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from src.api.envelope import success
from src.api.schemas import (
    BinaryOperandsRequest,
    BinaryResultResponse,
    ErrorResponse,
    PercentageRequest,
    PercentageResultResponse,
    SqrtRequest,
    SqrtResultResponse,
)
from src.components.calculator import (
    BinaryInput,
    PercentageInput,
    SqrtInput,
    run_add,
    run_divide,
    run_multiply,
    run_percentage,
    run_power,
    run_sqrt,
    run_subtract,
)

router = APIRouter()

NUMBERS_ERROR = {"model": ErrorResponse, "description": "Both a and b must be numbers"}


def _binary_input(body: BinaryOperandsRequest | None) -> BinaryInput:
    body = body or BinaryOperandsRequest()
    return BinaryInput(a=body.a, b=body.b)


@router.post(
    "/add",
    summary="Add two numbers",
    description="Returns the sum of two numbers",
    responses={200: {"model": BinaryResultResponse}, 400: NUMBERS_ERROR},
)
def add(body: BinaryOperandsRequest | None = Body(default=None)) -> JSONResponse:
    return success(run_add(_binary_input(body)).to_dict())


@router.post(
    "/subtract",
    summary="Subtract two numbers",
    description="Returns the difference of two numbers (a - b)",
    responses={200: {"model": BinaryResultResponse}, 400: NUMBERS_ERROR},
)
def subtract(body: BinaryOperandsRequest | None = Body(default=None)) -> JSONResponse:
    return success(run_subtract(_binary_input(body)).to_dict())


@router.post(
    "/multiply",
    summary="Multiply two numbers",
    description="Returns the product of two numbers",
    responses={200: {"model": BinaryResultResponse}, 400: NUMBERS_ERROR},
)
def multiply(body: BinaryOperandsRequest | None = Body(default=None)) -> JSONResponse:
    return success(run_multiply(_binary_input(body)).to_dict())


@router.post(
    "/divide",
    summary="Divide two numbers",
    description="Returns the quotient of two numbers (a / b)",
    responses={
        200: {"model": BinaryResultResponse},
        400: {"model": ErrorResponse, "description": "Non-numeric operands or division by zero"},
    },
)
def divide(body: BinaryOperandsRequest | None = Body(default=None)) -> JSONResponse:
    return success(run_divide(_binary_input(body)).to_dict())


@router.post(
    "/power",
    summary="Calculate power",
    description="Returns a raised to the power of b (a^b)",
    responses={200: {"model": BinaryResultResponse}, 400: NUMBERS_ERROR},
)
def power(body: BinaryOperandsRequest | None = Body(default=None)) -> JSONResponse:
    return success(run_power(_binary_input(body)).to_dict())


@router.post(
    "/sqrt",
    summary="Calculate square root",
    description="Returns the square root of a number",
    responses={
        200: {"model": SqrtResultResponse},
        400: {"model": ErrorResponse, "description": "Missing or negative number"},
    },
)
def sqrt(body: SqrtRequest | None = Body(default=None)) -> JSONResponse:
    body = body or SqrtRequest()
    return success(run_sqrt(SqrtInput(number=body.number)).to_dict())


@router.post(
    "/percentage",
    summary="Calculate percentage",
    description="Calculate what percentage 'value' is of 'total'",
    responses={
        200: {"model": PercentageResultResponse},
        400: {"model": ErrorResponse, "description": "Non-numeric operands or zero total"},
    },
)
def percentage(body: PercentageRequest | None = Body(default=None)) -> JSONResponse:
    body = body or PercentageRequest()
    inp = PercentageInput(value=body.value, total=body.total)
    return success(run_percentage(inp).to_dict())
