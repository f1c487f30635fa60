"""
Date-time and timezone API.

Routes:
- GET  /datetime/now
- GET  /datetime/timezone/{timezone}
- GET  /timezones
- POST /datetime/convert

Timezone identifiers contain slashes ("America/New_York"), so the path
parameter accepts them both raw and percent-encoded.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from src.api.deps import get_clock, get_tz_database
from src.api.envelope import success
from src.api.schemas import (
    ConvertRequest,
    ConvertResponse,
    ErrorResponse,
    NowResponse,
    TimezoneListResponse,
    ZonedNowResponse,
)
from src.components.clock import (
    ClockPort,
    ConvertInput,
    TimezoneDatabasePort,
    ZonedNowInput,
    run_convert,
    run_list_timezones,
    run_now,
    run_now_in_timezone,
)

router = APIRouter()


def _as_text(value: Any) -> str | None:
    """Only strings are usable conversion fields."""
    return value if isinstance(value, str) else None


@router.get(
    "/datetime/now",
    summary="Get current datetime",
    description="Returns the current date and time in ISO format",
    responses={200: {"model": NowResponse}},
)
def get_now(clock: ClockPort = Depends(get_clock)) -> JSONResponse:
    return success(run_now(clock=clock))


@router.get(
    "/datetime/timezone/{timezone:path}",
    summary="Get current datetime in specific timezone",
    description=(
        "Returns the current date and time in the specified timezone "
        "(e.g. America/New_York, Europe/London, Asia/Tokyo)"
    ),
    responses={
        200: {"model": ZonedNowResponse},
        400: {"model": ErrorResponse, "description": "Invalid timezone"},
    },
)
def get_now_in_timezone(
    timezone: str,
    clock: ClockPort = Depends(get_clock),
    tz_db: TimezoneDatabasePort = Depends(get_tz_database),
) -> JSONResponse:
    return success(run_now_in_timezone(ZonedNowInput(timezone=timezone), clock=clock, tz_db=tz_db))


@router.get(
    "/timezones",
    summary="Get list of all available timezones",
    description="Returns a list of all valid timezone names",
    responses={200: {"model": TimezoneListResponse}},
)
def list_timezones(tz_db: TimezoneDatabasePort = Depends(get_tz_database)) -> JSONResponse:
    return success(run_list_timezones(tz_db=tz_db))


@router.post(
    "/datetime/convert",
    summary="Convert datetime between timezones",
    description=(
        "Convert a datetime from one timezone to another. The datetime is read as "
        "local time in fromTimezone; an unreadable value yields \"Invalid date\"."
    ),
    responses={
        200: {"model": ConvertResponse},
        400: {"model": ErrorResponse, "description": "Missing fields or invalid timezone"},
    },
)
def convert(
    body: ConvertRequest | None = Body(default=None),
    tz_db: TimezoneDatabasePort = Depends(get_tz_database),
) -> JSONResponse:
    body = body or ConvertRequest()
    inp = ConvertInput(
        datetime=_as_text(body.datetime),
        from_timezone=_as_text(body.from_timezone),
        to_timezone=_as_text(body.to_timezone),
    )
    return success(run_convert(inp, tz_db=tz_db))
