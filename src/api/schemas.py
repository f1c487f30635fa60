from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Request fields are typed Any on purpose: the components decide what a
# valid operand is and answer with the documented error message, so the
# body must reach them uncoerced.

NUMBER = {"type": "number"}
STRING = {"type": "string"}


# --- Requests ---
class RequestBody(BaseModel):
    """JSON body; anything other than an object carries no fields."""

    @model_validator(mode="before")
    @classmethod
    def non_object_is_empty(cls, data: Any) -> Any:
        return data if isinstance(data, dict) else {}


class ConvertRequest(RequestBody):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "required": ["datetime", "fromTimezone", "toTimezone"],
            "example": {
                "datetime": "2026-01-05 10:00:00",
                "fromTimezone": "America/New_York",
                "toTimezone": "Asia/Tokyo",
            },
        },
    )

    datetime: Any = Field(default=None, json_schema_extra=STRING)
    from_timezone: Any = Field(default=None, alias="fromTimezone", json_schema_extra=STRING)
    to_timezone: Any = Field(default=None, alias="toTimezone", json_schema_extra=STRING)


class BinaryOperandsRequest(RequestBody):
    model_config = ConfigDict(
        json_schema_extra={"required": ["a", "b"], "example": {"a": 10, "b": 5}},
    )

    a: Any = Field(default=None, json_schema_extra=NUMBER)
    b: Any = Field(default=None, json_schema_extra=NUMBER)


class SqrtRequest(RequestBody):
    model_config = ConfigDict(
        json_schema_extra={"required": ["number"], "example": {"number": 16}},
    )

    number: Any = Field(default=None, json_schema_extra=NUMBER)


class PercentageRequest(RequestBody):
    model_config = ConfigDict(
        json_schema_extra={"required": ["value", "total"], "example": {"value": 25, "total": 100}},
    )

    value: Any = Field(default=None, json_schema_extra=NUMBER)
    total: Any = Field(default=None, json_schema_extra=NUMBER)


# --- Responses (documentation only) ---
class ErrorResponse(BaseModel):
    error: str


class NowResponse(BaseModel):
    datetime: str = Field(examples=["2026-01-05T10:30:00.000Z"])
    timestamp: int = Field(examples=[1767609000000])
    formatted: str = Field(examples=["January 5, 2026 10:30:00 AM"])


class ZonedNowResponse(BaseModel):
    timezone: str = Field(examples=["America/New_York"])
    datetime: str = Field(examples=["2026-01-05T05:30:00-05:00"])
    formatted: str = Field(examples=["January 5, 2026 5:30:00 AM EST"])
    offset: str = Field(examples=["-05:00"])


class TimezoneListResponse(BaseModel):
    count: int = Field(examples=[597])
    timezones: list[str] = Field(examples=[["America/New_York", "Europe/London", "Asia/Tokyo"]])


class ZonedViewResponse(BaseModel):
    timezone: str
    datetime: str
    formatted: str


class ConvertResponse(BaseModel):
    original: ZonedViewResponse
    converted: ZonedViewResponse


class BinaryResultResponse(BaseModel):
    operation: str = Field(examples=["addition"])
    a: float
    b: float
    result: float | None = Field(examples=[15])


class SqrtResultResponse(BaseModel):
    operation: str = Field(examples=["square root"])
    number: float
    result: float = Field(examples=[4])


class PercentageResultResponse(BaseModel):
    operation: str = Field(examples=["percentage"])
    value: float
    total: float
    result: float | None = Field(examples=[25])
    formatted: str = Field(examples=["25.00%"])


class RootResponse(BaseModel):
    message: str
    documentation: str
