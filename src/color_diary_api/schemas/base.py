"""Shared schema configuration and the response envelope."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class BaseSchema(BaseModel):
    """Reads ORM rows, accepts field names or camelCase aliases, stores enums as values."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )


class ValueSchema(BaseSchema):
    """Immutable value object shared between the engine and the API."""

    model_config = ConfigDict(frozen=True)


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ApiResponse(BaseModel, Generic[T]):
    """Envelope of every JSON response."""

    success: bool
    data: T | None = None
    error: ErrorDetail | None = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, code: str, message: str, details: dict[str, Any] | None = None) -> "ApiResponse[Any]":
        return cls(success=False, error=ErrorDetail(code=code, message=message, details=details or None))
