"""Custom exceptions for the Color Diary API."""

from typing import Any


class ColorDiaryException(Exception):
    """Base exception for Color Diary API."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ParseError(ColorDiaryException, ValueError):
    """A color string could not be parsed.

    Also a ValueError so pydantic validators report it as a field error.
    """

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid color '{value}': expected 6 hex digits like #RRGGBB",
            "PARSE_ERROR",
            {"value": value},
        )


class NotFoundError(ColorDiaryException):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message, "NOT_FOUND", {"resource": resource, "identifier": identifier})


class ValidationError(ColorDiaryException):
    """Validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)
