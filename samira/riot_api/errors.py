"""Uniform error and response values produced by the HTTP client."""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

T = TypeVar("T")

NO_RESPONSE = "No Response"
REQUEST_ERROR = "Request Error"
VALIDATION_ERROR = "Validation Error"

# Fallback messages for well-known status codes
HTTP_ERROR_MESSAGES: Dict[int, str] = {
    400: "Bad Request - Invalid parameters provided",
    401: "Unauthorized - Invalid API key",
    403: "Forbidden - API key does not have access to this endpoint",
    404: "Not Found - The requested resource was not found",
    429: "Too Many Requests - Rate limit exceeded",
    500: "Internal Server Error - Riot Games server error",
    502: "Bad Gateway - Riot Games server is down",
    503: "Service Unavailable - Riot Games service is temporarily unavailable",
    504: "Gateway Timeout - Riot Games server timeout",
}


@dataclass(frozen=True)
class ApiError:
    """
    Normalized failure of a client call.

    Args:
        status: HTTP status code, or 0 when no response was received
        status_text: Short reason ("Not Found", "No Response", "Validation Error")
        message: Human-readable description
        details: Raw error body, exception or validator output for diagnostics
    """

    status: int
    status_text: str
    message: str
    details: Any = None

    @property
    def is_client_error(self) -> bool:
        """4xx other than 429; never worth retrying."""
        return 400 <= self.status < 500 and self.status != 429

    def __str__(self) -> str:
        if self.status:
            return f"Riot API Error {self.status}: {self.message}"
        return f"Riot API Error ({self.status_text}): {self.message}"


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Successful HTTP response with decoded body."""

    data: T
    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)


class RiotErrorStatus(BaseModel):
    """Nested ``{"status": {...}}`` object used by Riot error bodies."""

    status_code: Optional[int] = None
    message: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class RiotErrorBody(BaseModel):
    """
    Error payload as returned by the API.

    ``status`` is kept raw: it may be the nested :class:`RiotErrorStatus`
    object, a flat integer or something else entirely, and only the first two
    affect the resulting status.
    """

    status: Any = None
    status_text: Any = Field(None, alias="statusText")
    message: Any = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


def get_error_message(status: int) -> str:
    """Get user-friendly message for an HTTP status code."""
    return HTTP_ERROR_MESSAGES.get(status, f"HTTP Error {status}")


def _parse_error_body(body: Any) -> Optional[RiotErrorBody]:
    if not isinstance(body, dict):
        return None
    return RiotErrorBody.model_validate(body)


def _nested_status(value: Any) -> Optional[RiotErrorStatus]:
    if not isinstance(value, dict):
        return None
    try:
        return RiotErrorStatus.model_validate(value)
    except ValidationError:
        return None


def http_error(status: int, status_text: str, body: Any) -> ApiError:
    """
    Build an ApiError from an HTTP error response.

    Precedence for status/message: nested status object, then flat numeric
    status, then the HTTP status with the static message table. Top-level
    ``statusText`` and string ``message`` fields of the body win last.
    """
    message = get_error_message(status)
    parsed = _parse_error_body(body)

    if parsed is not None:
        nested = _nested_status(parsed.status)
        if nested is not None:
            if nested.status_code:
                status = nested.status_code
                message = nested.message or message
        elif isinstance(parsed.status, int) and not isinstance(parsed.status, bool):
            status = parsed.status

        if isinstance(parsed.status_text, str) and parsed.status_text:
            status_text = parsed.status_text
        if isinstance(parsed.message, str) and parsed.message:
            message = parsed.message

    return ApiError(
        status=status,
        status_text=status_text,
        message=message,
        details=body,
    )


def transport_error(exc: httpx.TransportError) -> ApiError:
    """Request was sent (or attempted) but no response came back."""
    return ApiError(
        status=0,
        status_text=NO_RESPONSE,
        message="No response received from server",
        details=exc,
    )


def request_error(exc: Exception) -> ApiError:
    """Request could not be built or dispatched."""
    return ApiError(
        status=0,
        status_text=REQUEST_ERROR,
        message=str(exc) or "An error occurred while setting up the request",
        details=exc,
    )


def validation_error(resource: str, exc: ValidationError) -> ApiError:
    """Response body did not match the expected schema."""
    return ApiError(
        status=400,
        status_text=VALIDATION_ERROR,
        message=f"{resource} data validation failed",
        details=exc.errors(),
    )
