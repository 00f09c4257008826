"""Error classes and helpers for the HW Command Server.

Defines structured exceptions for the command error model and a
function to convert exceptions to serializable error payloads suitable
for tool responses and user notifications.

Per-candidate problems (a post missing an attribute, a timestamp row
whose digits do not decode) are never raised; they are skipped where
they are found. Only whole-operation failures live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass
class AppError(Exception):
    """Base application error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class BadRequestError(AppError):
    """Raised when a request is invalid or missing required parameters."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_REQUEST", message, details)


class NotFoundError(AppError):
    """Raised when a requested document cannot be found."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("NOT_FOUND", message, details)


class IOErrorApp(AppError):
    """Raised for I/O errors, such as unreadable or unwritable documents."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("IO_ERROR", message, details)


class InputEmptyError(AppError):
    """Raised when the clipboard or the chosen document has no content."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("INPUT_EMPTY", message, details)


class HtmlParseError(AppError):
    """Raised when an HTML fragment cannot be parsed at all."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("PARSE_ERROR", message, details)


class SelectionCancelled(AppError):
    """Raised by a chooser when the user dismisses it without picking."""

    def __init__(self, message: str = "Selection cancelled", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("CANCELLED", message, details)


def to_error_payload(
    error: Exception, *, path_hint: Optional[str] = None
) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Args:
        error: The exception to convert.
        path_hint: Optional document id that might help with diagnosis.

    Returns:
        A dictionary with ``code``, ``message`` and optional ``details``.

    Examples:
        >>> try:
        ...     raise NotFoundError("Document not found", {"id": "inbox.md"})
        ... except Exception as e:
        ...     payload = to_error_payload(e)
        ...     assert payload["code"] == "NOT_FOUND"
    """

    if isinstance(error, AppError):
        return error.to_payload()
    # Fallback: wrap generic exceptions
    details: Dict[str, Any] = {}
    if path_hint:
        details["path"] = path_hint
    return {"code": "IO_ERROR", "message": str(error), "details": details}
