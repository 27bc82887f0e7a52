"""
Exception hierarchy shared by the client and the resource models.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ApiError",
    "AuthenticationError",
    "CardError",
    "ConfigError",
    "ExpansionError",
    "IdempotencyError",
    "InvalidIdError",
    "InvalidRequestError",
    "ObjectTagMismatchError",
    "ParseError",
    "RateLimitError",
    "StripeError",
    "TransportError",
    "api_error_from_response",
]


class StripeError(Exception):
    """Base exception for every failure raised by this package."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ConfigError(StripeError):
    """Raised when the supplied configuration is invalid."""


class TransportError(StripeError):
    """The request never produced an HTTP response (connection, TLS, timeout)."""


class ParseError(StripeError):
    """The response body does not match the expected shape."""


class ObjectTagMismatchError(ParseError):
    def __init__(self, expected: str, actual: Any) -> None:
        super().__init__(
            f"Expected a '{expected}' object but the payload is tagged {actual!r}",
            {"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class InvalidIdError(ValueError):
    """Raised when a string cannot be used as an identifier of a given kind."""


class ExpansionError(LookupError):
    """Raised when an expandable reference was returned without its object."""


class ApiError(StripeError):
    """
    The API answered with a non-2xx status.

    The attributes mirror the ``error`` object Stripe puts in the response
    body; any of them may be ``None`` when the body is not structured.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        decline_code: Optional[str] = None,
        request_id: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, body)
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.param = param
        self.decline_code = decline_code
        self.request_id = request_id
        self.body = body or {}

    def __str__(self) -> str:
        parts = [f"{self.status_code}"]
        if self.error_type:
            parts.append(self.error_type)
        if self.code:
            parts.append(f"code={self.code}")
        if self.request_id:
            parts.append(f"request_id={self.request_id}")
        return f"{self.message} ({', '.join(parts)})"


class CardError(ApiError):
    """The card was declined or could not be charged."""


class InvalidRequestError(ApiError):
    pass


class AuthenticationError(ApiError):
    pass


class RateLimitError(ApiError):
    pass


class IdempotencyError(ApiError):
    pass


def api_error_from_response(
    status_code: int,
    body: Dict[str, Any],
    *,
    request_id: Optional[str] = None,
) -> ApiError:
    """
    Build the most specific :class:`ApiError` for a failed response.

    ``body`` is the decoded JSON body, or ``{"error": {"message": text}}`` when
    the server did not answer with JSON.
    """
    error = body.get("error") or {}
    if not isinstance(error, dict):
        error = {"message": str(error)}
    error_type = error.get("type")

    if status_code == 409 or error_type == "idempotency_error":
        error_cls = IdempotencyError
    elif status_code == 429:
        error_cls = RateLimitError
    elif status_code == 401:
        error_cls = AuthenticationError
    elif error_type == "card_error":
        error_cls = CardError
    elif error_type == "invalid_request_error":
        error_cls = InvalidRequestError
    else:
        error_cls = ApiError

    return error_cls(
        error.get("message") or f"Stripe API error {status_code}",
        status_code=status_code,
        error_type=error_type,
        code=error.get("code"),
        param=error.get("param"),
        decline_code=error.get("decline_code"),
        request_id=request_id,
        body=body,
    )
