"""Client level exceptions and helpers for the transport layer."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import httpx

if TYPE_CHECKING:  # pragma: no cover - type-checking only import
    from .schemas.common import ErrorInfo

__all__ = [
    "CommonApiError",
    "ArgumentTypeError",
    "UnsupportedFieldError",
    "ArgumentValueError",
    "TransportError",
    "ResponseFormatError",
    "HttpError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "http_error_for_status",
    "handle_transport_errors",
]


class CommonApiError(Exception):
    """Base class for all errors raised by the client."""


class ArgumentTypeError(CommonApiError, TypeError):
    """Raised when an argument passed to an API method has the wrong type."""


class UnsupportedFieldError(ArgumentTypeError):
    """Raised when a criteria object carries a field the API does not declare."""


class ArgumentValueError(CommonApiError, ValueError):
    """Raised when arguments have the right types but an invalid combination."""


class TransportError(CommonApiError):
    """Raised when the request never produced an HTTP response."""


class ResponseFormatError(CommonApiError):
    """Raised when a successful response carries a body that is not JSON."""


class HttpError(CommonApiError):
    """Raised when the server answers with an error status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        error_info: "ErrorInfo | None" = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.method = method
        self.url = url
        self.error_info = error_info

    @property
    def code(self) -> str | None:
        """Machine readable error code reported by the server, if any."""

        return self.error_info.code if self.error_info is not None else None

    def __str__(self) -> str:
        target = f" {self.method} {self.url}" if self.method and self.url else ""
        return f"HTTP {self.status_code}{target}: {self.message}"


class UnauthorizedError(HttpError):
    """Raised for 401 responses."""


class ForbiddenError(HttpError):
    """Raised for 403 responses."""


class NotFoundError(HttpError):
    """Raised for 404 responses."""


_STATUS_ERRORS: dict[int, type[HttpError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


@dataclass(slots=True)
class _RequestContext:
    """Internal helper describing the request for error messages."""

    method: str
    url: str

    def format(self, message: str) -> str:
        return f"{self.method} {self.url}: {message}"


def http_error_for_status(
    status_code: int,
    message: str,
    *,
    method: str | None = None,
    url: str | None = None,
    error_info: "ErrorInfo | None" = None,
) -> HttpError:
    """Return the :class:`HttpError` subclass matching ``status_code``."""

    error_cls = _STATUS_ERRORS.get(status_code, HttpError)
    return error_cls(
        status_code, message, method=method, url=url, error_info=error_info
    )


def _translate_httpx_error(exc: httpx.HTTPError, *, context: _RequestContext) -> CommonApiError:
    if isinstance(exc, httpx.TimeoutException):
        return TransportError(context.format("request timed out"))
    if isinstance(exc, httpx.TransportError):
        return TransportError(context.format(f"transport failure: {exc}"))
    return CommonApiError(context.format(str(exc)))


@contextmanager
def handle_transport_errors(method: str, url: str) -> Iterator[None]:
    """Translate ``httpx`` errors into client specific ones."""

    context = _RequestContext(method, url)
    try:
        yield
    except httpx.HTTPError as exc:
        raise _translate_httpx_error(exc, context=context) from exc
