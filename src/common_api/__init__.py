"""Async client for the common REST APIs of business entities."""

from .client import ApiClient
from .config import ClientSettings, load_settings
from .exceptions import (
    ArgumentTypeError,
    ArgumentValueError,
    CommonApiError,
    ForbiddenError,
    HttpError,
    NotFoundError,
    ResponseFormatError,
    TransportError,
    UnauthorizedError,
    UnsupportedFieldError,
)
from .http import HttpTransport, LoadingIndicator, LoggingLoadingIndicator, NullLoadingIndicator
from .logging import configure_logging, get_logger

__version__ = "1.0.1"

__all__ = [
    "ApiClient",
    "ArgumentTypeError",
    "ArgumentValueError",
    "ClientSettings",
    "CommonApiError",
    "ForbiddenError",
    "HttpError",
    "HttpTransport",
    "LoadingIndicator",
    "LoggingLoadingIndicator",
    "NotFoundError",
    "NullLoadingIndicator",
    "ResponseFormatError",
    "TransportError",
    "UnauthorizedError",
    "UnsupportedFieldError",
    "configure_logging",
    "get_logger",
    "load_settings",
]
