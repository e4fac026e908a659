"""HTTP transport, loading hooks and download helpers."""

from .content_disposition import extract_content_disposition_filename
from .loading import LoadingIndicator, LoggingLoadingIndicator, NullLoadingIndicator
from .transport import HttpTransport

__all__ = [
    "HttpTransport",
    "LoadingIndicator",
    "LoggingLoadingIndicator",
    "NullLoadingIndicator",
    "extract_content_disposition_filename",
]
