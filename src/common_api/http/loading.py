"""Hooks that report long running requests to the embedding application.

A helper calls one of the ``show_*`` hooks right before sending its request
and the transport calls :meth:`LoadingIndicator.clear` once the request has
finished, whatever its outcome.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from ..logging import get_logger


class LoadingIndicator(ABC):
    """Abstract loading indicator.

    Implementations only provide :meth:`show` and :meth:`clear`; the
    convenience hooks forward a fixed message to :meth:`show`.
    """

    @abstractmethod
    def show(self, message: str) -> None:
        """Start indicating that ``message`` is in progress."""

    @abstractmethod
    def clear(self) -> None:
        """Stop indicating any progress."""

    def show_getting(self) -> None:
        self.show("Getting data...")

    def show_adding(self) -> None:
        self.show("Adding data...")

    def show_updating(self) -> None:
        self.show("Updating data...")

    def show_deleting(self) -> None:
        self.show("Deleting data...")

    def show_restoring(self) -> None:
        self.show("Restoring data...")

    def show_erasing(self) -> None:
        self.show("Erasing data...")

    def show_purging(self) -> None:
        self.show("Purging data...")

    def show_importing(self) -> None:
        self.show("Importing data...")

    def show_exporting(self) -> None:
        self.show("Exporting data...")

    def show_uploading(self) -> None:
        self.show("Uploading file...")

    def show_downloading(self) -> None:
        self.show("Downloading file...")


class NullLoadingIndicator(LoadingIndicator):
    def show(self, message: str) -> None:
        return None

    def clear(self) -> None:
        return None


class LoggingLoadingIndicator(LoadingIndicator):
    """Report progress messages through the log at debug level."""

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None) -> None:
        self._log = logger or get_logger(__name__)
        self.message: Optional[str] = None

    def show(self, message: str) -> None:
        self.message = message
        self._log.debug("loading.show", message=message)

    def clear(self) -> None:
        if self.message is not None:
            self._log.debug("loading.clear", message=self.message)
        self.message = None
