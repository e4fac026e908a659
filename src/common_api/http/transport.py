"""Asynchronous HTTP transport shared by every API object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
import structlog
from pydantic import ValidationError

from ..config import ClientSettings, load_settings
from ..exceptions import (
    HttpError,
    ResponseFormatError,
    handle_transport_errors,
    http_error_for_status,
)
from ..logging import get_logger
from ..schemas.common import DownloadResult, ErrorInfo
from .content_disposition import extract_content_disposition_filename
from .loading import LoadingIndicator, LoggingLoadingIndicator

__all__ = ["HttpTransport"]


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_query_value(item) for item in value]
    return value


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    if not params:
        return None
    return {
        key: _query_value(value) for key, value in params.items() if value is not None
    }


@dataclass(slots=True)
class HttpTransport:
    """Thin wrapper around :class:`httpx.AsyncClient` speaking the backend's JSON dialect."""

    client: httpx.AsyncClient
    loading: LoadingIndicator = field(default_factory=LoggingLoadingIndicator)
    log: structlog.stdlib.BoundLogger = field(
        default_factory=lambda: get_logger(__name__)
    )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        loading: Optional[LoadingIndicator] = None,
    ) -> "HttpTransport":
        settings = settings or load_settings()
        client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            headers=settings.default_headers(),
        )
        return cls(client=client, loading=loading or LoggingLoadingIndicator())

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        query = _clean_params(params)
        self.log.debug("http.request", method=method, url=url, params=query)
        try:
            with handle_transport_errors(method, url):
                return await self.client.request(
                    method,
                    url,
                    params=query,
                    json=json,
                    data=data,
                    files=files,
                    headers=headers,
                )
        finally:
            self.loading.clear()

    def _error_for(self, response: httpx.Response, method: str, url: str) -> HttpError:
        error_info: Optional[ErrorInfo] = None
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, Mapping):
            try:
                error_info = ErrorInfo.model_validate(payload)
            except ValidationError:
                error_info = None
        message = (
            error_info.message
            if error_info is not None and error_info.message
            else response.reason_phrase or "request failed"
        )
        self.log.warning(
            "http.error",
            method=method,
            url=url,
            status_code=response.status_code,
            code=error_info.code if error_info is not None else None,
        )
        return http_error_for_status(
            response.status_code,
            message,
            method=method,
            url=url,
            error_info=error_info,
        )

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request and raise :class:`HttpError` on an error status."""

        response = await self._send(method, url, **kwargs)
        if response.status_code >= 400:
            raise self._error_for(response, method, url)
        return response

    @staticmethod
    def _decode(response: httpx.Response, method: str, url: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseFormatError(
                f"{method} {url}: response body is not valid JSON"
            ) from exc

    async def _call(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self.request(method, url, **kwargs)
        return self._decode(response, method, url)

    async def get(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return await self._call("GET", url, params=params)

    async def post(
        self,
        url: str,
        json: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self._call(
            "POST", url, json=json, data=data, files=files, params=params
        )

    async def put(
        self, url: str, json: Any = None, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        return await self._call("PUT", url, json=json, params=params)

    async def patch(
        self, url: str, json: Any = None, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        return await self._call("PATCH", url, json=json, params=params)

    async def delete(
        self, url: str, json: Any = None, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        return await self._call("DELETE", url, json=json, params=params)

    async def head(self, url: str, params: Optional[Mapping[str, Any]] = None) -> bool:
        """Return whether the resource exists; only 404 counts as missing."""

        response = await self._send("HEAD", url, params=params)
        if response.status_code == 404:
            return False
        if response.status_code >= 400:
            raise self._error_for(response, "HEAD", url)
        return True

    async def download(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        mime_type: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> DownloadResult:
        headers = {"Accept": mime_type} if mime_type else None
        response = await self.request("GET", url, params=params, headers=headers)
        announced = extract_content_disposition_filename(
            response.headers.get("Content-Disposition")
        )
        return DownloadResult(
            content=response.content,
            filename=announced or filename,
            mime_type=response.headers.get("Content-Type") or mime_type,
        )
