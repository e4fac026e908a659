from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest

from common_api.http import HttpTransport, LoadingIndicator

BASE_URL = "http://backend.test/api"


class RecordingLoading(LoadingIndicator):
    """Keeps every hook call so tests can assert the show/clear sequence."""

    def __init__(self) -> None:
        self.events: list[tuple[str, ...]] = []

    def show(self, message: str) -> None:
        self.events.append(("show", message))

    def clear(self) -> None:
        self.events.append(("clear",))


class Backend:
    """Fake backend answering requests from a queue of canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[Any] = []

    def reply(
        self,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._responses.append(
            httpx.Response(status_code, json=json, content=content, headers=headers)
        )

    def fail_with(self, exc: Exception) -> None:
        self._responses.append(exc)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def path(self) -> str:
        return self.last.url.path.removeprefix("/api")

    @property
    def params(self) -> dict[str, str]:
        return dict(self.last.url.params)

    @property
    def body(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None

    @property
    def form(self) -> dict[str, str]:
        parsed = parse_qs(self.last.content.decode())
        return {key: values[0] for key, values in parsed.items()}


@pytest.fixture
def backend() -> Backend:
    return Backend()


@pytest.fixture
def loading() -> RecordingLoading:
    return RecordingLoading()


@pytest.fixture
def http(backend: Backend, loading: RecordingLoading) -> HttpTransport:
    client = httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(backend)
    )
    return HttpTransport(client=client, loading=loading)
