from __future__ import annotations

from typing import Any, List, Tuple

import pytest
import requests

from publicip.models import OutputDestination


class ScriptedSource:
    """Returns a configured IP, or raises a configured error."""

    def __init__(self, calls: List[Tuple[str, Any]], ip: str | None = None, error: Exception | None = None):
        self.calls = calls
        self.ip = ip
        self.error = error

    def fetch(self) -> str:
        self.calls.append(("fetch", None))
        if self.error is not None:
            raise self.error
        return self.ip


class RecordingSink:
    def __init__(self, calls: List[Tuple[str, Any]], error: Exception | None = None):
        self.calls = calls
        self.error = error
        self.writes: List[Tuple[OutputDestination, bytes]] = []

    def persist(self, destination: OutputDestination, payload: bytes) -> None:
        self.calls.append(("persist", (destination, payload)))
        self.writes.append((destination, payload))
        if self.error is not None:
            raise self.error


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, json_error: Exception | None = None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._payload


@pytest.fixture
def calls() -> List[Tuple[str, Any]]:
    return []


@pytest.fixture
def make_source(calls):
    def _make(ip: str | None = None, error: Exception | None = None) -> ScriptedSource:
        return ScriptedSource(calls, ip=ip, error=error)

    return _make


@pytest.fixture
def make_sink(calls):
    def _make(error: Exception | None = None) -> RecordingSink:
        return RecordingSink(calls, error=error)

    return _make


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get inside the ipify adapter; returns the list of captured requests."""
    captured: List[dict] = []
    state: dict = {"response": FakeResponse(payload={"ip": "184.162.7.66"}), "error": None}

    def _get(url, **kwargs):
        captured.append({"url": url, **kwargs})
        if state["error"] is not None:
            raise state["error"]
        return state["response"]

    monkeypatch.setattr("publicip.sources.ipify.requests.get", _get)

    class Control:
        requests = captured

        @staticmethod
        def respond(response: FakeResponse) -> None:
            state["response"] = response

        @staticmethod
        def fail(error: Exception) -> None:
            state["error"] = error

    return Control


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PUBLICIP_SOURCE", "PUBLICIP_ENDPOINT", "PUBLICIP_TIMEOUT", "PUBLICIP_FILE_MODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_response():
    return FakeResponse
