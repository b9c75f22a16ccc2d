"""
Shared test fixtures for Resource Provider SDK tests.

Provides a fake upstream API served through ``httpx.MockTransport``,
configuration fixtures, and sample documents.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from resource_provider_sdk.config import (
    RemoteProviderConfig,
    StaticProviderConfig,
    TelemetryConfig,
)

BASE_URL = "https://okapi.example.com"
TENANT = "diku"
TOKEN_HEADER = "x-okapi-token"
TENANT_HEADER = "x-okapi-tenant"


class FakeUpstream:
    """Scripted upstream API recording every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: list[httpx.Response | Exception] = []

    def reply(
        self,
        status_code: int = 200,
        *,
        json: Any = None,
        token: str | None = None,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> FakeUpstream:
        """Queue a response."""
        response_headers = dict(headers or {})
        if token is not None:
            response_headers[TOKEN_HEADER] = token
        if content is not None:
            response = httpx.Response(status_code, content=content, headers=response_headers)
        else:
            response = httpx.Response(status_code, json=json, headers=response_headers)
        self._replies.append(response)
        return self

    def fail(self, exc: Exception) -> FakeUpstream:
        """Queue a transport-level failure."""
        self._replies.append(exc)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._replies:
            return httpx.Response(500, json={"error": "no reply queued"})
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def remote_config() -> RemoteProviderConfig:
    """Provide a basic remote provider configuration for testing."""
    return RemoteProviderConfig(base_url=BASE_URL, tenant=TENANT)


@pytest.fixture
def static_config() -> StaticProviderConfig:
    """Provide the default static provider configuration."""
    return StaticProviderConfig()


@pytest.fixture
def telemetry_config() -> TelemetryConfig:
    """Provide telemetry configuration for testing."""
    return TelemetryConfig(enabled=False, service_name="test-sdk")


@pytest.fixture
def upstream() -> FakeUpstream:
    """Provide an empty fake upstream API."""
    return FakeUpstream()


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Provide a sample JSON document returned by the upstream API."""
    return {
        "id": "42",
        "username": "jdoe",
        "active": True,
        "personal": {"lastName": "Doe", "firstName": "Jane"},
    }
