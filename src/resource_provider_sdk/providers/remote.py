"""Remote resource provider for a tenant-scoped, token-authenticated API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ..config import RemoteProviderConfig
from ..core import EXPECT_CREATED, EXPECT_OK, AsyncHTTPExecutor, ResponseExpectation
from ..core.errors import ErrorFactory
from ..errors import ResourceProviderError
from ..http import create_async_http_client
from ..models import RequestDescriptor, Resource
from ..telemetry import get_logger, traced_operation
from .base import ResourceProvider


class RemoteResourceProvider(ResourceProvider[RequestDescriptor]):
    """Provider issuing authenticated HTTP calls to a single upstream API.

    Every request carries the tenant header, and the session token once one
    has been received. The token is captured from successful responses and
    reused on later calls. It is scoped to this instance and confined to the
    event loop driving it: the read-and-replace in ``_capture_token`` has no
    await point, so concurrent calls resolve to "last response handled wins".
    """

    def __init__(
        self,
        config: RemoteProviderConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize remote provider.

        Args:
            config: Endpoint, tenant and header configuration.
            client: Shared transport handle. When omitted the provider builds
                and owns one, closing it in ``aclose``.
        """
        self.config = config
        self._owns_client = client is None
        self._executor = AsyncHTTPExecutor(client or create_async_http_client(config))
        self._token: str | None = None
        self._logger = get_logger().bind(tenant=config.tenant)

    @property
    def base_url(self) -> str:
        return self.config.base_url_str

    @property
    def tenant(self) -> str:
        return self.config.tenant

    @property
    def session_token(self) -> str | None:
        """Token most recently captured from the remote API, if any."""
        return self._token

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._executor.client.aclose()

    @traced_operation("remote_retrieve_resource")
    async def retrieve_resource(self, locator: RequestDescriptor) -> Resource:
        """GET ``locator.path``; requires 200 OK with a JSON object body."""
        return await self._send("GET", locator, EXPECT_OK)

    @traced_operation("remote_create_resource")
    async def create_resource(self, data: RequestDescriptor) -> Resource:
        """POST ``data.body`` to ``data.path``; requires 201 Created with JSON."""
        return await self._send("POST", data, EXPECT_CREATED, json=data.body)

    async def edit_resource(self, data: RequestDescriptor) -> Resource | None:
        # Not offered by this backend; resolves to no result without a request.
        return None

    async def delete_resource(self, locator: RequestDescriptor) -> Resource | None:
        return None

    def build_headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        """Merge caller headers with the provider's auth and tenant headers.

        Caller headers go first; the session token and tenant are applied
        last and win on a name collision. Names compare case-insensitively,
        and caller entries differing only in case are folded into one header
        whose values are comma-joined in insertion order.
        """
        merged = httpx.Headers(dict(headers or {}))
        if self._token is not None:
            merged[self.config.token_header] = self._token
        merged[self.config.tenant_header] = self.config.tenant
        return dict(merged)

    async def _send(
        self,
        method: str,
        descriptor: RequestDescriptor,
        expectation: ResponseExpectation,
        **kwargs: Any,
    ) -> Resource:
        url = self.base_url + descriptor.path
        correlation_id = ErrorFactory.generate_correlation_id()

        try:
            response = await self._executor.execute(
                method,
                url,
                expectation,
                correlation_id=correlation_id,
                headers=self.build_headers(descriptor.headers),
                **kwargs,
            )
        except ResourceProviderError as e:
            self._logger.error(
                "Remote resource request failed",
                method=method,
                path=descriptor.path,
                **e.to_dict(),
            )
            raise

        self._capture_token(response.headers)
        return Resource(content=response.body)

    def _capture_token(self, headers: httpx.Headers) -> None:
        server_token = headers.get(self.config.token_header)
        if server_token is not None and server_token != self._token:
            self._token = server_token
            self._logger.debug("Captured new session token")
