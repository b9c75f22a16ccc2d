"""Backend selection for resource providers."""

from __future__ import annotations

from typing import Any

import httpx

from .config import ProviderSettings
from .providers import RemoteResourceProvider, ResourceProvider, StaticResourceProvider
from .telemetry import configure_telemetry, get_logger


def create_resource_provider(
    settings: ProviderSettings,
    *,
    client: httpx.AsyncClient | None = None,
) -> ResourceProvider[Any]:
    """Build the provider selected by ``settings.backend``.

    When ``settings.telemetry`` is set it is applied first, so the provider
    logs and traces through the configured pipeline.

    Args:
        settings: Backend selection and per-backend configuration.
        client: Optional shared transport handle for the remote backend.

    Returns:
        A provider typed against the ``ResourceProvider`` interface.
    """
    if settings.telemetry is not None:
        configure_telemetry(settings.telemetry)

    logger = get_logger()

    if settings.backend == "remote" and settings.remote is not None:
        logger.info(
            "Using remote resource provider",
            base_url=settings.remote.base_url_str,
            tenant=settings.remote.tenant,
        )
        return RemoteResourceProvider(settings.remote, client=client)

    logger.info("Using static resource provider", location=settings.static.location)
    return StaticResourceProvider(settings.static)
