"""HTTP transport construction for the Resource Provider SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .config import RemoteProviderConfig

JSON_MEDIA_TYPE = "application/json"


def create_async_http_client(config: RemoteProviderConfig) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    The client carries no base URL: providers address the API with absolute
    URLs built from the configured endpoint.

    Args:
        config: Remote provider configuration.

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=config.connect_timeout,
            read=config.timeout,
            write=config.timeout,
            pool=config.timeout,
        ),
        headers={
            "User-Agent": config.user_agent,
            "Accept": JSON_MEDIA_TYPE,
        },
        follow_redirects=False,
    )


def is_json_content_type(content_type: str | None) -> bool:
    """Check whether a Content-Type header denotes a JSON document.

    Parameters such as ``charset`` are ignored.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE
