"""Static resource provider backed by a bundled configuration document."""

from __future__ import annotations

import asyncio
import json
from importlib import resources
from typing import Any

from ..config import StaticProviderConfig
from ..errors import UnsupportedOperationError
from ..models import Resource
from ..telemetry import get_logger, traced_operation
from .base import ResourceProvider


class StaticResourceProvider(ResourceProvider[object]):
    """Read-only provider serving one fixed configuration document.

    The locator is ignored. Retrieval is best effort: when the document is
    missing or malformed the result is a ``Resource`` whose content is
    ``None``, never a failure.
    """

    def __init__(self, config: StaticProviderConfig | None = None) -> None:
        self.config = config or StaticProviderConfig()
        self._logger = get_logger()

    async def create_resource(self, data: object) -> Resource | None:
        raise UnsupportedOperationError("create_resource", provider=type(self).__name__)

    @traced_operation("static_retrieve_resource")
    async def retrieve_resource(self, locator: object = None) -> Resource:
        content = await asyncio.to_thread(self.load_document)
        return Resource(content=content)

    async def edit_resource(self, data: object) -> Resource | None:
        raise UnsupportedOperationError("edit_resource", provider=type(self).__name__)

    async def delete_resource(self, locator: object) -> Resource | None:
        raise UnsupportedOperationError("delete_resource", provider=type(self).__name__)

    def load_document(self) -> dict[str, Any] | None:
        """Parse the configuration document, or return None if unavailable."""
        location = self.config.location
        try:
            self._logger.debug("Loading static configuration", location=location)
            text = self._read_text()
            self._logger.debug("Static configuration content", content=text)
            document = json.loads(text)
        except Exception as e:
            self._logger.error(
                "Failed to read static configuration",
                location=location,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        if not isinstance(document, dict):
            self._logger.error(
                "Static configuration is not a JSON object",
                location=location,
                document_type=type(document).__name__,
            )
            return None
        return document

    def _read_text(self) -> str:
        if self.config.path is not None:
            return self.config.path.read_text(encoding="utf-8")
        resource = resources.files(self.config.package).joinpath(self.config.resource_name)
        return resource.read_text(encoding="utf-8")
