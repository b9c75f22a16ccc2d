"""Resource provider interface.

A provider reads and writes resources through four asynchronous operations,
keyed by a backend-specific locator type. Callers hold a ``ResourceProvider``
reference and never a concrete backend, so backends stay interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..models import Resource

L = TypeVar("L")


class ResourceProvider(ABC, Generic[L]):
    """Asynchronous create/retrieve/edit/delete contract over locator ``L``.

    Each operation resolves exactly once, either returning or raising.
    ``create_resource`` raises ``UnsupportedOperationError`` when the backend
    cannot create. ``edit_resource`` and ``delete_resource`` may instead
    resolve to ``None`` when a backend leaves them unimplemented.
    """

    @abstractmethod
    async def create_resource(self, data: L) -> Resource | None:
        """Create a resource from ``data``."""

    @abstractmethod
    async def retrieve_resource(self, locator: L) -> Resource | None:
        """Retrieve the resource identified by ``locator``."""

    @abstractmethod
    async def edit_resource(self, data: L) -> Resource | None:
        """Edit a resource from ``data``."""

    @abstractmethod
    async def delete_resource(self, locator: L) -> Resource | None:
        """Delete the resource identified by ``locator``."""

    async def aclose(self) -> None:
        """Release resources held by the provider."""

    async def __aenter__(self) -> ResourceProvider[L]:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
