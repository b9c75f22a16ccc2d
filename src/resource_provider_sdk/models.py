"""Pydantic models for the Resource Provider SDK.

Uses Pydantic v2 frozen models so resources and request descriptors are
immutable once built.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Resource(BaseModel):
    """Immutable handle around a structured document returned by a provider.

    ``content`` is ``None`` when the backend had nothing to offer, for example
    a static configuration that could not be read.
    """

    model_config = ConfigDict(frozen=True)

    content: dict[str, Any] | None = None

    @field_validator("content", mode="before")
    @classmethod
    def copy_content(cls, v: Any) -> Any:
        """Detach the document from the caller's dict."""
        if isinstance(v, dict):
            return copy.deepcopy(v)
        return v

    @property
    def is_empty(self) -> bool:
        """True when no document is available."""
        return self.content is None

    def get(self, key: str, default: Any = None) -> Any:
        if self.content is None:
            return default
        return self.content.get(key, default)

    def __getitem__(self, key: str) -> Any:
        if self.content is None:
            raise KeyError(key)
        return self.content[key]

    def __contains__(self, key: object) -> bool:
        return self.content is not None and key in self.content


class RequestDescriptor(BaseModel):
    """Describes a single outbound call to the remote API."""

    model_config = ConfigDict(frozen=True)

    # Appended verbatim to the base URL, e.g. "/users/42" or "?query=active"
    path: str = Field(..., min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] | None = None

    @field_validator("headers", mode="before")
    @classmethod
    def default_headers(cls, v: Any) -> Any:
        return {} if v is None else dict(v)

    def with_headers(self, headers: Mapping[str, str]) -> Self:
        """Return a copy with extra headers merged over the current ones."""
        merged = {**self.headers, **headers}
        return self.model_copy(update={"headers": merged})
