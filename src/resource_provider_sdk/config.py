"""Configuration for the Resource Provider SDK.

Uses Pydantic v2 for validation with sensible defaults. Models are frozen so
the base endpoint and tenant stay constant for a provider's lifetime.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
    model_validator,
)

from .errors import InvalidConfigError

DEFAULT_TOKEN_HEADER = "x-okapi-token"
DEFAULT_TENANT_HEADER = "x-okapi-tenant"
DEFAULT_RESOURCE_PACKAGE = "resource_provider_sdk.resources"
DEFAULT_RESOURCE_NAME = "default_configuration.json"


class TelemetryConfig(BaseModel):
    """Logging and tracing configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    service_name: str = "resource-provider-sdk"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unsupported log level: {v}"
            raise ValueError(msg)
        return level


class RemoteProviderConfig(BaseModel):
    """Configuration for the remote, tenant-scoped API backend."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    # Required
    base_url: HttpUrl
    tenant: str = Field(..., min_length=1)

    # HTTP settings
    timeout: Annotated[float, Field(gt=0, le=300)] = 30.0
    connect_timeout: Annotated[float, Field(gt=0, le=60)] = 10.0
    user_agent: str = Field(default="resource-provider-sdk/0.1.0 Python", min_length=1)

    # Protocol headers
    token_header: str = Field(default=DEFAULT_TOKEN_HEADER, min_length=1)
    tenant_header: str = Field(default=DEFAULT_TENANT_HEADER, min_length=1)

    @field_validator("token_header", "tenant_header")
    @classmethod
    def normalize_header(cls, v: str) -> str:
        """Header names are case-insensitive; keep them lowercase."""
        return v.strip().lower()

    @property
    def base_url_str(self) -> str:
        """Get base URL as string without trailing slash."""
        return str(self.base_url).rstrip("/")

    @classmethod
    def from_env(cls, prefix: str = "RESOURCE_PROVIDER_") -> Self:
        """Create config from environment variables."""
        import os

        def get_env(key: str, default: Any = None) -> Any:
            return os.environ.get(f"{prefix}{key}", default)

        base_url = get_env("BASE_URL")
        if not base_url:
            raise InvalidConfigError(
                f"{prefix}BASE_URL environment variable is required",
                field="base_url",
            )

        tenant = get_env("TENANT")
        if not tenant:
            raise InvalidConfigError(
                f"{prefix}TENANT environment variable is required",
                field="tenant",
            )

        return cls(
            base_url=base_url,
            tenant=tenant,
            timeout=float(get_env("TIMEOUT", "30.0")),
            connect_timeout=float(get_env("CONNECT_TIMEOUT", "10.0")),
        )


class StaticProviderConfig(BaseModel):
    """Where the static provider finds its bundled configuration document."""

    model_config = ConfigDict(frozen=True)

    package: str = Field(default=DEFAULT_RESOURCE_PACKAGE, min_length=1)
    resource_name: str = Field(default=DEFAULT_RESOURCE_NAME, min_length=1)

    # Filesystem override, read instead of the packaged resource when set
    path: Path | None = None

    @property
    def location(self) -> str:
        """Human readable location used in log lines."""
        if self.path is not None:
            return str(self.path)
        return f"{self.package}/{self.resource_name}"


class ProviderSettings(BaseModel):
    """Selects which backend serves resources."""

    model_config = ConfigDict(frozen=True)

    backend: Literal["static", "remote"] = "static"
    remote: RemoteProviderConfig | None = None
    static: StaticProviderConfig = Field(default_factory=StaticProviderConfig)

    # Applied by the factory when set; None leaves process logging untouched
    telemetry: TelemetryConfig | None = None

    @model_validator(mode="after")
    def require_remote_config(self) -> Self:
        """A remote backend cannot be built without its endpoint settings."""
        if self.backend == "remote" and self.remote is None:
            msg = "remote configuration is required when backend is 'remote'"
            raise ValueError(msg)
        return self

    @classmethod
    def from_env(cls, prefix: str = "RESOURCE_PROVIDER_") -> Self:
        """Create settings from environment variables."""
        import os

        backend = os.environ.get(f"{prefix}BACKEND", "static").strip().lower()
        if backend not in {"static", "remote"}:
            raise InvalidConfigError(
                f"Unsupported backend {backend!r}; expected 'static' or 'remote'",
                field="backend",
            )

        static_path = os.environ.get(f"{prefix}STATIC_PATH")
        static = StaticProviderConfig(path=Path(static_path) if static_path else None)

        telemetry = None
        log_level = os.environ.get(f"{prefix}LOG_LEVEL")
        tracing = os.environ.get(f"{prefix}TELEMETRY_ENABLED")
        if log_level or tracing:
            telemetry = TelemetryConfig(
                enabled=(tracing or "true").strip().lower() not in {"0", "false", "no", "off"},
                log_level=log_level or "INFO",
            )

        return cls(
            backend=backend,
            remote=RemoteProviderConfig.from_env(prefix) if backend == "remote" else None,
            static=static,
            telemetry=telemetry,
        )
