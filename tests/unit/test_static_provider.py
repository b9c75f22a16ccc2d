"""Unit tests for the static resource provider.

Retrieval is best effort and never fails; every other operation is
unsupported.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from resource_provider_sdk.config import StaticProviderConfig
from resource_provider_sdk.errors import ErrorCode, UnsupportedOperationError
from resource_provider_sdk.models import RequestDescriptor
from resource_provider_sdk.providers import ResourceProvider, StaticResourceProvider


class TestStaticRetrieve:
    """Tests for StaticResourceProvider.retrieve_resource."""

    def test_loads_bundled_configuration(self, static_config: StaticProviderConfig) -> None:
        provider = StaticResourceProvider(static_config)

        resource = asyncio.run(provider.retrieve_resource(None))

        assert not resource.is_empty
        assert resource["status"]["onLineStatus"] is True
        assert resource["tenantConfigurations"][0]["tenant"] == "diku"

    def test_default_config(self) -> None:
        provider = StaticResourceProvider()

        assert provider.config == StaticProviderConfig()

    @pytest.mark.parametrize("locator", [None, "ignored", 42, RequestDescriptor(path="/x")])
    def test_locator_is_ignored(self, locator: object) -> None:
        provider = StaticResourceProvider()

        resource = asyncio.run(provider.retrieve_resource(locator))

        assert resource.get("status") is not None

    def test_reads_path_override(self, tmp_path: Path) -> None:
        config_file = tmp_path / "acs.json"
        config_file.write_text('{"libraryName": "main"}', encoding="utf-8")
        provider = StaticResourceProvider(StaticProviderConfig(path=config_file))

        resource = asyncio.run(provider.retrieve_resource(None))

        assert resource.content == {"libraryName": "main"}

    def test_missing_file_resolves_to_absent_document(self, tmp_path: Path) -> None:
        provider = StaticResourceProvider(StaticProviderConfig(path=tmp_path / "missing.json"))

        resource = asyncio.run(provider.retrieve_resource(None))

        assert resource.is_empty

    def test_malformed_json_resolves_to_absent_document(self, tmp_path: Path) -> None:
        config_file = tmp_path / "broken.json"
        config_file.write_text("{not json", encoding="utf-8")
        provider = StaticResourceProvider(StaticProviderConfig(path=config_file))

        resource = asyncio.run(provider.retrieve_resource(None))

        assert resource.is_empty

    def test_non_object_json_resolves_to_absent_document(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.json"
        config_file.write_text("[1, 2, 3]", encoding="utf-8")
        provider = StaticResourceProvider(StaticProviderConfig(path=config_file))

        resource = asyncio.run(provider.retrieve_resource(None))

        assert resource.is_empty

    def test_deeply_nested_json_resolves_to_absent_document(self, tmp_path: Path) -> None:
        config_file = tmp_path / "nested.json"
        config_file.write_text("[" * 100_000 + "]" * 100_000, encoding="utf-8")
        provider = StaticResourceProvider(StaticProviderConfig(path=config_file))

        with capture_logs() as logs:
            resource = asyncio.run(provider.retrieve_resource(None))

        assert resource.is_empty
        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert [entry["error_type"] for entry in errors] == ["RecursionError"]

    def test_missing_bundled_resource(self) -> None:
        provider = StaticResourceProvider(StaticProviderConfig(resource_name="nope.json"))

        resource = asyncio.run(provider.retrieve_resource(None))

        assert resource.is_empty

    def test_missing_package(self) -> None:
        provider = StaticResourceProvider(
            StaticProviderConfig(package="resource_provider_sdk_missing_pkg")
        )

        resource = asyncio.run(provider.retrieve_resource(None))

        assert resource.is_empty

    def test_failure_is_logged(self, tmp_path: Path) -> None:
        provider = StaticResourceProvider(StaticProviderConfig(path=tmp_path / "missing.json"))

        with capture_logs() as logs:
            asyncio.run(provider.retrieve_resource(None))

        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert len(errors) == 1
        assert errors[0]["error_type"] == "FileNotFoundError"
        assert errors[0]["location"].endswith("missing.json")

    def test_each_call_rereads_the_document(self, tmp_path: Path) -> None:
        config_file = tmp_path / "acs.json"
        config_file.write_text('{"version": 1}', encoding="utf-8")
        provider = StaticResourceProvider(StaticProviderConfig(path=config_file))

        first = asyncio.run(provider.retrieve_resource(None))
        config_file.write_text('{"version": 2}', encoding="utf-8")
        second = asyncio.run(provider.retrieve_resource(None))

        assert first["version"] == 1
        assert second["version"] == 2


class TestStaticUnsupported:
    """Create, edit and delete always fail with UnsupportedOperationError."""

    @pytest.mark.parametrize(
        "operation",
        ["create_resource", "edit_resource", "delete_resource"],
    )
    def test_operation_is_unsupported(self, operation: str) -> None:
        provider = StaticResourceProvider()

        with pytest.raises(UnsupportedOperationError) as exc_info:
            asyncio.run(getattr(provider, operation)({"any": "data"}))

        assert exc_info.value.operation == operation
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_OPERATION
        assert exc_info.value.provider == "StaticResourceProvider"


class TestStaticContract:
    """Static provider satisfies the provider interface."""

    def test_is_resource_provider(self) -> None:
        assert isinstance(StaticResourceProvider(), ResourceProvider)

    def test_async_context_manager(self) -> None:
        async def use() -> bool:
            async with StaticResourceProvider() as provider:
                resource = await provider.retrieve_resource(None)
            return resource.is_empty

        assert asyncio.run(use()) is False
