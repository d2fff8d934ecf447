"""Unit tests for settings and the DI container."""

import pytest
from pydantic import ValidationError

from pollexa.adapter.bundle import BundlePostProvider, MockPostProvider
from pollexa.config import RESOURCES_DIR, FeedSettings, Settings
from pollexa.domain.repository import PostProvider
from pollexa.util.di import BundleProvider, ProviderBase, get_provider
from pollexa.util.di.infrastructure import ProdBundleProvider
from pollexa.util.error import DependencyInjectionError
from tests.di import MockBundleProvider, build_test_container


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FEED__SETTLING_DELAY", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.feed.settling_delay == 2.5
        assert settings.feed.page_title == "Discover"
        assert settings.data.file_name == "posts"
        assert settings.data.data_dir == RESOURCES_DIR
        assert settings.data.assets_dir == RESOURCES_DIR / "assets"

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("FEED__SETTLING_DELAY", "0")
        monkeypatch.setenv("ENVIRONMENT", "test")

        settings = Settings(_env_file=None)

        assert settings.feed.settling_delay == 0
        assert settings.environment == "test"

    def test_negative_settling_delay_is_invalid(self):
        with pytest.raises(ValidationError):
            FeedSettings(settling_delay=-0.5)


class TestProviders:
    """Tests for provider selection."""

    def test_get_provider_selects_by_mock_flag(self):
        assert get_provider(BundleProvider, use_mock=False) is ProdBundleProvider
        assert get_provider(BundleProvider, use_mock=True) is MockBundleProvider

    def test_get_provider_without_implementation_raises(self):
        class OrphanBase(ProviderBase):
            pass

        class OnlyProd(OrphanBase):
            __is_mock__ = False

        with pytest.raises(DependencyInjectionError):
            get_provider(OrphanBase, use_mock=True)

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"database"})

    @pytest.mark.asyncio
    async def test_mock_container_provides_mock_provider(self):
        container = build_test_container()
        async with container() as request_container:
            provider = await request_container.get(PostProvider)
        await container.close()

        assert isinstance(provider, MockPostProvider)

    @pytest.mark.asyncio
    async def test_unmocked_bundle_provides_file_provider(self):
        container = build_test_container(unmock={"bundle"})
        async with container() as request_container:
            provider = await request_container.get(PostProvider)
        await container.close()

        assert isinstance(provider, BundlePostProvider)
        assert provider.source == RESOURCES_DIR / "posts.json"
