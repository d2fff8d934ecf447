"""Bundled dataset infrastructure providers."""

from dishka import Scope, provide
import logfire

from pollexa.adapter.bundle import BundlePostProvider, DirectoryAssetCatalog
from pollexa.config import Settings
from pollexa.domain.repository import AssetCatalog, PostProvider
from pollexa.util.di.base import ProviderBase
from pollexa.util.error import ConfigurationError


class BundleProvider(ProviderBase):
    """Bundle component base."""

    __mock_component__ = "bundle"


class ProdBundleProvider(BundleProvider):
    """Production provider reading the dataset shipped with the package."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_asset_catalog(self, settings: Settings) -> AssetCatalog:
        """Provide the directory-backed asset catalog.

        Raises:
            ConfigurationError: If the assets directory does not exist
        """
        assets_dir = settings.data.assets_dir
        if not assets_dir.is_dir():
            raise ConfigurationError(f"Assets directory not found: {assets_dir}")
        return DirectoryAssetCatalog(assets_dir)

    @provide(scope=Scope.APP)
    def get_post_provider(
        self, settings: Settings, assets: AssetCatalog
    ) -> PostProvider:
        """Provide the file-backed post provider."""
        logfire.info(
            "Using bundled posts",
            data_dir=str(settings.data.data_dir),
            file_name=settings.data.file_name,
        )
        return BundlePostProvider(
            data_dir=settings.data.data_dir,
            assets=assets,
            file_name=settings.data.file_name,
        )
