"""Bundled dataset adapter."""

from .assets import DirectoryAssetCatalog, MockAssetCatalog
from .decoder import PostDecoder
from .provider import BundlePostProvider, MockPostProvider

__all__ = [
    "BundlePostProvider",
    "DirectoryAssetCatalog",
    "MockAssetCatalog",
    "MockPostProvider",
    "PostDecoder",
]
