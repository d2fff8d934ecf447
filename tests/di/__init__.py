"""Mock providers for testing."""

from .bundle import MockBundleProvider
from .config import MockConfigProvider
from .container import build_test_container

__all__ = [
    "MockBundleProvider",
    "MockConfigProvider",
    "build_test_container",
]
