"""Infrastructure providers."""

# Import bases
from .bundle import BundleProvider

# Import implementations (needed for __subclasses__())
from .bundle import ProdBundleProvider  # noqa: F401

__all__ = [
    "BundleProvider",
    "ProdBundleProvider",
]
