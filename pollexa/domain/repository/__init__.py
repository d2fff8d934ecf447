"""Collaborator interfaces for the Pollexa domain.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter layer.
"""

from pollexa.domain.repository.asset import AssetCatalog
from pollexa.domain.repository.post import PostProvider

__all__ = [
    "AssetCatalog",
    "PostProvider",
]
