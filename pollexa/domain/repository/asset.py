"""Asset catalog interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pollexa.domain.value import Asset


class AssetCatalog(ABC):
    """Resolves image names found in the dataset to assets.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    def resolve(self, name: str) -> Optional[Asset]:
        """Resolve an image name.

        Args:
            name: Image name as written in the dataset (no extension)

        Returns:
            The asset if it exists, None otherwise
        """
        pass
