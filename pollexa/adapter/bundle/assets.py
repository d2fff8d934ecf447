"""Asset catalogs for images referenced by the dataset."""

from pathlib import Path
from typing import Iterable, Optional

from pollexa.domain.repository import AssetCatalog
from pollexa.domain.value import Asset

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")


class DirectoryAssetCatalog(AssetCatalog):
    """Looks images up by name in a directory.

    ``post_1_option_1`` resolves to the first of ``post_1_option_1.png``,
    ``.jpg`` or ``.jpeg`` found under the root.
    """

    def __init__(self, root: Path) -> None:
        """Initialize the catalog.

        Args:
            root: Directory holding the image files
        """
        self.root = root

    def resolve(self, name: str) -> Optional[Asset]:
        """Resolve an image name to a file in the root directory."""
        if not name or Path(name).name != name:
            return None
        for extension in IMAGE_EXTENSIONS:
            path = self.root / f"{name}{extension}"
            if path.is_file():
                return Asset(name=name, path=path)
        return None


class MockAssetCatalog(AssetCatalog):
    """Asset catalog for testing.

    Resolves every name, or only the given ones, without touching disk.
    """

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self._names = set(names) if names is not None else None

    def resolve(self, name: str) -> Optional[Asset]:
        """Resolve a name if it is known to the mock."""
        if not name:
            return None
        if self._names is not None and name not in self._names:
            return None
        return Asset(name=name)
