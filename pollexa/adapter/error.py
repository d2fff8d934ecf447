"""Adapter layer errors."""

from typing import Sequence


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External post provider error."""

    pass


class SourceNotFoundError(ProviderError):
    """The dataset file does not exist."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"JSON file not found: {source}")


class SourceUnreadableError(ProviderError):
    """The dataset file exists but could not be read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"Could not read the data from {source}: {reason}")


class PostDecodeError(ProviderError):
    """The dataset could not be decoded into posts."""

    pass


class DataCorruptedError(PostDecodeError):
    """A record references an image that does not exist."""

    def __init__(self, asset_name: str, coding_path: Sequence[str | int]):
        self.asset_name = asset_name
        self.coding_path = tuple(coding_path)
        path = ".".join(str(part) for part in self.coding_path)
        super().__init__(
            f"An image with name {asset_name} could not be loaded "
            f"from the asset catalog (at {path})"
        )
