"""Port interface for the object storage that keeps complaint photos."""

from abc import ABC, abstractmethod


class PhotoStoragePort(ABC):
    @abstractmethod
    async def upload(self, photo_data: str) -> str:
        """Store a base64 photo (raw or ``data:image/...;base64,`` URI).

        Returns the public URL of the stored object.
        Raises DependencyError when the storage service fails and
        ValidationError when the payload cannot be decoded.
        """
        ...
