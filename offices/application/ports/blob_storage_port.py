"""Port interface for office photo storage."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class BlobStoragePort(ABC):
    @abstractmethod
    async def ensure_container(self) -> None:
        """Create the photo container if it does not exist yet."""
        ...

    @abstractmethod
    async def upload(self, content: BinaryIO, content_type: str, blob_name: str) -> str:
        """Store the stream under ``blob_name`` and return the blob URL."""
        ...

    @abstractmethod
    async def delete(self, blob_ref: str) -> None:
        """Delete a blob by name or URL.

        Raises:
            NotFoundError: if the underlying store answers 404.
        """
        ...

    @abstractmethod
    async def get_url(self, blob_ref: str) -> str:
        """Return the URL of an existing blob, given its name or URL.

        Raises:
            NotFoundError: if the blob does not exist.
        """
        ...
