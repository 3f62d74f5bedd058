"""Abstract interface for blob storage operations."""

from abc import ABC, abstractmethod

from translate_ai.domain.models import StoredObject


class StorageClient(ABC):
    """Abstract base class for blob storage backends."""

    @abstractmethod
    def upload(self, name: str, data: bytes, content_type: str) -> StoredObject:
        """
        Stores a byte buffer and makes it publicly readable.

        Args:
            name: The file name the object is exposed under.
            data: The object contents.
            content_type: MIME type of the contents.

        Returns:
            The stored object with its public URL.

        Raises:
            UploadError: If the upload fails.
        """

    @abstractmethod
    def ensure_bucket_exists(self) -> None:
        """Creates the bucket if needed and grants anonymous read access."""
