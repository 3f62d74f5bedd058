"""Abstract interface for downloading stored media."""

from abc import ABC, abstractmethod


class MediaFetcher(ABC):
    """Downloads the bytes behind a public URL."""

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """
        Raises:
            FetchError: On network failure or a non-success status.
        """
