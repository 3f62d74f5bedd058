"""httpx implementation of the MediaFetcher interface."""

import httpx

from translate_ai.exceptions import FetchError
from translate_ai.interfaces.media_fetcher import MediaFetcher
from translate_ai.logging import setup_logging

logger = setup_logging()


class HttpMediaFetcher(MediaFetcher):
    """Downloads stored media over HTTP."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def fetch(self, url: str) -> bytes:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.exception("Media download failed", extra={"url": url})
            raise FetchError(url, e) from e

        logger.info(
            "Media downloaded", extra={"url": url, "size": len(response.content)}
        )
        return response.content
