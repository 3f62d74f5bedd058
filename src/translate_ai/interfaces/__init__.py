"""Abstract interfaces for infrastructure dependencies."""

from .media_fetcher import MediaFetcher
from .speech import SpeechToText, TextToSpeech, TextTranslator
from .storage import StorageClient

__all__ = [
    "MediaFetcher",
    "SpeechToText",
    "StorageClient",
    "TextToSpeech",
    "TextTranslator",
]
