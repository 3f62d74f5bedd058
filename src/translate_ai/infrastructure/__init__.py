"""Concrete implementations of infrastructure interfaces."""

from .http_fetcher import HttpMediaFetcher
from .minio_storage import MinioStorageClient
from .openai_synthesizer import OpenAISynthesizer
from .openai_transcriber import OpenAITranscriber
from .openai_translator import OpenAITranslator

__all__ = [
    "HttpMediaFetcher",
    "MinioStorageClient",
    "OpenAISynthesizer",
    "OpenAITranscriber",
    "OpenAITranslator",
]
