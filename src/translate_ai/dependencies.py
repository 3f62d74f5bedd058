"""FastAPI dependency injection configuration.

Clients are built on first use and then reused, so importing the application
never opens a connection.
"""

from functools import lru_cache

import httpx
from minio import Minio
from openai import OpenAI

from translate_ai.config import AppConfig, load_config
from translate_ai.domain import AccessGate, TranslationPipeline
from translate_ai.handlers import SubmissionHandler
from translate_ai.infrastructure import (
    HttpMediaFetcher,
    MinioStorageClient,
    OpenAISynthesizer,
    OpenAITranscriber,
    OpenAITranslator,
)
from translate_ai.interfaces import MediaFetcher, StorageClient


@lru_cache
def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


@lru_cache
def get_openai_client() -> OpenAI:
    """Returns the OpenAI client shared by the three provider adapters."""
    return OpenAI(api_key=get_config().openai.api_key)


@lru_cache
def get_storage() -> StorageClient:
    """Returns the storage client for the configured public bucket."""
    config = get_config().minio
    client = Minio(
        endpoint=config.endpoint,
        access_key=config.user,
        secret_key=config.password,
        secure=config.secure,
    )
    return MinioStorageClient(client, config.bucket_name, config.public_base_url)


@lru_cache
def get_fetcher() -> MediaFetcher:
    """Returns the fetcher used to read uploads back from storage."""
    return HttpMediaFetcher(httpx.Client(follow_redirects=True))


def get_pipeline() -> TranslationPipeline:
    """Returns the transcription, translation and synthesis pipeline."""
    client = get_openai_client()
    config = get_config().openai
    return TranslationPipeline(
        fetcher=get_fetcher(),
        transcriber=OpenAITranscriber(client, config.transcription_model),
        translator=OpenAITranslator(
            client,
            config.translation_model,
            config.translation_prompt,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        ),
        synthesizer=OpenAISynthesizer(
            client,
            config.speech_model,
            config.voice,
            response_format=config.response_format,
        ),
    )


def get_submission_handler() -> SubmissionHandler:
    """Returns the handler for translation form submissions."""
    return SubmissionHandler(get_storage(), get_pipeline())


def get_access_gate() -> AccessGate:
    """Returns the credential check configured from the environment."""
    return AccessGate(get_config().auth)
