from translate_ai.config import AppConfig, load_config
from translate_ai.exceptions import (
    FetchError,
    MissingFileError,
    PipelineError,
    SynthesisError,
    TranscriptionError,
    TranslationError,
    UploadError,
)
from translate_ai.logging import setup_logging

__all__ = [
    "AppConfig",
    "FetchError",
    "MissingFileError",
    "PipelineError",
    "SynthesisError",
    "TranscriptionError",
    "TranslationError",
    "UploadError",
    "load_config",
    "setup_logging",
]
