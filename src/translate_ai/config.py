"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field

TRANSLATION_SYSTEM_PROMPT = (
    "You will be provided with a sentence in English, "
    "and your task is to translate it into Spanish"
)


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "translate-ai"
    secure: bool = False
    public_url: str | None = None

    @computed_field
    @property
    def public_base_url(self) -> str:
        """Returns the base URL under which stored objects are publicly readable."""
        if self.public_url:
            return self.public_url.rstrip("/")
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.endpoint}"


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI models and parameters used by the translation pipeline."""

    api_key: str
    transcription_model: str = "whisper-1"
    translation_model: str = "gpt-4"
    translation_prompt: str = TRANSLATION_SYSTEM_PROMPT
    temperature: float = 0
    max_tokens: int = 256
    speech_model: str = "tts-1"
    voice: str = "onyx"
    response_format: str = "mp3"


class AuthConfig(BaseModel, frozen=True):
    """Reference credentials for the access gate. Unset values stay ``None``."""

    user_name: str | None = None
    user_password: str | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    openai: OpenAIConfig
    auth: AuthConfig


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "translate-ai"),
            secure=_env_flag("MINIO_SECURE"),
            public_url=os.getenv("MINIO_PUBLIC_URL"),
        ),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
        ),
        auth=AuthConfig(
            user_name=os.getenv("USER_NAME"),
            user_password=os.getenv("USER_PASSWORD"),
        ),
    )
