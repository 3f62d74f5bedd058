"""OpenAI implementation of the SpeechToText interface."""

from openai import OpenAI

from translate_ai.exceptions import TranscriptionError
from translate_ai.interfaces.speech import SpeechToText
from translate_ai.logging import setup_logging

logger = setup_logging()


class OpenAITranscriber(SpeechToText):
    """Transcribes audio with the OpenAI transcription endpoint."""

    def __init__(self, client: OpenAI, model_name: str):
        self._client = client
        self._model_name = model_name

    def transcribe(self, audio_data: bytes, file_name: str) -> str:
        """
        Sends the file as an in-memory upload; the provider infers the audio
        format from ``file_name``.
        """
        try:
            response = self._client.audio.transcriptions.create(
                model=self._model_name,
                file=(file_name, audio_data),
            )
        except Exception as e:
            logger.exception(
                "OpenAI transcription failed", extra={"file_name": file_name}
            )
            raise TranscriptionError(str(e), cause=e) from e

        text = response.text or ""
        logger.info(
            "Audio transcription finished",
            extra={"file_name": file_name, "text_length": len(text)},
        )
        return text
