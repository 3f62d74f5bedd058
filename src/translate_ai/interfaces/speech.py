"""Abstract interfaces for the AI provider steps of the pipeline."""

from abc import ABC, abstractmethod


class SpeechToText(ABC):
    """Turns recorded speech into text."""

    @abstractmethod
    def transcribe(self, audio_data: bytes, file_name: str) -> str:
        """
        Transcribes audio data.

        Args:
            audio_data: Raw audio or video file bytes.
            file_name: Original file name, used by the provider to detect the format.

        Returns:
            The transcript, possibly empty.

        Raises:
            TranscriptionError: If the provider call fails.
        """


class TextTranslator(ABC):
    """Translates English text to Spanish."""

    @abstractmethod
    def translate(self, text: str) -> str:
        """
        Returns:
            The translation, possibly empty.

        Raises:
            TranslationError: If the provider call fails.
        """


class TextToSpeech(ABC):
    """Synthesizes speech from text."""

    @abstractmethod
    def synthesize(self, text: str) -> bytes:
        """
        Returns:
            MP3 encoded audio.

        Raises:
            SynthesisError: If the provider call fails.
        """
