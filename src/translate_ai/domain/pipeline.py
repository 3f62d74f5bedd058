"""Core business logic: English media in, Spanish speech out."""

from translate_ai.domain.models import StoredObject
from translate_ai.exceptions import (
    EMPTY_TRANSCRIPT_MESSAGE,
    EMPTY_TRANSLATION_MESSAGE,
    TranscriptionError,
    TranslationError,
)
from translate_ai.interfaces.media_fetcher import MediaFetcher
from translate_ai.interfaces.speech import SpeechToText, TextToSpeech, TextTranslator
from translate_ai.logging import setup_logging

logger = setup_logging()


class TranslationPipeline:
    """Runs fetch, transcription, translation and synthesis in strict sequence."""

    def __init__(
        self,
        fetcher: MediaFetcher,
        transcriber: SpeechToText,
        translator: TextTranslator,
        synthesizer: TextToSpeech,
    ):
        self._fetcher = fetcher
        self._transcriber = transcriber
        self._translator = translator
        self._synthesizer = synthesizer

    def translate(self, input_object: StoredObject) -> bytes:
        """
        Produces Spanish MP3 audio for a stored English recording.

        Each step only runs once the previous one succeeded. The first failure
        aborts the run and intermediate results are dropped.

        Args:
            input_object: The uploaded recording.

        Returns:
            MP3 encoded audio of the translation.

        Raises:
            FetchError: If the recording cannot be downloaded.
            TranscriptionError: If transcription fails or yields no text.
            TranslationError: If translation fails or yields no text.
            SynthesisError: If speech synthesis fails.
        """
        logger.info(
            "Translation started",
            extra={"object_name": input_object.name, "url": input_object.url},
        )

        audio_data = self._fetcher.fetch(input_object.url)

        transcript = self._transcriber.transcribe(audio_data, input_object.name)
        if not transcript:
            raise TranscriptionError(EMPTY_TRANSCRIPT_MESSAGE)

        translation = self._translator.translate(transcript)
        if not translation:
            raise TranslationError(EMPTY_TRANSLATION_MESSAGE)

        speech = self._synthesizer.synthesize(translation)

        logger.info(
            "Translation finished",
            extra={
                "object_name": input_object.name,
                "transcript_length": len(transcript),
                "translation_length": len(translation),
                "audio_size": len(speech),
            },
        )
        return speech
