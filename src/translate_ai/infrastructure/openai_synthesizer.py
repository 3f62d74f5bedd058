"""OpenAI implementation of the TextToSpeech interface."""

from openai import OpenAI

from translate_ai.exceptions import SynthesisError
from translate_ai.interfaces.speech import TextToSpeech
from translate_ai.logging import setup_logging

logger = setup_logging()


class OpenAISynthesizer(TextToSpeech):
    """Synthesizes speech with a fixed model, voice and output format."""

    def __init__(
        self,
        client: OpenAI,
        model_name: str,
        voice: str,
        response_format: str = "mp3",
    ):
        self._client = client
        self._model_name = model_name
        self._voice = voice
        self._response_format = response_format

    def synthesize(self, text: str) -> bytes:
        try:
            response = self._client.audio.speech.create(
                model=self._model_name,
                voice=self._voice,
                input=text,
                response_format=self._response_format,
            )
            audio = response.content
        except Exception as e:
            logger.exception("OpenAI speech synthesis failed")
            raise SynthesisError(str(e), cause=e) from e

        logger.info(
            "Speech synthesized",
            extra={"voice": self._voice, "audio_size": len(audio)},
        )
        return audio
