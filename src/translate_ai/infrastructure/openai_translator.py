"""OpenAI chat-completion implementation of the TextTranslator interface."""

from openai import OpenAI

from translate_ai.exceptions import TranslationError
from translate_ai.interfaces.speech import TextTranslator
from translate_ai.logging import setup_logging

logger = setup_logging()


class OpenAITranslator(TextTranslator):
    """Translates text with a fixed system prompt and deterministic sampling."""

    def __init__(
        self,
        client: OpenAI,
        model_name: str,
        system_prompt: str,
        temperature: float = 0,
        max_tokens: int = 256,
    ):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt
        self._temperature = temperature
        self._max_tokens = max_tokens

    def translate(self, text: str) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=self._model_name,
                messages=[
                    {"role": "system", "content": self._system_prompt},
                    {"role": "user", "content": text},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as e:
            logger.exception("OpenAI translation failed")
            raise TranslationError(str(e), cause=e) from e

        if not completion.choices:
            return ""
        content = completion.choices[0].message.content or ""
        logger.info("Text translated", extra={"text_length": len(content)})
        return content
