import pytest

from translate_ai.domain import StoredObject, TranslationPipeline
from translate_ai.exceptions import UploadError
from translate_ai.interfaces import (
    MediaFetcher,
    SpeechToText,
    StorageClient,
    TextToSpeech,
    TextTranslator,
)


class FakeStorage(StorageClient):
    def __init__(self, fail_on: str | None = None):
        self.fail_on = fail_on
        self.uploads: list[tuple[str, bytes, str]] = []
        self.bucket_checked = False

    def upload(self, name, data, content_type):
        if name == self.fail_on:
            raise UploadError(name, Exception(f"storage rejected {name}"))
        self.uploads.append((name, data, content_type))
        return StoredObject(
            name=name, url=f"https://blob.test/{len(self.uploads)}/{name}"
        )

    def ensure_bucket_exists(self):
        self.bucket_checked = True


class FakeFetcher(MediaFetcher):
    def __init__(self, data: bytes = b"input-audio", error: Exception | None = None):
        self.data = data
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url):
        self.urls.append(url)
        if self.error:
            raise self.error
        return self.data


class FakeTranscriber(SpeechToText):
    def __init__(self, text: str = "Hello", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[bytes, str]] = []

    def transcribe(self, audio_data, file_name):
        self.calls.append((audio_data, file_name))
        if self.error:
            raise self.error
        return self.text


class FakeTranslator(TextTranslator):
    def __init__(self, text: str = "Hola", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[str] = []

    def translate(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.text


class FakeSynthesizer(TextToSpeech):
    def __init__(self, audio: bytes = b"ID3-mp3", error: Exception | None = None):
        self.audio = audio
        self.error = error
        self.calls: list[str] = []

    def synthesize(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.audio


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def synthesizer():
    return FakeSynthesizer()


@pytest.fixture
def pipeline(fetcher, transcriber, translator, synthesizer):
    return TranslationPipeline(fetcher, transcriber, translator, synthesizer)
