import json
import re
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from translate_ai.exceptions import (
    FetchError,
    SynthesisError,
    TranscriptionError,
    TranslationError,
    UploadError,
)
from translate_ai.infrastructure import (
    HttpMediaFetcher,
    MinioStorageClient,
    OpenAISynthesizer,
    OpenAITranscriber,
    OpenAITranslator,
)


class TestMinioStorageClient:
    def test_upload_returns_public_object(self):
        client = MagicMock()
        storage = MinioStorageClient(client, "translate-ai", "http://localhost:9000/")

        stored = storage.upload("my speech.mp3", b"abc", "audio/mpeg")

        kwargs = client.put_object.call_args.kwargs
        assert kwargs["bucket_name"] == "translate-ai"
        assert re.fullmatch(r"[0-9a-f]{32}/my speech\.mp3", kwargs["object_name"])
        assert kwargs["data"].read() == b"abc"
        assert kwargs["length"] == 3
        assert kwargs["content_type"] == "audio/mpeg"
        assert stored.name == "my speech.mp3"
        assert re.fullmatch(
            r"http://localhost:9000/translate-ai/[0-9a-f]{32}/my%20speech\.mp3",
            stored.url,
        )

    def test_same_name_gets_distinct_urls(self):
        storage = MinioStorageClient(MagicMock(), "b", "http://minio")

        first = storage.upload("out.mp3", b"1", "audio/mpeg")
        second = storage.upload("out.mp3", b"1", "audio/mpeg")

        assert first.name == second.name
        assert first.url != second.url

    @pytest.mark.parametrize(
        ("name", "segment"),
        [
            ("..", "file"),
            (".", "file"),
            ("", "file"),
            ("../../etc/passwd", "passwd"),
            ("C:\\audio\\speech.mp3", "speech.mp3"),
        ],
    )
    def test_key_uses_safe_last_segment(self, name, segment):
        client = MagicMock()
        storage = MinioStorageClient(client, "b", "http://minio")

        stored = storage.upload(name, b"abc", "audio/mpeg")

        object_name = client.put_object.call_args.kwargs["object_name"]
        assert re.fullmatch(r"[0-9a-f]{32}/" + re.escape(segment), object_name)
        assert stored.name == name

    def test_upload_failure_keeps_message(self):
        client = MagicMock()
        client.put_object.side_effect = Exception("Access Denied.")
        storage = MinioStorageClient(client, "b", "http://minio")

        with pytest.raises(UploadError, match="Access Denied.") as exc_info:
            storage.upload("speech.mp3", b"abc", "audio/mpeg")

        assert exc_info.value.object_name == "speech.mp3"

    def test_ensure_bucket_creates_public_bucket(self):
        client = MagicMock()
        client.bucket_exists.return_value = False
        storage = MinioStorageClient(client, "translate-ai", "http://minio")

        storage.ensure_bucket_exists()

        client.make_bucket.assert_called_once_with("translate-ai")
        bucket, policy = client.set_bucket_policy.call_args.args
        assert bucket == "translate-ai"
        statement = json.loads(policy)["Statement"][0]
        assert statement["Action"] == ["s3:GetObject"]
        assert statement["Resource"] == ["arn:aws:s3:::translate-ai/*"]

    def test_ensure_bucket_keeps_existing_bucket(self):
        client = MagicMock()
        client.bucket_exists.return_value = True

        MinioStorageClient(client, "b", "http://minio").ensure_bucket_exists()

        client.make_bucket.assert_not_called()
        client.set_bucket_policy.assert_called_once()


class TestHttpMediaFetcher:
    def test_returns_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"media"))
        fetcher = HttpMediaFetcher(httpx.Client(transport=transport))

        assert fetcher.fetch("https://blob.test/speech.mp3") == b"media"

    def test_error_status_raises_fetch_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(404))
        fetcher = HttpMediaFetcher(httpx.Client(transport=transport))

        with pytest.raises(FetchError, match="404") as exc_info:
            fetcher.fetch("https://blob.test/missing.mp3")

        assert exc_info.value.url == "https://blob.test/missing.mp3"

    def test_network_error_keeps_message(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        fetcher = HttpMediaFetcher(httpx.Client(transport=httpx.MockTransport(refuse)))

        with pytest.raises(FetchError, match="connection refused"):
            fetcher.fetch("https://blob.test/speech.mp3")


class TestOpenAITranscriber:
    def test_sends_named_file_to_model(self):
        client = MagicMock()
        client.audio.transcriptions.create.return_value = SimpleNamespace(text="Hello")

        text = OpenAITranscriber(client, "whisper-1").transcribe(b"abc", "speech.mp3")

        assert text == "Hello"
        client.audio.transcriptions.create.assert_called_once_with(
            model="whisper-1", file=("speech.mp3", b"abc")
        )

    def test_missing_text_is_empty(self):
        client = MagicMock()
        client.audio.transcriptions.create.return_value = SimpleNamespace(text=None)

        assert OpenAITranscriber(client, "whisper-1").transcribe(b"abc", "a.mp3") == ""

    def test_provider_error(self):
        client = MagicMock()
        client.audio.transcriptions.create.side_effect = Exception("Invalid file format.")

        with pytest.raises(TranscriptionError, match="Invalid file format."):
            OpenAITranscriber(client, "whisper-1").transcribe(b"abc", "a.txt")


class TestOpenAITranslator:
    def test_uses_fixed_prompt_and_sampling(self):
        client = MagicMock()
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="Hola"))]
        )
        translator = OpenAITranslator(client, "gpt-4", "translate to Spanish")

        assert translator.translate("Hello") == "Hola"
        client.chat.completions.create.assert_called_once_with(
            model="gpt-4",
            messages=[
                {"role": "system", "content": "translate to Spanish"},
                {"role": "user", "content": "Hello"},
            ],
            temperature=0,
            max_tokens=256,
        )

    def test_empty_content(self):
        client = MagicMock()
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))]
        )

        assert OpenAITranslator(client, "gpt-4", "p").translate("Hello") == ""

    def test_no_choices(self):
        client = MagicMock()
        client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        assert OpenAITranslator(client, "gpt-4", "p").translate("Hello") == ""

    def test_provider_error(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = Exception("Rate limit reached")

        with pytest.raises(TranslationError, match="Rate limit reached"):
            OpenAITranslator(client, "gpt-4", "p").translate("Hello")


class TestOpenAISynthesizer:
    def test_returns_mp3_bytes(self):
        client = MagicMock()
        client.audio.speech.create.return_value = SimpleNamespace(content=b"ID3")

        audio = OpenAISynthesizer(client, "tts-1", "onyx").synthesize("Hola")

        assert audio == b"ID3"
        client.audio.speech.create.assert_called_once_with(
            model="tts-1", voice="onyx", input="Hola", response_format="mp3"
        )

    def test_provider_error(self):
        client = MagicMock()
        client.audio.speech.create.side_effect = Exception("voice not found")

        with pytest.raises(SynthesisError, match="voice not found"):
            OpenAISynthesizer(client, "tts-1", "onyx").synthesize("Hola")
