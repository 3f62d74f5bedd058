"""Custom exceptions for the translation service."""

MISSING_FILE_MESSAGE = "El archivo es null"
EMPTY_TRANSCRIPT_MESSAGE = "Ha ocurrido un error en la transcripción"
EMPTY_TRANSLATION_MESSAGE = "Ha ocurrido un error en la traducción"


class PipelineError(Exception):
    """Base class for failures that end a translation request.

    The message is the originating error's text and is shown to the user as is.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class MissingFileError(PipelineError):
    """Raised when a submission carries no file."""

    def __init__(self):
        super().__init__(MISSING_FILE_MESSAGE)


class UploadError(PipelineError):
    """Raised when storing an object in blob storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        message = str(cause) if cause else f"Failed to upload '{object_name}'"
        super().__init__(message, cause)


class FetchError(PipelineError):
    """Raised when the uploaded media cannot be downloaded back."""

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        message = str(cause) if cause else f"Failed to fetch '{url}'"
        super().__init__(message, cause)


class TranscriptionError(PipelineError):
    """Raised when speech-to-text fails or yields no text."""


class TranslationError(PipelineError):
    """Raised when translation fails or yields no text."""


class SynthesisError(PipelineError):
    """Raised when text-to-speech fails."""


class AuthComparisonError(Exception):
    """Raised when submitted credentials cannot be compared."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
