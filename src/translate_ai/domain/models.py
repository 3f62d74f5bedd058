"""Domain models for the translation service."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

OUTPUT_FILE_NAME = "translateIA-output.mp3"
OUTPUT_CONTENT_TYPE = "audio/mpeg"


class UploadedFile(BaseModel, frozen=True):
    """A file received from the upload form."""

    name: str
    data: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.data)


class StoredObject(BaseModel, frozen=True):
    """A named, publicly readable object in blob storage."""

    name: str
    url: str


class Credentials(BaseModel, frozen=True):
    """Name and password submitted to the access gate."""

    name: str = ""
    password: str = ""


class PipelineIdle(BaseModel, frozen=True):
    """Nothing has been submitted yet."""

    kind: Literal["idle"] = "idle"


class PipelineOk(BaseModel, frozen=True):
    """A translation that completed and was stored."""

    kind: Literal["ok"] = "ok"
    output_object: StoredObject


class PipelineErr(BaseModel, frozen=True):
    """A translation that failed with a user-facing message."""

    kind: Literal["err"] = "err"
    message: str


PipelineResult = Annotated[
    Union[PipelineOk, PipelineErr], Field(discriminator="kind")
]
FormResult = Annotated[
    Union[PipelineIdle, PipelineOk, PipelineErr], Field(discriminator="kind")
]


class AuthOutcome(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    ERRORED = "errored"


class AuthResult(BaseModel, frozen=True):
    """Outcome of one credential comparison."""

    outcome: AuthOutcome
    message: str | None = None

    @property
    def granted(self) -> bool:
        return self.outcome is AuthOutcome.GRANTED

    @classmethod
    def allow(cls) -> "AuthResult":
        return cls(outcome=AuthOutcome.GRANTED)

    @classmethod
    def deny(cls) -> "AuthResult":
        return cls(outcome=AuthOutcome.DENIED)

    @classmethod
    def error(cls, message: str) -> "AuthResult":
        return cls(outcome=AuthOutcome.ERRORED, message=message)
