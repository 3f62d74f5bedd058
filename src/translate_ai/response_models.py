"""Response models for the translation API."""

from pydantic import BaseModel

from translate_ai.domain.models import (
    AuthOutcome,
    AuthResult,
    PipelineOk,
    PipelineResult,
    StoredObject,
)

SUCCESS_MESSAGE = "Archivo pusheado con éxito"


class TranslateResponse(BaseModel):
    """Outcome of a translation request."""

    ok: bool
    message: str
    file: StoredObject | None = None

    @classmethod
    def from_result(cls, result: PipelineResult) -> "TranslateResponse":
        if isinstance(result, PipelineOk):
            return cls(ok=True, message=SUCCESS_MESSAGE, file=result.output_object)
        return cls(ok=False, message=result.message, file=None)


class AuthResponse(BaseModel):
    """Outcome of a credential check."""

    authenticated: bool
    outcome: AuthOutcome
    message: str | None = None

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            authenticated=result.granted,
            outcome=result.outcome,
            message=result.message,
        )
