"""Domain layer exports."""

from .access_gate import AccessGate
from .models import (
    OUTPUT_FILE_NAME,
    AuthOutcome,
    AuthResult,
    Credentials,
    PipelineErr,
    PipelineIdle,
    PipelineOk,
    PipelineResult,
    StoredObject,
    UploadedFile,
)
from .pipeline import TranslationPipeline
from .view_state import FormView, ViewState

__all__ = [
    "OUTPUT_FILE_NAME",
    "AccessGate",
    "AuthOutcome",
    "AuthResult",
    "Credentials",
    "FormView",
    "PipelineErr",
    "PipelineIdle",
    "PipelineOk",
    "PipelineResult",
    "StoredObject",
    "TranslationPipeline",
    "UploadedFile",
    "ViewState",
]
