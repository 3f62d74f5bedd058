"""View state of the upload page, derived only from user actions and results."""

from enum import Enum

from pydantic import BaseModel

from translate_ai.domain.models import (
    AuthResult,
    FormResult,
    PipelineErr,
    PipelineIdle,
    PipelineOk,
    PipelineResult,
    StoredObject,
)

ACCEPTED_EXTENSIONS = (".mp3", ".mp4")


class ViewState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    NO_FILE_SELECTED = "no_file_selected"
    FILE_SELECTED = "file_selected"
    SUBMITTING = "submitting"
    DONE_OK = "done_ok"
    DONE_ERR = "done_err"


class FormView(BaseModel, frozen=True):
    """
    Immutable snapshot of the upload page.

    Transitions return a new snapshot. Actions that are not allowed in the
    current state return the snapshot unchanged. No state is terminal: after a
    result the user can pick a file and submit again.
    """

    authenticated: bool = False
    selected_file: str | None = None
    pending: bool = False
    result: FormResult = PipelineIdle()
    auth_error: str | None = None

    @property
    def state(self) -> ViewState:
        if not self.authenticated:
            return ViewState.UNAUTHENTICATED
        if self.pending:
            return ViewState.SUBMITTING
        if isinstance(self.result, PipelineOk):
            return ViewState.DONE_OK
        if isinstance(self.result, PipelineErr):
            return ViewState.DONE_ERR
        if self.selected_file:
            return ViewState.FILE_SELECTED
        return ViewState.NO_FILE_SELECTED

    @property
    def submit_enabled(self) -> bool:
        return self.authenticated and bool(self.selected_file) and not self.pending

    @property
    def show_upload_form(self) -> bool:
        return self.authenticated and self.state is not ViewState.DONE_OK

    @property
    def banner(self) -> str | None:
        if isinstance(self.result, PipelineErr):
            return f"Ha ocurrido un error: {self.result.message}"
        return self.auth_error

    @property
    def download(self) -> StoredObject | None:
        if isinstance(self.result, PipelineOk):
            return self.result.output_object
        return None

    @property
    def accept(self) -> str:
        return ",".join(ACCEPTED_EXTENSIONS)

    def login(self, auth_result: AuthResult) -> "FormView":
        if self.authenticated:
            return self
        if auth_result.granted:
            return FormView(authenticated=True)
        message = auth_result.message or "Credenciales incorrectas"
        return self.model_copy(update={"auth_error": message})

    def select_file(self, file_name: str | None) -> "FormView":
        # The extension filter is only a hint for the file picker.
        if not self.authenticated or self.pending or not file_name:
            return self
        return self.model_copy(
            update={"selected_file": file_name, "result": PipelineIdle()}
        )

    def submit(self) -> "FormView":
        if not self.submit_enabled:
            return self
        return self.model_copy(update={"pending": True})

    def complete(self, result: PipelineResult) -> "FormView":
        if not self.pending:
            return self
        return self.model_copy(update={"pending": False, "result": result})

    def reject(self, result: PipelineResult) -> "FormView":
        """Answers a form posted with nothing selected; it never enters SUBMITTING."""
        if (
            not self.authenticated
            or self.pending
            or self.selected_file
            or not isinstance(result, PipelineErr)
        ):
            return self
        return self.model_copy(update={"result": result})

    def reloaded(self) -> "FormView":
        # A server-rendered page starts with an empty file input.
        if self.pending:
            return self
        return self.model_copy(update={"selected_file": None})
