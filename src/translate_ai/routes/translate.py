"""Translation endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from translate_ai.dependencies import get_submission_handler
from translate_ai.handlers import SubmissionHandler
from translate_ai.logging import setup_logging
from translate_ai.response_models import TranslateResponse
from translate_ai.routes.forms import to_uploaded_file

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["translate"])

HandlerDep = Annotated[SubmissionHandler, Depends(get_submission_handler)]


@router.post("/translate", response_model=TranslateResponse)
def translate_file(
    handler: HandlerDep,
    file: Annotated[UploadFile | None, File()] = None,
) -> TranslateResponse:
    """
    Translates an uploaded English recording into Spanish speech.

    Always answers 200; the body tells whether the translation succeeded.
    """
    logger.info(
        "Received translation request",
        extra={"file_name": file.filename if file else None},
    )
    result = handler.handle_submit(to_uploaded_file(file))
    return TranslateResponse.from_result(result)
