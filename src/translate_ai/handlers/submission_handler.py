"""Handler for translation form submissions."""

from translate_ai.domain.models import (
    OUTPUT_CONTENT_TYPE,
    OUTPUT_FILE_NAME,
    PipelineErr,
    PipelineOk,
    PipelineResult,
    UploadedFile,
)
from translate_ai.domain.pipeline import TranslationPipeline
from translate_ai.exceptions import MissingFileError, PipelineError
from translate_ai.interfaces.storage import StorageClient
from translate_ai.logging import setup_logging

logger = setup_logging()


class SubmissionHandler:
    """Stores the upload, runs the pipeline and stores the translated audio."""

    def __init__(self, storage: StorageClient, pipeline: TranslationPipeline):
        self._storage = storage
        self._pipeline = pipeline

    def handle_submit(self, file: UploadedFile | None) -> PipelineResult:
        """
        Processes one form submission.

        This is the only place errors are turned into results: whatever fails
        along the way becomes a ``PipelineErr`` carrying the originating
        message. The stored input is kept when a later step fails.

        Args:
            file: The submitted file, or ``None`` when the form had none.

        Returns:
            ``PipelineOk`` with the stored output, or ``PipelineErr``.
        """
        try:
            if file is None:
                raise MissingFileError()

            logger.info(
                "Processing submission",
                extra={"file_name": file.name, "size": file.size},
            )

            input_object = self._storage.upload(file.name, file.data, file.content_type)
            audio = self._pipeline.translate(input_object)
            output_object = self._storage.upload(
                OUTPUT_FILE_NAME, audio, OUTPUT_CONTENT_TYPE
            )
        except PipelineError as e:
            logger.warning(
                "Submission failed",
                extra={"error_type": type(e).__name__, "error": e.message},
            )
            return PipelineErr(message=e.message)
        except Exception as e:
            logger.exception("Unexpected submission failure")
            return PipelineErr(message=str(e))

        logger.info(
            "Submission processed",
            extra={"input_url": input_object.url, "output_url": output_object.url},
        )
        return PipelineOk(output_object=output_object)
