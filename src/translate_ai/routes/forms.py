"""Conversion of multipart form fields into domain objects."""

from fastapi import UploadFile

from translate_ai.domain.models import UploadedFile


def to_uploaded_file(file: UploadFile | None) -> UploadedFile | None:
    """Reads an upload into memory. A part without a file name counts as no file."""
    if file is None or not file.filename:
        return None
    return UploadedFile(
        name=file.filename,
        data=file.file.read(),
        content_type=file.content_type or "application/octet-stream",
    )
