"""Request handlers."""

from .submission_handler import SubmissionHandler

__all__ = ["SubmissionHandler"]
