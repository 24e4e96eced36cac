"""Custom exceptions for the gcspublish package."""
from typing import Optional


class GcsPublishError(Exception):
    """Base exception class for gcspublish-specific errors."""

    pass


class ConfigurationError(GcsPublishError):
    """Raised when the publish configuration is missing or invalid."""

    pass


class UploadError(GcsPublishError):
    """Raised when a single file fails to reach the storage bucket.

    Attributes:
        destination: Destination key of the failed object, if one was resolved
    """

    def __init__(self, message: str, destination: Optional[str] = None) -> None:
        super().__init__(message)
        self.destination = destination
