"""Write channel over a single GCS object upload.

Content written to the channel is collected in memory and sent to GCS in one
simple upload request when the channel is closed. Closing either finishes the
channel or raises UploadError; a channel never retries.

``Blob.upload_from_file`` only sends a single multipart request up to
``MAX_SIMPLE_UPLOAD_SIZE`` bytes and switches to a resumable session above it,
so a channel refuses content past that size instead of uploading it.
"""
import io
from types import TracebackType
from typing import Any, Dict, Optional, Type

from google.cloud import storage  # type: ignore[attr-defined]

from gcspublish.exceptions import UploadError
from gcspublish.logging_config import get_logger

logger = get_logger(__name__)

# Largest size the SDK uploads as one multipart request (8 MiB)
MAX_SIMPLE_UPLOAD_SIZE = 8 * 1024 * 1024


class WriteChannel:
    """Writable handle for one destination blob.

    Use it as a context manager: leaving the block normally uploads the
    content, leaving it with an exception discards it.

    Attributes:
        blob: Blob receiving the content
        destination: Destination key of the blob
        finished: True once the upload completed
        closed: True once the channel was closed or aborted

    Example:
        >>> with WriteChannel(bucket.blob("site.css"), "site.css") as channel:
        ...     channel.write(b"body { margin: 0 }")
    """

    def __init__(
        self,
        blob: storage.Blob,
        destination: str,
        upload_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.blob = blob
        self.destination = destination
        self.upload_options = dict(upload_options or {})
        self.finished = False
        self.closed = False
        self._buffer = io.BytesIO()

    def __enter__(self) -> "WriteChannel":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        if exc_type is None:
            self.close()
        else:
            self.abort()

    @property
    def size(self) -> int:
        """Number of bytes written so far."""
        return self._buffer.getbuffer().nbytes

    def write(self, data: bytes) -> int:
        """Buffer a chunk of content.

        Raises:
            UploadError: If the channel is closed or the content would grow
                past MAX_SIMPLE_UPLOAD_SIZE
        """
        if self.closed:
            raise UploadError(
                f"Write channel for {self.destination} is closed",
                destination=self.destination,
            )
        if self.size + len(data) > MAX_SIMPLE_UPLOAD_SIZE:
            raise UploadError(
                f"{self.destination} exceeds the {MAX_SIMPLE_UPLOAD_SIZE} byte "
                "single-request upload limit",
                destination=self.destination,
            )
        return self._buffer.write(data)

    def close(self) -> None:
        """Upload the written content and finish the channel.

        Raises:
            UploadError: If the upload request fails for any reason
        """
        if self.closed:
            return
        self.closed = True

        size = self.size
        self._buffer.seek(0)
        try:
            # retry=None: a failed upload is reported, never repeated
            self.blob.upload_from_file(
                self._buffer,
                size=size,
                retry=None,
                **self.upload_options,
            )
        except Exception as e:
            raise UploadError(
                f"Unable to upload {self.destination}: {e}",
                destination=self.destination,
            ) from e
        finally:
            self._buffer.close()

        self.finished = True
        logger.debug(f"Upload request for {self.destination} completed ({size} bytes)")

    def abort(self) -> None:
        """Discard written content without uploading."""
        if self.closed:
            return
        self.closed = True
        self._buffer.close()
        logger.debug(f"Write channel for {self.destination} aborted")
