"""Terminal outcome of publishing one file."""
from dataclasses import dataclass
from typing import Optional

from gcspublish.exceptions import UploadError
from gcspublish.objects.source_file import SourceFile


@dataclass(frozen=True)
class PublishResult:
    """Result of one pass of a file through the upload transform.

    Exactly one of three outcomes is represented: uploaded (``success``),
    passed through without upload (``skipped``), or failed (``error`` set).

    Attributes:
        file: The file record that was processed
        destination: Destination key, or None when the file was skipped
        error: Upload failure, or None
    """

    file: SourceFile
    destination: Optional[str] = None
    error: Optional[UploadError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def skipped(self) -> bool:
        return self.error is None and self.destination is None
