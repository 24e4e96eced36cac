"""Per-file upload transform.

``PublishTransform`` takes one SourceFile at a time through
metadata resolution, destination key resolution, write channel open,
content streaming and a single terminal outcome. It keeps no per-file state
between calls, so a host may run any number of files through it at once.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Iterable, Iterator, Optional

from gcspublish.bucket.gcs_manager import GcsManager
from gcspublish.exceptions import UploadError
from gcspublish.logging_config import get_logger
from gcspublish.objects.publish_config import PublishConfig
from gcspublish.objects.publish_result import PublishResult
from gcspublish.objects.source_file import SourceFile
from gcspublish.transform.metadata_resolver import resolve_metadata
from gcspublish.transform.path_normalizer import normalize_path

logger = get_logger(__name__)

DoneCallback = Callable[..., Any]


class PublishTransform:
    """Uploads SourceFiles to the configured bucket.

    Attributes:
        config: Validated publish configuration
        gcs_manager: Storage access shared by all uploads

    Example:
        >>> transform = PublishTransform(config)
        >>> result = transform.publish(SourceFile(path="/dist/app.js", base="/dist/", contents=b"..."))
        >>> result.destination
        'app.js'
    """

    def __init__(
        self, config: PublishConfig, gcs_manager: Optional[GcsManager] = None
    ) -> None:
        self.config = config
        self.gcs_manager = gcs_manager if gcs_manager is not None else GcsManager(config)

    def destination_for(self, file: SourceFile) -> str:
        """Resolve the destination key of a file.

        A configured ``transform_path`` fully replaces path normalization.
        """
        if self.config.transform_path is not None:
            return self.config.transform_path(file)
        return normalize_path(self.config.base, file)

    def publish(self, file: SourceFile) -> PublishResult:
        """Upload one file and report its single terminal outcome.

        Files without contents are passed through without an upload. Any
        failure is returned in the result, never raised.

        Args:
            file: File record to publish

        Returns:
            PublishResult describing the outcome
        """
        if file.is_null():
            logger.debug(f"Skipping {file.path}: no contents")
            return PublishResult(file=file)

        destination: Optional[str] = None
        try:
            metadata = resolve_metadata(file, self.config.metadata)
            destination = self.destination_for(file)
            if not destination:
                raise UploadError(f"No destination key for {file.path}")

            with self.gcs_manager.open_write_channel(
                destination, metadata, public=self.config.public
            ) as channel:
                file.pipe(channel)
        except UploadError as e:
            logger.error(f"Upload failed for {file.path}: {e}", exc_info=True)
            return PublishResult(file=file, destination=destination, error=e)
        except Exception as e:
            logger.error(f"Upload failed for {file.path}: {e}", exc_info=True)
            error = UploadError(f"Unable to publish {file.path}: {e}", destination=destination)
            error.__cause__ = e
            return PublishResult(file=file, destination=destination, error=error)

        logger.info(f"Uploaded {destination}")
        return PublishResult(file=file, destination=destination)

    def __call__(self, file: SourceFile, encoding: Optional[str], done: DoneCallback) -> None:
        """Streaming-transform entry point for callback-style hosts.

        Calls ``done(error)`` on failure or ``done(None, file)`` otherwise,
        exactly once per file.

        Args:
            file: File record to publish
            encoding: Encoding hint from the host, unused for binary content
            done: Completion callback
        """
        result = self.publish(file)
        if result.error is not None:
            done(result.error)
        else:
            done(None, result.file)

    async def publish_async(self, file: SourceFile) -> PublishResult:
        """Awaitable ``publish``; the blocking upload runs in a worker thread."""
        return await asyncio.to_thread(self.publish, file)

    def publish_all(
        self, files: Iterable[SourceFile], max_workers: Optional[int] = None
    ) -> Iterator[PublishResult]:
        """Publish many files concurrently.

        Results are yielded in completion order, not submission order. A
        failed file does not stop the others.

        Args:
            files: File records to publish
            max_workers: Thread pool size, ThreadPoolExecutor default if None

        Yields:
            One PublishResult per input file
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self.publish, file) for file in files]
            for future in as_completed(futures):
                yield future.result()
