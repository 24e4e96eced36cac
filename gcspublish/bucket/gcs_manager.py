"""Google Cloud Storage access for publishing.

This module provides the GcsManager class, which owns the storage client and
bucket handle for a publish run and opens one write channel per uploaded
object.
"""

from typing import Any, Dict, Mapping, Optional

from google.auth import exceptions as google_auth_exceptions
from google.cloud import storage  # type: ignore[attr-defined]
from google.oauth2 import service_account

from gcspublish.bucket.upload_options import simple_upload_options
from gcspublish.bucket.write_channel import WriteChannel
from gcspublish.exceptions import ConfigurationError
from gcspublish.logging_config import get_logger
from gcspublish.objects.publish_config import PublishConfig

logger = get_logger(__name__)

# Metadata keys set as Blob properties; any other key becomes custom metadata
BLOB_PROPERTIES = (
    "cache_control",
    "content_disposition",
    "content_encoding",
    "content_language",
    "content_type",
)


def apply_metadata(blob: storage.Blob, metadata: Mapping[str, Any]) -> None:
    """Set resolved metadata on a blob before it is uploaded.

    Args:
        blob: Blob about to be uploaded
        metadata: Resolved metadata; a nested ``metadata`` mapping is merged
            into the blob's custom metadata

    Example:
        >>> apply_metadata(blob, {"content_type": "text/css", "build": "42"})
        >>> blob.content_type, blob.metadata
        ('text/css', {'build': '42'})
    """
    custom: Dict[str, Any] = {}
    for key, value in metadata.items():
        if key in BLOB_PROPERTIES:
            setattr(blob, key, value)
        elif key == "metadata" and isinstance(value, Mapping):
            custom.update(value)
        else:
            custom[key] = value

    if custom:
        blob.metadata = custom


class GcsManager:
    """Storage client and bucket handle shared by every upload of a run.

    The client is created once from the publish configuration. Each call to
    ``open_write_channel`` works on a fresh Blob, so channels for different
    files share nothing mutable.

    Attributes:
        storage_client: GCS storage client
        bucket: Bucket handle uploads are made into
        bucket_name: Name of the bucket
    """

    def __init__(
        self, config: PublishConfig, storage_client: Optional[storage.Client] = None
    ) -> None:
        """Create the storage client and bucket handle.

        Args:
            config: Validated publish configuration
            storage_client: Pre-built client to use instead of building one

        Raises:
            ConfigurationError: If the client cannot be built from the
                configured credentials
        """
        self.storage_client = (
            storage_client if storage_client is not None else self.build_client(config)
        )
        self.bucket_name = config.bucket
        self.bucket = self.storage_client.bucket(config.bucket)

    @staticmethod
    def build_client(config: PublishConfig) -> storage.Client:
        """Build a storage client from the configured credentials.

        A key file takes the service-account JSON path. Inline credentials
        may be service-account info (a mapping) or a ready google.auth
        credentials object. ``client_kwargs`` are passed to the client as-is.

        Raises:
            ConfigurationError: If the key file or credentials are unusable
        """
        try:
            if config.key_filename:
                logger.debug(f"Loading service account key file {config.key_filename}")
                return storage.Client.from_service_account_json(
                    config.key_filename,
                    project=config.project_id,
                    **config.client_kwargs,
                )

            credentials = config.credentials
            if isinstance(credentials, Mapping):
                credentials = service_account.Credentials.from_service_account_info(
                    dict(credentials)
                )
            return storage.Client(
                project=config.project_id,
                credentials=credentials,
                **config.client_kwargs,
            )
        except (OSError, ValueError, TypeError, google_auth_exceptions.GoogleAuthError) as e:
            logger.error(f"Unable to create GCS client: {e}")
            raise ConfigurationError(f"Unable to create GCS client: {e}") from e

    def open_write_channel(
        self, destination: str, metadata: Mapping[str, Any], public: bool = False
    ) -> WriteChannel:
        """Open a non-resumable write channel for one object.

        Args:
            destination: Destination key in the bucket
            metadata: Resolved metadata for the object
            public: Request the publicRead predefined ACL for this upload

        Returns:
            WriteChannel that uploads on close
        """
        blob = self.bucket.blob(destination)
        apply_metadata(blob, metadata)
        return WriteChannel(blob, destination, simple_upload_options(blob, public))
