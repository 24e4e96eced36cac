"""Publish build output files to a Google Cloud Storage bucket."""
from typing import Any, Mapping, Optional, Union

from gcspublish.bucket.gcs_manager import GcsManager
from gcspublish.config.config_validator import validate_config
from gcspublish.exceptions import ConfigurationError, GcsPublishError, UploadError
from gcspublish.objects.publish_config import PublishConfig
from gcspublish.objects.publish_result import PublishResult
from gcspublish.objects.source_file import LocalFileContents, SourceFile
from gcspublish.transform.upload_transform import PublishTransform


def gcs_publish(
    options: Optional[Union[PublishConfig, Mapping[str, Any]]] = None, **kwargs: Any
) -> PublishTransform:
    """Validate options and build the per-file upload transform.

    Args:
        options: PublishConfig or mapping of options
        **kwargs: Options merged over ``options`` when it is a mapping

    Returns:
        PublishTransform sharing one storage client across all files

    Raises:
        ConfigurationError: If the configuration is missing or invalid

    Example:
        >>> publish = gcs_publish(bucket="assets", projectId="my-project", keyFilename="key.json")
        >>> for result in publish.publish_all(files):
        ...     print(result.destination)
    """
    if kwargs:
        if isinstance(options, PublishConfig):
            raise ConfigurationError("Keyword options cannot be combined with a PublishConfig")
        options = {**(options or {}), **kwargs}

    config = validate_config(options)
    return PublishTransform(config, GcsManager(config))


__all__ = [
    "gcs_publish",
    "ConfigurationError",
    "GcsPublishError",
    "LocalFileContents",
    "PublishConfig",
    "PublishResult",
    "PublishTransform",
    "SourceFile",
    "UploadError",
]
