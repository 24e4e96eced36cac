"""Validation of publish configuration at setup time."""
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from gcspublish.exceptions import ConfigurationError
from gcspublish.logging_config import get_logger
from gcspublish.objects.publish_config import PublishConfig

logger = get_logger(__name__)


def validate_config(
    options: Optional[Union[PublishConfig, Mapping[str, Any]]],
) -> PublishConfig:
    """Validate publish options and return an immutable PublishConfig.

    Required: a bucket name, exactly one of ``keyFilename`` / ``credentials``,
    and a project id. Nothing is constructed when validation fails.

    Args:
        options: A PublishConfig, a mapping of options, or None

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the configuration is missing or invalid

    Example:
        >>> validate_config({"bucket": "b", "projectId": "p", "keyFilename": "/k.json"}).bucket
        'b'
    """
    if options is None:
        raise ConfigurationError("Missing configuration object")

    if isinstance(options, PublishConfig):
        return options

    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping or PublishConfig, got {type(options).__name__}"
        )

    try:
        config = PublishConfig(**options)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid publish configuration\n{e}") from e

    logger.debug(f"Validated configuration for bucket {config.bucket}")
    return config
