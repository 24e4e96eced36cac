"""Configuration lookup shared by the CLI commands."""
import click

from gcspublish.config.config_file import load_config_file, merge_options
from gcspublish.config.config_validator import validate_config
from gcspublish.exceptions import ConfigurationError
from gcspublish.logging_config import get_logger
from gcspublish.objects.publish_config import PublishConfig

logger = get_logger(__name__)


def get_config(ctx: click.Context) -> PublishConfig:
    """Validated configuration for the running command, built on first use.

    Combines the --config file with the group's command line options and
    caches the result in ``ctx.obj["CONFIG"]``.

    Raises:
        click.UsageError: If the file cannot be loaded or the configuration
            is invalid
    """
    config = ctx.obj.get("CONFIG")
    if config is not None:
        return config

    config_file = ctx.obj.get("CONFIG_FILE")
    try:
        file_options = load_config_file(config_file) if config_file else {}
        config = validate_config(merge_options(file_options, ctx.obj.get("OPTIONS") or {}))
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx)

    logger.debug(f"Publishing to bucket {config.bucket}")
    ctx.obj["CONFIG"] = config
    return config
