"""gcspublish CLI application entry point.

This module provides the Click CLI interface for gcspublish, which uploads a
build output directory to a Google Cloud Storage bucket. It handles option
and config file loading, validation, logging setup and command dispatch.
"""
import importlib.metadata
from typing import Dict, Optional, Tuple

import click
from dotenv import find_dotenv, load_dotenv

from gcspublish.commands.upload import upload
from gcspublish.commands.validate_config import validate_config_command
from gcspublish.console import brand, info
from gcspublish.logging_config import setup_logging


def parse_metadata(
    ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]
) -> Optional[Dict[str, str]]:
    """Turn repeated ``KEY=VALUE`` options into a dict."""
    if not values:
        return None

    metadata: Dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", ctx=ctx, param=param)
        metadata[key.strip()] = value
    return metadata


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging (DEBUG level)",
)
@click.option(
    "--log-file",
    type=click.Path(),
    help="Write logs to file",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
    help="TOML file with publish options",
    envvar="GCSP_CONFIG",
)
@click.option(
    "--bucket",
    type=str,
    help="Bucket files are uploaded into",
    envvar="GCSP_BUCKET",
)
@click.option(
    "--project-id",
    type=str,
    help="Google Cloud project ID",
    envvar="GCSP_PROJECT_ID",
)
@click.option(
    "--key-filename",
    type=click.Path(dir_okay=False),
    help="Service account key file",
    envvar="GCSP_KEY_FILENAME",
)
@click.option(
    "--base",
    type=str,
    help="Prefix prepended to every destination key",
    envvar="GCSP_BASE",
)
@click.option(
    "--public/--private",
    default=None,
    help="Upload objects as publicly readable",
)
@click.option(
    "--metadata",
    "-m",
    multiple=True,
    metavar="KEY=VALUE",
    callback=parse_metadata,
    help="Extra metadata for every object (repeatable)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_file: str,
    config_file: Optional[str],
    bucket: Optional[str],
    project_id: Optional[str],
    key_filename: Optional[str],
    base: Optional[str],
    public: Optional[bool],
    metadata: Optional[Dict[str, str]],
) -> None:
    """Publish files to a Google Cloud Storage bucket.

    Options given on the command line override those read from --config.
    The configuration is validated when a command first needs it, so
    `--help` works without one.
    """
    logger = setup_logging(verbose=verbose, log_file=log_file)
    ctx.ensure_object(dict)
    ctx.obj["logger"] = logger
    ctx.obj["CONFIG_FILE"] = config_file
    ctx.obj["OPTIONS"] = {
        "bucket": bucket,
        "project_id": project_id,
        "key_filename": key_filename,
        "base": base,
        "public": public,
        "metadata": metadata,
    }


cli.add_command(upload)
cli.add_command(validate_config_command)


def start_cli() -> click.Group:
    """Load .env settings, show the banner and run the CLI."""
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file)

    brand("gcspublish")
    info(f"Version: {importlib.metadata.version('gcs-publish')}")
    if env_file:
        info(f"Configuration loaded from: {env_file}")

    return cli(obj={})  # type: ignore


if __name__ == "__main__":
    start_cli()
