import json

import click

from gcspublish.commands.context import get_config
from gcspublish.console import info, success


@click.command(name="validate-config")
@click.pass_context
def validate_config_command(ctx: click.Context) -> None:
    """Validate and display the current configuration."""

    config = get_config(ctx)

    success("Configuration is valid")
    info(json.dumps(config.display_dict(), indent=2, default=str))
