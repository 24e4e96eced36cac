from pathlib import Path
from typing import List, Optional

import click
from rich.markup import escape

from gcspublish.commands.context import get_config
from gcspublish.console import error, info, newline, success, uploaded, warning
from gcspublish.exceptions import ConfigurationError
from gcspublish.objects.source_file import SourceFile
from gcspublish.objects.source_file_scanner import SourceFileScanner
from gcspublish.transform.upload_transform import PublishTransform


@click.command(name="upload")
@click.argument(
    "source_dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, readable=True, path_type=Path),
)
@click.option(
    "--pattern",
    default="*",
    show_default=True,
    help="Only upload files matching this glob",
)
@click.option(
    "--exclude",
    default=None,
    help="Skip files matching this glob",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of concurrent uploads",
)
@click.pass_context
def upload(
    ctx: click.Context,
    source_dir: Path,
    pattern: str,
    exclude: Optional[str],
    workers: Optional[int],
) -> None:
    """Upload the files in SOURCE_DIR to the storage bucket."""

    config = get_config(ctx)

    transform = ctx.obj.get("TRANSFORM")
    if transform is None:
        try:
            transform = PublishTransform(config)
        except ConfigurationError as e:
            error(f"Failed to create GCS client: {e}")
            ctx.abort()
        ctx.obj["TRANSFORM"] = transform

    scanner = SourceFileScanner(source_dir, pattern, exclude)
    files: List[SourceFile] = list(scanner.source_files())

    if len(files) == 0:
        warning(f"No files matched {pattern!r} in {source_dir}")
        return

    info(f"Uploading {len(files)} files to gs://{config.bucket}...")
    newline()

    failures = 0
    for result in transform.publish_all(files, max_workers=workers):
        if result.error is not None:
            failures += 1
            error(f"Failed: {escape(result.file.relative)}: {escape(str(result.error))}")
        elif result.destination is not None:
            uploaded(result.destination)

    newline()
    if failures:
        error(f"{failures} of {len(files)} uploads failed, check output")
        ctx.exit(1)

    success(f"Uploaded {len(files)} files to gs://{config.bucket}")
