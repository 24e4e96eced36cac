"""Destination key computation for uploaded files."""
from typing import Optional

from gcspublish.objects.source_file import SourceFile

SEPARATOR = "/"


def normalize_base(base: Optional[str]) -> str:
    """Normalize a configured key prefix.

    Ensures one trailing separator and strips a single leading one. An empty
    or missing base stays empty.

    Example:
        >>> normalize_base("/assets")
        'assets/'
    """
    if not base:
        return ""
    if not base.endswith(SEPARATOR):
        base += SEPARATOR
    if base.startswith(SEPARATOR):
        base = base[len(SEPARATOR):]
    return base


def normalize_path(base: Optional[str], file: SourceFile) -> str:
    """Build the destination key of a file under a configured base.

    Args:
        base: Configured key prefix, may be empty or None
        file: File record whose relative path is appended

    Returns:
        Destination key without a leading separator

    Example:
        >>> normalize_path("/test/", SourceFile(path="/src/file.css", base="/src/"))
        'test/file.css'
    """
    return normalize_base(base) + file.relative
