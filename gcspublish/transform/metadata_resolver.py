"""Per-file blob metadata resolution.

Keys of the resolved map are ``google.cloud.storage.Blob`` property names
(``content_type``, ``content_encoding``, ``cache_control``...). Keys that are
not Blob properties end up as custom object metadata at upload time.
"""
import mimetypes
import re
from typing import Any, Dict, Mapping, Optional

from gcspublish.objects.source_file import SourceFile

GZIP_EXTENSION = ".gz"
GZIP_SUFFIX_RE = re.compile(r"\.gz$")


def resolve_metadata(
    file: SourceFile, extra_metadata: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """Compute the blob metadata for a file.

    The content type is looked up with a trailing ``.gz`` removed, so
    ``site.css.gz`` is served as ``text/css`` with ``gzip`` content encoding.
    Caller metadata is applied first and the computed fields on top of it.

    Args:
        file: File record being published
        extra_metadata: Caller-supplied metadata merged into the result

    Returns:
        Metadata dict for the upload

    Example:
        >>> resolve_metadata(SourceFile(path="/b/site.css.gz", base="/b/"))
        {'content_type': 'text/css', 'content_encoding': 'gzip'}
    """
    metadata: Dict[str, Any] = dict(extra_metadata or {})

    content_type, _ = mimetypes.guess_type(GZIP_SUFFIX_RE.sub("", file.path))
    if content_type:
        metadata["content_type"] = content_type

    if file.extname == GZIP_EXTENSION:
        metadata["content_encoding"] = "gzip"

    return metadata
