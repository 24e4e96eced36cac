"""Per-request options for the simple (non-resumable) upload call.

Public uploads carry the ``publicRead`` predefined ACL on the upload request
itself. The options are built per blob and handed to that blob's write
channel only, so nothing about the storage client changes for other callers.
"""
from typing import Any, Dict

from google.cloud import storage  # type: ignore[attr-defined]

PUBLIC_READ_ACL = "publicRead"


def simple_upload_options(blob: storage.Blob, public: bool) -> Dict[str, Any]:
    """Build keyword arguments for ``Blob.upload_from_file``.

    Args:
        blob: Blob the upload targets
        public: Whether the object should be publicly readable

    Returns:
        ``predefined_acl`` and, when the blob has a known generation,
        ``if_generation_match``; empty for private uploads

    Example:
        >>> simple_upload_options(bucket.blob("index.html"), public=True)
        {'predefined_acl': 'publicRead'}
    """
    options: Dict[str, Any] = {}
    if not public:
        return options

    options["predefined_acl"] = PUBLIC_READ_ACL
    # precondition only when the generation is known
    if blob.generation is not None:
        options["if_generation_match"] = blob.generation
    return options
