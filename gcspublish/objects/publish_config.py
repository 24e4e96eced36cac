"""Publish configuration model.

This module defines the immutable configuration handed to ``gcs_publish``:
the target bucket and project, the credentials to pass through to the
storage client, and the options that shape each upload. Options meant for
``google.cloud.storage.Client`` itself travel in the explicit
``client_kwargs`` map instead of being mixed in with publish options.
"""
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gcspublish.exceptions import ConfigurationError

REDACTED = "***"


def _lookup(data: Mapping[str, Any], name: str, alias: Optional[str] = None) -> Any:
    value = data.get(name)
    if not value and alias:
        value = data.get(alias)
    return value


class PublishConfig(BaseModel):
    """Configuration for publishing files to a GCS bucket.

    Fields accept both their Python names and the camelCase aliases
    (``projectId``, ``keyFilename``, ``transformPath``). Unknown fields are
    rejected; pass storage client options through ``client_kwargs``.

    Attributes:
        bucket: Name of the bucket files are uploaded into
        project_id: Google Cloud project id
        key_filename: Path to a service account key file
        credentials: Service account info mapping or a google.auth credentials
            object, used instead of ``key_filename``
        base: Prefix prepended to every destination key
        public: Upload objects with the ``publicRead`` predefined ACL
        metadata: Extra blob metadata merged into every upload
        transform_path: Callable mapping a SourceFile to its destination key,
            replacing the default path normalization
        client_kwargs: Keyword arguments forwarded to ``storage.Client``

    Example:
        >>> config = PublishConfig(
        ...     bucket="static-assets",
        ...     projectId="my-project",
        ...     keyFilename="/secrets/key.json",
        ...     base="/assets",
        ...     metadata={"cache_control": "public, max-age=3600"},
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    bucket: str
    project_id: str = Field(alias="projectId")
    key_filename: Optional[str] = Field(default=None, alias="keyFilename")
    credentials: Optional[Any] = None
    base: Optional[str] = None
    public: bool = False
    metadata: Dict[str, Any] = Field(default_factory=dict)
    transform_path: Optional[Callable[[Any], str]] = Field(default=None, alias="transformPath")
    client_kwargs: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def check_required_fields(cls, data: Any) -> Any:
        """Fail with ConfigurationError before any field parsing happens.

        ConfigurationError is not a ValueError, so pydantic lets it propagate
        unwrapped to the caller.
        """
        if not isinstance(data, Mapping):
            return data

        if not data.get("bucket"):
            raise ConfigurationError("Bucket name must be specified via `bucket`")

        key_filename = _lookup(data, "key_filename", "keyFilename")
        credentials = data.get("credentials")
        if not (key_filename or credentials):
            raise ConfigurationError("credentials must be specified")
        if key_filename and credentials:
            raise ConfigurationError(
                "Specify either `credentials` or `keyFilename`, not both"
            )

        if not _lookup(data, "project_id", "projectId"):
            raise ConfigurationError("projectId must be specified")

        return data

    @field_validator("metadata", "client_kwargs", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    def display_dict(self) -> Dict[str, Any]:
        """Configuration as a plain dict, safe to print.

        Credentials are redacted and the path transform is shown by name.
        """
        data = self.model_dump(exclude={"credentials", "transform_path"})
        data["credentials"] = REDACTED if self.credentials is not None else None
        data["transform_path"] = (
            getattr(self.transform_path, "__name__", repr(self.transform_path))
            if self.transform_path is not None
            else None
        )
        return data
