"""Loading publish options from a TOML file.

Top-level keys are configuration fields; ``[metadata]`` and
``[client_kwargs]`` tables map to the matching dict fields::

    bucket = "static-assets"
    projectId = "my-project"
    keyFilename = "/secrets/key.json"
    base = "assets/"
    public = true

    [metadata]
    cache_control = "public, max-age=3600"
"""
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import toml

from gcspublish.exceptions import ConfigurationError

FIELD_ALIASES = {
    "projectId": "project_id",
    "keyFilename": "key_filename",
    "transformPath": "transform_path",
}


def canonical_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename camelCase option aliases to their field names."""
    return {FIELD_ALIASES.get(key, key): value for key, value in options.items()}


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Read publish options from a TOML file.

    Args:
        config_path: Path of the TOML file

    Returns:
        Options mapping with field names, not yet validated

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        return canonical_options(toml.load(config_path))
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigurationError(f"Unable to load config file {config_path}: {e}") from e


def merge_options(
    file_options: Mapping[str, Any], overrides: Mapping[str, Any]
) -> Dict[str, Any]:
    """Overlay command-line options on file options.

    None values in ``overrides`` mean "not given" and leave the file value in
    place. The ``metadata`` maps are merged key by key.

    Example:
        >>> merge_options({"bucket": "a", "projectId": "p"}, {"bucket": "b", "base": None})
        {'bucket': 'b', 'project_id': 'p'}
    """
    merged = canonical_options(file_options)
    for key, value in canonical_options(overrides).items():
        if value is None:
            continue
        if key == "metadata":
            merged["metadata"] = {**(merged.get("metadata") or {}), **value}
        else:
            merged[key] = value
    return merged
