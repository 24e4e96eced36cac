"""Tests for TOML config file loading."""

from pathlib import Path

import pytest

from gcspublish.config.config_file import canonical_options, load_config_file, merge_options
from gcspublish.config.config_validator import validate_config
from gcspublish.exceptions import ConfigurationError


@pytest.fixture
def config_toml(temp_dir: Path) -> Path:
    config_file = temp_dir / "publish.toml"
    config_file.write_text(
        'bucket = "static-assets"\n'
        'projectId = "my-project"\n'
        'keyFilename = "/secrets/key.json"\n'
        'base = "assets/"\n'
        "public = true\n"
        "\n"
        "[metadata]\n"
        'cache_control = "public, max-age=3600"\n'
        "\n"
        "[client_kwargs]\n"
        'client_info = "ignored-by-tests"\n'
    )
    return config_file


def test_load_config_file(config_toml: Path) -> None:
    options = load_config_file(config_toml)

    assert options["bucket"] == "static-assets"
    assert options["project_id"] == "my-project"
    assert options["key_filename"] == "/secrets/key.json"
    assert options["public"] is True
    assert options["metadata"] == {"cache_control": "public, max-age=3600"}


def test_loaded_file_validates(config_toml: Path) -> None:
    config = validate_config(load_config_file(config_toml))

    assert config.base == "assets/"
    assert config.client_kwargs == {"client_info": "ignored-by-tests"}


def test_load_missing_file(temp_dir: Path) -> None:
    with pytest.raises(ConfigurationError, match="Unable to load config file"):
        load_config_file(temp_dir / "missing.toml")


def test_load_invalid_toml(temp_dir: Path) -> None:
    broken = temp_dir / "broken.toml"
    broken.write_text("bucket = \n")

    with pytest.raises(ConfigurationError, match="Unable to load config file"):
        load_config_file(broken)


def test_canonical_options_renames_aliases() -> None:
    assert canonical_options({"projectId": "p", "keyFilename": "k", "bucket": "b"}) == {
        "project_id": "p",
        "key_filename": "k",
        "bucket": "b",
    }


def test_merge_options_overrides_and_skips_none() -> None:
    merged = merge_options(
        {"bucket": "a", "projectId": "p", "base": "x/"},
        {"bucket": "b", "project_id": None, "base": None},
    )

    assert merged == {"bucket": "b", "project_id": "p", "base": "x/"}


def test_merge_options_merges_metadata() -> None:
    merged = merge_options(
        {"metadata": {"cache_control": "no-cache", "team": "web"}},
        {"metadata": {"team": "platform"}},
    )

    assert merged["metadata"] == {"cache_control": "no-cache", "team": "platform"}


def test_merge_options_keeps_false_override() -> None:
    merged = merge_options({"public": True}, {"public": False})

    assert merged["public"] is False
