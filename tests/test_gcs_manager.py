"""Tests for GcsManager."""

from unittest.mock import Mock, patch

import pytest
from google.auth import exceptions as google_auth_exceptions
from google.cloud import storage

from gcspublish.bucket.gcs_manager import GcsManager, apply_metadata
from gcspublish.bucket.write_channel import WriteChannel
from gcspublish.exceptions import ConfigurationError
from gcspublish.objects.publish_config import PublishConfig


@patch("gcspublish.bucket.gcs_manager.storage.Client")
def test_client_from_key_file(mock_client_class: Mock) -> None:
    config = PublishConfig(
        bucket="assets",
        projectId="my-project",
        keyFilename="/secrets/key.json",
        client_kwargs={"client_info": "ci"},
    )

    manager = GcsManager(config)

    mock_client_class.from_service_account_json.assert_called_once_with(
        "/secrets/key.json", project="my-project", client_info="ci"
    )
    client = mock_client_class.from_service_account_json.return_value
    client.bucket.assert_called_once_with("assets")
    assert manager.bucket is client.bucket.return_value
    assert manager.bucket_name == "assets"


@patch("gcspublish.bucket.gcs_manager.service_account.Credentials")
@patch("gcspublish.bucket.gcs_manager.storage.Client")
def test_client_from_service_account_info(
    mock_client_class: Mock, mock_credentials_class: Mock
) -> None:
    info = {"type": "service_account", "client_email": "ci@example.com"}
    config = PublishConfig(bucket="assets", projectId="my-project", credentials=info)

    GcsManager(config)

    mock_credentials_class.from_service_account_info.assert_called_once_with(info)
    mock_client_class.assert_called_once_with(
        project="my-project",
        credentials=mock_credentials_class.from_service_account_info.return_value,
    )


@patch("gcspublish.bucket.gcs_manager.storage.Client")
def test_client_from_credentials_object(mock_client_class: Mock) -> None:
    credentials = object()
    config = PublishConfig(bucket="assets", projectId="my-project", credentials=credentials)

    GcsManager(config)

    mock_client_class.assert_called_once_with(project="my-project", credentials=credentials)


@patch("gcspublish.bucket.gcs_manager.storage.Client")
def test_missing_key_file_is_configuration_error(mock_client_class: Mock) -> None:
    mock_client_class.from_service_account_json.side_effect = FileNotFoundError("no such file")
    config = PublishConfig(bucket="assets", projectId="p", keyFilename="/missing.json")

    with pytest.raises(ConfigurationError, match="Unable to create GCS client"):
        GcsManager(config)


@patch("gcspublish.bucket.gcs_manager.storage.Client")
def test_auth_error_is_configuration_error(mock_client_class: Mock) -> None:
    mock_client_class.side_effect = google_auth_exceptions.DefaultCredentialsError("bad")
    config = PublishConfig(bucket="assets", projectId="p", credentials=object())

    with pytest.raises(ConfigurationError):
        GcsManager(config)


def test_open_write_channel(gcs_manager: GcsManager, mock_gcs_client: Mock) -> None:
    channel = gcs_manager.open_write_channel(
        "test/file.css", {"content_type": "text/css"}, public=False
    )

    assert isinstance(channel, WriteChannel)
    assert channel.destination == "test/file.css"
    assert channel.blob.content_type == "text/css"
    assert channel.upload_options == {}
    mock_gcs_client.bucket.return_value.blob.assert_called_once_with("test/file.css")


def test_open_public_write_channel(gcs_manager: GcsManager) -> None:
    channel = gcs_manager.open_write_channel("index.html", {}, public=True)

    assert channel.upload_options == {"predefined_acl": "publicRead"}


def test_channels_use_separate_blobs(gcs_manager: GcsManager) -> None:
    first = gcs_manager.open_write_channel("a.css", {"content_type": "text/css"})
    second = gcs_manager.open_write_channel("b.js", {"content_type": "text/javascript"})

    assert first.blob is not second.blob
    assert first.blob.content_type == "text/css"


def test_apply_metadata_splits_properties_and_custom_metadata() -> None:
    blob = Mock(spec=storage.Blob)
    blob.metadata = None

    apply_metadata(
        blob,
        {
            "content_type": "text/css",
            "content_encoding": "gzip",
            "cache_control": "no-cache",
            "build": "42",
            "metadata": {"team": "web"},
        },
    )

    assert blob.content_type == "text/css"
    assert blob.content_encoding == "gzip"
    assert blob.cache_control == "no-cache"
    assert blob.metadata == {"build": "42", "team": "web"}


def test_apply_metadata_leaves_custom_metadata_unset() -> None:
    blob = Mock(spec=storage.Blob)
    blob.metadata = None

    apply_metadata(blob, {"content_type": "text/css"})

    assert blob.metadata is None
