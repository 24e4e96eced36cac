"""Pytest fixtures and configuration."""

import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator
from unittest.mock import Mock

import pytest
from google.cloud import storage

from gcspublish.bucket.gcs_manager import GcsManager
from gcspublish.objects.publish_config import PublishConfig
from gcspublish.objects.source_file import SourceFile


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo setup_logging() changes made by CLI tests."""
    yield
    logger = logging.getLogger("gcspublish")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def example_options() -> Dict[str, Any]:
    """Minimal valid publish options, using the camelCase option names."""
    return {
        "bucket": "something",
        "projectId": "some-id",
        "keyFilename": "/path/to/something.json",
    }


@pytest.fixture
def example_config(example_options: Dict[str, Any]) -> PublishConfig:
    return PublishConfig(**example_options)


@pytest.fixture
def css_file() -> SourceFile:
    """A CSS file under /test/ with chunked contents."""
    return SourceFile(
        path="/test/file.css",
        base="/test/",
        contents=[b"stream", b"with", b"those", b"contents"],
    )


@pytest.fixture
def mock_gcs_client() -> Mock:
    """Mock Google Cloud Storage client whose bucket hands out fresh blobs."""
    client = Mock(spec=storage.Client)
    bucket = Mock(spec=storage.Bucket)
    bucket.name = "something"

    def make_blob(name: str) -> Mock:
        blob = Mock(spec=storage.Blob)
        blob.name = name
        blob.generation = None
        blob.metadata = None
        return blob

    client.bucket.return_value = bucket
    bucket.blob.side_effect = make_blob

    return client


@pytest.fixture
def gcs_manager(example_config: PublishConfig, mock_gcs_client: Mock) -> GcsManager:
    return GcsManager(example_config, storage_client=mock_gcs_client)
