"""Tests for destination key normalization."""

import pytest

from gcspublish.objects.source_file import SourceFile
from gcspublish.transform.path_normalizer import normalize_base, normalize_path


@pytest.fixture
def file_css() -> SourceFile:
    return SourceFile(path="/test/file.css", base="/test/", contents=b"x")


@pytest.mark.unit
@pytest.mark.parametrize("base", ["", None])
def test_no_base_uses_relative_path(base, file_css: SourceFile) -> None:
    assert normalize_path(base, file_css) == "file.css"


@pytest.mark.unit
@pytest.mark.parametrize("base", ["/test", "test/", "/test/", "test"])
def test_base_variants_normalize_to_same_key(base: str, file_css: SourceFile) -> None:
    assert normalize_path(base, file_css) == "test/file.css"


@pytest.mark.unit
def test_normalize_base_is_idempotent() -> None:
    once = normalize_base("/test")

    assert normalize_base(once) == once == "test/"


@pytest.mark.unit
def test_only_one_leading_separator_stripped(file_css: SourceFile) -> None:
    assert normalize_path("//test", file_css) == "/test/file.css"


@pytest.mark.unit
def test_root_base(file_css: SourceFile) -> None:
    assert normalize_path("/", file_css) == "file.css"


@pytest.mark.unit
def test_nested_relative_path() -> None:
    f = SourceFile(path="/build/css/site.css", base="/build/", contents=b"x")

    assert normalize_path("static/v1", f) == "static/v1/css/site.css"
