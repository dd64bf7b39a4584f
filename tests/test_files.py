"""Tests for output path derivation and atomic document writes."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tagcloud.cloud import files
from tagcloud.cloud.files import derive_output_path, write_document
from tagcloud.errors import OutputPathInvalidError, OutputWriteError

DATA = Path("data")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("cloud", DATA / "cloud.html"),
        ("cloud.txt", DATA / "cloud.html"),
        ("reports/2024/cloud.txt", DATA / "cloud.html"),
        ("C:\\Users\\me\\cloud.html", DATA / "cloud.html"),
        ("archive.tar.gz", DATA / "archive.tar.html"),
        ("../up/level", DATA / "level.html"),
        ("  padded.md  ", DATA / "padded.html"),
    ],
)
def test_derive_output_path(name: str, expected: Path) -> None:
    assert derive_output_path(name, DATA) == expected


@pytest.mark.parametrize("name", ["", "   ", "dir/", ".html", "dir/.hidden"])
def test_derive_output_path_rejects_empty_stem(name: str) -> None:
    with pytest.raises(OutputPathInvalidError):
        derive_output_path(name, DATA)


def test_derive_output_path_uses_given_directory(tmp_path: Path) -> None:
    assert derive_output_path("x/y.txt", tmp_path) == tmp_path / "y.html"


def test_write_document_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "out" / "cloud.html"
    assert write_document(target, "<html></html>\n") == target
    assert target.read_text(encoding="utf-8") == "<html></html>\n"
    assert sorted(p.name for p in target.parent.iterdir()) == ["cloud.html"]


def test_write_document_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "cloud.html"
    target.write_text("old", encoding="utf-8")
    write_document(target, "new")
    assert target.read_text(encoding="utf-8") == "new"


def test_write_document_parent_is_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(OutputWriteError):
        write_document(blocker / "cloud.html", "text")


def test_failed_replace_leaves_nothing_behind(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_replace(src: str, dst: str) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr(files.os, "replace", failing_replace)
    target = tmp_path / "cloud.html"
    with pytest.raises(OutputWriteError):
        write_document(target, "text")

    assert os.listdir(tmp_path) == []
