"""Tests for tag_catalog.io_utils module."""
from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from tag_catalog.io_utils import dump_json, load_json, read_text, save_json
from tag_catalog.tag_types import TagFileError


class TestReadText:
    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "tags.txt"
        path.write_bytes("[A]\n進撃の巨人\n".encode("utf-8"))
        assert read_text(path) == "[A]\n進撃の巨人\n"

    def test_keeps_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "tags.txt"
        path.write_bytes(b"[A]\r\nx\r\n")
        assert read_text(path) == "[A]\r\nx\r\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TagFileError, match="file not found") as excinfo:
            read_text(tmp_path / "missing.txt")
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(TagFileError):
            read_text(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "tags.txt"
        path.write_bytes(b"[A]\n\xff\xfe\n")
        with pytest.raises(TagFileError, match="UTF-8"):
            read_text(path)


class TestJson:
    def test_dump_keeps_non_ascii(self) -> None:
        raw = dump_json({"tags": ["進撃の巨人"]})
        assert "進撃の巨人".encode("utf-8") in raw
        assert raw.endswith(b"\n")

    def test_dump_sort_keys(self) -> None:
        raw = dump_json({"b": 1, "a": 2}, pretty=False, sort_keys=True)
        assert raw == b'{"a":2,"b":1}\n'

    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "groups.json"
        save_json([{"name": "A", "tags": ["x"]}], path)
        assert load_json(path) == [{"name": "A", "tags": ["x"]}]
        assert orjson.loads(path.read_bytes())[0]["name"] == "A"
