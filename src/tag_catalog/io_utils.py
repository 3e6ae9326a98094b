"""I/O utilities for catalog text files and JSON output.

Catalog files are read whole as UTF-8 text; failures surface as
TagFileError. JSON goes through orjson, which keeps non-ASCII tags
verbatim.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from tag_catalog.tag_types import TagFileError


def read_text(path: Path) -> str:
    """Read an entire catalog file as UTF-8 text.

    Newlines are left untranslated; the parser splits on every line
    boundary itself.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise TagFileError(path, "file not found") from exc
    except IsADirectoryError as exc:
        raise TagFileError(path, "is a directory") from exc
    except OSError as exc:
        raise TagFileError(path, exc.strerror or str(exc)) from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TagFileError(path, f"not valid UTF-8 ({exc.reason})") from exc


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    return orjson.loads(path.read_bytes())


def dump_json(obj: Any, *, pretty: bool = True, sort_keys: bool = False) -> bytes:
    """Serialize an object to JSON bytes, newline-terminated."""
    opts = orjson.OPT_APPEND_NEWLINE
    if pretty:
        opts |= orjson.OPT_INDENT_2
    if sort_keys:
        opts |= orjson.OPT_SORT_KEYS
    return orjson.dumps(obj, option=opts)


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dump_json(obj, pretty=pretty))
