"""Core types for the tag catalog parser.

Type hierarchy:
  Group                Named, ordered collection of tag strings
  ParserOptions        Behavior switches for the parse pass (loaded from JSON)
  TagCatalogError      Base of every error raised by this package
  TagFileError         Catalog file missing, unreadable or not UTF-8
  MalformedHeaderError Header line without its closing bracket

All records are frozen dataclasses with slots=True; a parse result is a
tuple of Group and never mutated after it is returned.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import orjson

# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Group:
    """A named group of tags (e.g., ``[Generic]`` and the lines below it)."""

    name: str               # Trimmed header interior; "" only for an unnamed tail
    tags: tuple[str, ...]   # Verbatim tag lines, in source order, duplicates kept

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "tags": list(self.tags)}


# ---------------------------------------------------------------------------
# ParserOptions
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Behavior switches for a parse pass.

    keep_unnamed_tail:
        Emit the final accumulator even when it never received a name.
        Header-less input then yields a single group named ``""``. Off by
        default: the trailing accumulator is emitted only when named.
    reset_on_parse:
        Clear previously parsed groups at the start of ``parse()``. With
        this off, every extra ``parse()`` call appends the same groups again.
    """

    keep_unnamed_tail: bool = False
    reset_on_parse: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParserOptions:
        """Build options from a mapping; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown parser option(s): {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, bool):
                raise ValueError(
                    f"Parser option {key!r} must be a boolean, got {value!r}"
                )
        return cls(**data)

    @classmethod
    def from_json(cls, path: Path) -> ParserOptions:
        """Load from a parser options JSON file."""
        data = orjson.loads(path.read_bytes())
        if not isinstance(data, dict):
            raise ValueError(f"Parser options in {path} must be a JSON object")
        return cls.from_dict(data)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TagCatalogError(Exception):
    """Base class for tag catalog failures."""


class TagFileError(TagCatalogError, OSError):
    """A catalog file could not be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read tag catalog {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedHeaderError(TagCatalogError, ValueError):
    """A line opened a header with ``[`` but never closed it with ``]``."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"Malformed group header on line {line_number}: {line!r} "
            "(missing closing ']')"
        )
        self.line_number = line_number
        self.line = line
