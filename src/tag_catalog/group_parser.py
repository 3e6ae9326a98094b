"""Group parser for line-oriented tag catalogs.

Reads text such as::

    # full-line comment
    [Generic]
    red_hair female dress
    dancing fire smile   # inline comment

    [IDs]
    102349

and produces one Group per bracketed header, holding the header's tag
lines in order. Each retained line is one tag; lines are never split on
whitespace.

Single pass:
    1. Split on universal newlines; skip blank and full-line ``#`` lines.
    2. Strip inline comments (first ``#`` onward) and trim.
    3. ``[Name]`` closes the current group and opens a new one; any other
       line is a tag of the current group, or an orphan before the first
       named header (discarded).
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from tag_catalog.io_utils import read_text
from tag_catalog.tag_types import Group, MalformedHeaderError, ParserOptions

log = logging.getLogger(__name__)

_COMMENT = "#"
_HEADER_OPEN = "["
_HEADER_CLOSE = "]"

# Universal newlines only: \r\n, \r, \n. Other Unicode line breaks stay in the tag.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------


def _is_skippable(raw_line: str) -> bool:
    """True for blank lines and full-line comments."""
    stripped = raw_line.lstrip()
    return not stripped or stripped.startswith(_COMMENT)


def _strip_inline_comment(raw_line: str) -> str:
    """Drop everything from the first ``#`` onward, then trim."""
    return raw_line.split(_COMMENT, 1)[0].strip()


def _header_name(line: str, line_number: int) -> str:
    """Return the trimmed interior of a ``[Name]`` header line."""
    if len(line) < 2 or not line.endswith(_HEADER_CLOSE):
        raise MalformedHeaderError(line_number, line)
    return line[1:-1].strip()


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_groups(
    text: str,
    options: ParserOptions | None = None,
) -> tuple[Group, ...]:
    """Parse catalog text into groups, in header order.

    Raises:
        MalformedHeaderError: a line starting with ``[`` does not end with
            ``]`` once its inline comment is removed.
    """
    opts = options or ParserOptions()
    groups: list[Group] = []
    name = ""
    tags: list[str] = []
    orphans = 0

    for idx, raw_line in enumerate(_LINE_BREAK_RE.split(text)):
        if _is_skippable(raw_line):
            continue
        line = _strip_inline_comment(raw_line)
        line_number = idx + 1

        if line.startswith(_HEADER_OPEN):
            if name:
                groups.append(Group(name=name, tags=tuple(tags)))
            name = _header_name(line, line_number)
            tags = []
            if not name:
                log.debug("Line %d: header has an empty name", line_number)
            continue

        if not name:
            orphans += 1
            log.debug("Line %d: discarding orphan tag %r", line_number, line)
            continue
        tags.append(line)

    if name or opts.keep_unnamed_tail:
        groups.append(Group(name=name, tags=tuple(tags)))

    log.debug(
        "Parsed %d groups (%d orphan tag lines discarded)", len(groups), orphans
    )
    return tuple(groups)


class GroupParser:
    """Parser instance owning one catalog buffer and its parsed groups.

    ``construct_from_text`` parses immediately; ``construct_from_path`` only
    loads the file, so ``parse()`` must be called before ``groups()`` is
    populated. Not safe for concurrent use.
    """

    def __init__(self, text: str, options: ParserOptions | None = None) -> None:
        self._text = text
        self._options = options or ParserOptions()
        self._groups: list[Group] = []

    @classmethod
    def construct_from_path(
        cls, path: Path | str, options: ParserOptions | None = None
    ) -> GroupParser:
        """Load a catalog file without parsing it.

        Raises:
            TagFileError: the file is missing, unreadable or not UTF-8.
        """
        return cls(read_text(Path(path)), options)

    @classmethod
    def construct_from_text(
        cls, text: str, options: ParserOptions | None = None
    ) -> GroupParser:
        """Wrap catalog text and parse it straight away."""
        parser = cls(text, options)
        parser.parse()
        return parser

    from_path = construct_from_path
    from_text = construct_from_text

    @property
    def text(self) -> str:
        return self._text

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self) -> None:
        """Parse the buffer into groups.

        With ``reset_on_parse`` (the default) the previous result is
        replaced; otherwise the new groups are appended to it.
        """
        parsed = parse_groups(self._text, self._options)
        if self._options.reset_on_parse:
            self._groups = list(parsed)
        else:
            self._groups.extend(parsed)

    def groups(self) -> tuple[Group, ...]:
        """Groups from the parse passes so far (empty before ``parse()``)."""
        return tuple(self._groups)
