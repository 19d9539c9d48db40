"""Splits playlist text into classified, trimmed lines."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple

M3U_HEADER = "#EXTM3U"
EXTINF_TAG = "#EXTINF:"
COMMENT_PREFIX = "#"


class LineKind(Enum):
    HEADER = "header"
    ENTRY = "entry"
    COMMENT = "comment"
    URL = "url"


class PlaylistLine(NamedTuple):
    kind: LineKind
    text: str


def classify_line(line: str) -> LineKind:
    """Tags an already trimmed, non-blank line by its syntactic role."""

    if line.startswith(M3U_HEADER):
        return LineKind.HEADER
    if line.startswith(EXTINF_TAG):
        return LineKind.ENTRY
    if line.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    return LineKind.URL


def iter_lines(content: str) -> Iterator[PlaylistLine]:
    """Yields every non-blank line of ``content``, stripped and classified."""

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        yield PlaylistLine(classify_line(line), line)
