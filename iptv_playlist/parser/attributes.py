"""Grammar for the text that follows ``#EXTINF:``.

An entry line looks like ``#EXTINF:<duration> key="value" ...,<title>``. Attributes are
``word(-word)*="..."`` pairs found anywhere after the duration token; values cannot
contain escaped quotes. Keys are lower-cased and later duplicates win. The title is the
text after the first comma that does not sit inside an attribute value, with every
matched ``key="value"`` literal cut out.
"""

from __future__ import annotations

import re
from typing import Dict, List, NamedTuple, Optional, Tuple

ATTRIBUTE_PATTERN = re.compile(r'(\w+(?:-\w+)*)="([^"]*)"', re.ASCII)
DURATION_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
WHITESPACE_RUN = re.compile(r"\s+")

UNKNOWN_TITLE = "Unknown Channel"
UNKNOWN_DURATION = -1.0

HEADER_SEPARATOR = "|"
COOKIE_SEPARATOR = ";"


class ExtInfFields(NamedTuple):
    duration: float
    title: str
    attributes: Dict[str, str]


def parse_duration(token: str) -> float:
    """Plain decimal or exponent notation only; ``inf``, ``nan`` and ``1_0`` are unknown."""

    if not DURATION_PATTERN.fullmatch(token):
        return UNKNOWN_DURATION
    return float(token)


def split_duration(content: str) -> Tuple[float, str]:
    """Returns the duration and the attribute-bearing remainder of an entry line.

    The duration comes from the text before the first comma; only its first
    whitespace-delimited token is read, and anything unparsable becomes ``-1.0``.
    A line that opens directly with an attribute has no duration token at all.
    """

    remainder = content.lstrip()
    if ATTRIBUTE_PATTERN.match(remainder):
        return UNKNOWN_DURATION, remainder

    head = remainder.split(",", 1)[0]
    token = head.split(None, 1)[0] if head.strip() else ""
    return parse_duration(token), remainder[len(token):]


def extract_attributes(text: str) -> Tuple[Dict[str, str], List[str]]:
    """Scans ``text`` for ``key="value"`` pairs.

    Returns the attribute mapping plus the matched literals in order of appearance so
    the title deriver can strip them.
    """

    attributes: Dict[str, str] = {}
    literals: List[str] = []
    for match in ATTRIBUTE_PATTERN.finditer(text):
        attributes[match.group(1).lower()] = match.group(2)
        literals.append(match.group(0))
    return attributes, literals


def title_text(text: str) -> Optional[str]:
    """Returns the text after the first comma outside any ``key="value"`` literal."""

    start = 0
    for match in ATTRIBUTE_PATTERN.finditer(text):
        comma = text.find(",", start, match.start())
        if comma != -1:
            return text[comma + 1:]
        start = match.end()
    comma = text.find(",", start)
    return text[comma + 1:] if comma != -1 else None


def derive_title(text: str, literals: List[str]) -> str:
    title = title_text(text)
    if title is None:
        return UNKNOWN_TITLE
    for literal in literals:
        # Plain substring removal: identical text inside the title goes too.
        title = title.replace(literal, "")
    title = WHITESPACE_RUN.sub(" ", title).strip()
    return title or UNKNOWN_TITLE


def parse_extinf_fields(content: str) -> ExtInfFields:
    """Parses everything after ``#EXTINF:`` into duration, title and attributes."""

    duration, remainder = split_duration(content)
    attributes, literals = extract_attributes(remainder)
    return ExtInfFields(duration, derive_title(remainder, literals), attributes)


def _split_pairs(value: Optional[str], separator: str, assignment: str) -> Dict[str, str]:
    if not value:
        return {}
    pairs: Dict[str, str] = {}
    for segment in value.split(separator):
        parts = segment.split(assignment, 1)
        if len(parts) != 2:
            continue
        pairs[parts[0].strip()] = parts[1].strip()
    return pairs


def parse_headers(value: Optional[str]) -> Dict[str, str]:
    """Decodes ``Key: Value|Key: Value``; segments without a colon are dropped."""

    return _split_pairs(value, HEADER_SEPARATOR, ":")


def parse_cookies(value: Optional[str]) -> Dict[str, str]:
    """Decodes ``name=value; name=value``; segments without ``=`` are dropped."""

    return _split_pairs(value, COOKIE_SEPARATOR, "=")


def build_request_headers(attributes: Dict[str, str]) -> Dict[str, str]:
    headers = parse_headers(attributes.get("http-headers"))
    if "user-agent" in attributes:
        headers["User-Agent"] = attributes["user-agent"]
    if "referrer" in attributes:
        headers["Referer"] = attributes["referrer"]
    return headers
