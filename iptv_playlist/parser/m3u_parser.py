"""Turns M3U/M3U8 playlist text into ParsedEntry and Channel records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..models import Channel, ParsedEntry
from .attributes import build_request_headers, parse_cookies, parse_extinf_fields
from .drm_resolver import resolve_drm_config
from .line_classifier import EXTINF_TAG, LineKind, PlaylistLine, iter_lines
from .stream_type import detect_stream_type
from .url_resolver import resolve_url, title_from_url

TVG_ID = "tvg-id"
TVG_LOGO = "tvg-logo"
TVG_COUNTRY = "tvg-country"
TVG_LANGUAGE = "tvg-language"
GROUP_TITLE = "group-title"
USER_AGENT = "user-agent"
REFERRER = "referrer"
CODEC = "codec"
RESOLUTION = "resolution"
HTTP_COOKIES = "http-cookies"


@dataclass(frozen=True)
class Start:
    """Nothing seen yet."""


@dataclass(frozen=True)
class Idle:
    extended: bool


@dataclass(frozen=True)
class AwaitingUrl:
    entry: ParsedEntry
    extended: bool


ScanState = Union[Start, Idle, AwaitingUrl]


def parse_extinf(line: str) -> ParsedEntry:
    """Builds a pending entry (empty ``url``) from a full ``#EXTINF:`` line."""

    fields = parse_extinf_fields(line[len(EXTINF_TAG):])
    attributes = fields.attributes
    return ParsedEntry(
        duration=fields.duration,
        title=fields.title,
        url="",
        attributes=attributes,
        logo_url=attributes.get(TVG_LOGO),
        group_title=attributes.get(GROUP_TITLE),
        language=attributes.get(TVG_LANGUAGE),
        country=attributes.get(TVG_COUNTRY),
        id=attributes.get(TVG_ID),
        epg_id=attributes.get(TVG_ID),
        resolution=attributes.get(RESOLUTION),
        codec=attributes.get(CODEC),
        headers=build_request_headers(attributes),
        cookies=parse_cookies(attributes.get(HTTP_COOKIES)),
        user_agent=attributes.get(USER_AGENT),
        referrer=attributes.get(REFERRER),
        drm_config=resolve_drm_config(attributes),
    )


def _is_extended(state: ScanState) -> bool:
    if isinstance(state, Start):
        return False
    return state.extended


def step(
    state: ScanState, line: PlaylistLine, base_url: Optional[str] = None
) -> Tuple[ScanState, Optional[ParsedEntry]]:
    """Advances the scanner by one line, returning the new state and any finished entry."""

    extended = _is_extended(state)

    if line.kind is LineKind.HEADER:
        if isinstance(state, AwaitingUrl):
            return AwaitingUrl(state.entry, extended=True), None
        return Idle(extended=True), None

    if line.kind is LineKind.ENTRY:
        if isinstance(state, AwaitingUrl):
            logging.debug("Dropping entry %r: next #EXTINF arrived before a URL", state.entry.title)
        return AwaitingUrl(parse_extinf(line.text), extended), None

    if line.kind is LineKind.COMMENT:
        return state, None

    url = resolve_url(line.text, base_url)
    if isinstance(state, AwaitingUrl):
        return Idle(extended), state.entry.model_copy(update={"url": url})
    if extended:
        return state, ParsedEntry(title=title_from_url(url), url=url)
    logging.debug("Ignoring URL line outside an extended playlist: %s", line.text)
    return state, None


def iter_entries(content: str, base_url: Optional[str] = None) -> Iterator[ParsedEntry]:
    state: ScanState = Start()
    for line in iter_lines(content):
        state, entry = step(state, line, base_url)
        if entry is not None:
            yield entry
    if isinstance(state, AwaitingUrl):
        logging.debug("Dropping entry %r: playlist ended before its URL", state.entry.title)


def parse_playlist(content: str, base_url: Optional[str] = None) -> List[ParsedEntry]:
    """Parses playlist text into entries, in source order. Never raises on text input."""

    return list(iter_entries(content, base_url))


def entry_to_channel(entry: ParsedEntry, sort_order: int, playlist_id: int = 0) -> Channel:
    return Channel(
        playlist_id=playlist_id,
        name=entry.title,
        url=entry.url,
        logo_url=entry.logo_url,
        group=entry.group_title,
        tvg_id=entry.id,
        epg_id=entry.epg_id,
        duration=entry.duration,
        attributes=dict(entry.attributes),
        stream_type=detect_stream_type(entry.url),
        drm_config=entry.drm_config,
        headers=dict(entry.headers),
        cookies=dict(entry.cookies),
        user_agent=entry.user_agent,
        referrer=entry.referrer,
        language=entry.language,
        country=entry.country,
        resolution=entry.resolution,
        codec=entry.codec,
        sort_order=sort_order,
    )


def to_channels(entries: Iterable[ParsedEntry], playlist_id: int = 0) -> List[Channel]:
    """Maps entries to channels 1:1; ``sort_order`` is the 0-based position."""

    return [entry_to_channel(entry, index, playlist_id) for index, entry in enumerate(entries)]


class M3UParser:
    """Stateless facade over the playlist functions; safe to share between threads."""

    def parse(self, content: str, base_url: Optional[str] = None) -> List[ParsedEntry]:
        entries = parse_playlist(content, base_url)
        logging.debug("Parsed %s entries", len(entries))
        return entries

    def parse_file(self, path: str, base_url: Optional[str] = None) -> List[ParsedEntry]:
        with open(path, "r", encoding="utf-8", errors="ignore") as handle:
            content = handle.read()
        return self.parse(content, base_url)

    def to_channels(self, entries: Iterable[ParsedEntry], playlist_id: int = 0) -> List[Channel]:
        return to_channels(entries, playlist_id)
