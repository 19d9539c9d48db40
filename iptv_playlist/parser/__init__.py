"""Playlist grammar: line classification, attributes, URLs, and entry aggregation."""

from .m3u_parser import M3UParser, parse_playlist, to_channels
from .stream_type import detect_stream_type
from .url_resolver import resolve_url

__all__ = ["M3UParser", "parse_playlist", "to_channels", "detect_stream_type", "resolve_url"]
