"""Parsing and DRM session decisions for IPTV M3U playlists."""

from .parser import M3UParser, parse_playlist, to_channels

__all__ = ["M3UParser", "parse_playlist", "to_channels"]
