"""Data models for playlist entries, channels, DRM, and playback items."""

from .channel_models import Channel, DrmConfig, DrmScheme, StreamType
from .media_models import DrmConfiguration, MediaItem, MediaMetadata
from .playlist_models import ParsedEntry

__all__ = [
    "Channel",
    "DrmConfig",
    "DrmScheme",
    "StreamType",
    "ParsedEntry",
    "MediaItem",
    "MediaMetadata",
    "DrmConfiguration",
]
