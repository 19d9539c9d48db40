"""Channel records, stream types, and DRM configuration."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class StreamType(str, Enum):
    AUTO = "AUTO"
    HLS = "HLS"
    DASH = "DASH"
    SMOOTH_STREAMING = "SMOOTH_STREAMING"
    PROGRESSIVE_HTTP = "PROGRESSIVE_HTTP"
    RTMP = "RTMP"
    RTSP = "RTSP"


class DrmScheme(str, Enum):
    NONE = "NONE"
    WIDEVINE = "WIDEVINE"
    PLAYREADY = "PLAYREADY"
    CLEARKEY = "CLEARKEY"


class DrmConfig(BaseModel):
    """DRM settings attached to a channel.

    ``key_id``/``key`` describe key-server material while ``clear_key_id``/``clear_key``
    carry inline clear-key material. ``headers`` and the offline fields are filled in by
    downstream flows, never by the playlist parser.
    """

    scheme: DrmScheme
    license_url: Optional[str] = None
    key_id: Optional[str] = None
    key: Optional[str] = None
    clear_key_id: Optional[str] = None
    clear_key: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    is_offline_key: bool = False
    offline_key_path: Optional[str] = None


class Channel(BaseModel):
    """A playable channel produced from one parsed playlist entry."""

    id: int = 0
    playlist_id: int = 0
    name: str
    url: str
    logo_url: Optional[str] = None
    group: Optional[str] = None
    tvg_id: Optional[str] = None
    epg_id: Optional[str] = None
    duration: float = -1.0
    attributes: Dict[str, str] = Field(default_factory=dict)

    stream_type: StreamType = StreamType.AUTO
    drm_config: Optional[DrmConfig] = None

    headers: Dict[str, str] = Field(default_factory=dict)
    cookies: Dict[str, str] = Field(default_factory=dict)
    user_agent: Optional[str] = None
    referrer: Optional[str] = None

    language: Optional[str] = None
    country: Optional[str] = None
    resolution: Optional[str] = None
    codec: Optional[str] = None

    # Playback and UI state, owned by the persistence layer once stored.
    is_enabled: bool = True
    is_favorite: bool = False
    sort_order: int = 0
    is_offline_available: bool = False
    offline_path: Optional[str] = None
    last_played_position: int = 0
    last_played_timestamp: int = 0
