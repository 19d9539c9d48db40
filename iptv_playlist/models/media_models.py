"""Playback-facing descriptions handed to the media engine."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .channel_models import DrmScheme


class MediaMetadata(BaseModel):
    title: Optional[str] = None
    artwork_uri: Optional[str] = None
    genre: Optional[str] = None


class DrmConfiguration(BaseModel):
    """License settings the player needs to open a protected stream."""

    scheme: DrmScheme
    key_system: str
    license_uri: Optional[str] = None
    license_request_headers: Dict[str, str] = Field(default_factory=dict)
    key_set_id: Optional[bytes] = None


class MediaItem(BaseModel):
    uri: str
    media_id: Optional[str] = None
    metadata: MediaMetadata = Field(default_factory=MediaMetadata)
    drm_configuration: Optional[DrmConfiguration] = None
