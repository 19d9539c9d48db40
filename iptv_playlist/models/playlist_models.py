"""Intermediate records produced while scanning a playlist."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .channel_models import DrmConfig


class ParsedEntry(BaseModel):
    """One ``#EXTINF`` item (or bare URL line) before it becomes a Channel.

    ``url`` stays empty only while the entry waits for its URL line.
    """

    duration: float = -1.0
    title: str
    url: str = ""
    attributes: Dict[str, str] = Field(default_factory=dict)

    logo_url: Optional[str] = None
    group_title: Optional[str] = None
    language: Optional[str] = None
    country: Optional[str] = None
    id: Optional[str] = None
    epg_id: Optional[str] = None
    resolution: Optional[str] = None
    codec: Optional[str] = None

    headers: Dict[str, str] = Field(default_factory=dict)
    cookies: Dict[str, str] = Field(default_factory=dict)
    user_agent: Optional[str] = None
    referrer: Optional[str] = None
    drm_config: Optional[DrmConfig] = None
