"""URL heuristics for the transport/container of a stream."""

from __future__ import annotations

from ..models import StreamType


def detect_stream_type(url: str) -> StreamType:
    # Substring matches anywhere in the URL, not extension checks. First match wins.
    if ".m3u8" in url or "m3u8" in url:
        return StreamType.HLS
    if ".mpd" in url or "dash" in url:
        return StreamType.DASH
    if ".ism" in url or "smoothstreaming" in url:
        return StreamType.SMOOTH_STREAMING
    if url.startswith("rtmp://"):
        return StreamType.RTMP
    if url.startswith("rtsp://"):
        return StreamType.RTSP
    return StreamType.AUTO
