"""Resolution of playlist URL lines and titles for bare URL entries."""

from __future__ import annotations

import logging
import posixpath
from typing import Optional
from urllib.parse import urljoin, urlsplit

from .attributes import UNKNOWN_TITLE

ABSOLUTE_PREFIXES = ("http://", "https://", "rtmp://", "rtsp://")


def is_absolute(url: str) -> bool:
    return url.startswith(ABSOLUTE_PREFIXES)


def resolve_url(url: str, base_url: Optional[str] = None) -> str:
    """Resolves ``url`` against ``base_url`` unless it already carries a stream scheme.

    A missing or unusable base leaves the line untouched.
    """

    if is_absolute(url) or base_url is None:
        return url
    try:
        base = urlsplit(base_url)
        if not base.scheme:
            raise ValueError(f"base URL {base_url!r} has no scheme")
        return urljoin(base_url, url)
    except ValueError as exc:
        logging.debug("Keeping unresolved URL %s: %s", url, exc)
        return url


def title_from_url(url: str) -> str:
    """Derives a display title from the last path segment of ``url``.

    ``https://h/live/a.ts`` gives ``a``; a URL without a path segment gives its host.
    """

    try:
        parts = urlsplit(url)
    except ValueError:
        return UNKNOWN_TITLE
    if not parts.scheme or not parts.netloc:
        return UNKNOWN_TITLE

    filename = posixpath.basename(parts.path)
    if filename:
        stem = filename.rsplit(".", 1)[0]
        return stem or filename
    return parts.hostname or UNKNOWN_TITLE
