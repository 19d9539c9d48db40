"""Filesystem helpers for storing offline DRM key material."""

from __future__ import annotations

import os
import re
from pathlib import Path

INVALID_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|]")


def sanitize_filename(value: str, default: str = "file") -> str:
    """Removes characters that are invalid on most filesystems."""

    sanitized = INVALID_FILENAME_CHARS.sub("", value or "").strip()
    return sanitized or default


def ensure_directory(path: str) -> str:
    """Creates a directory (and its parents) if needed."""

    Path(path).mkdir(parents=True, exist_ok=True)
    return path


def build_offline_key_path(directory: str, name: str) -> str:
    """Returns ``<directory>/<name>.json`` with ``name`` made filesystem safe."""

    safe_name = sanitize_filename(name, default="offline_key")
    if not safe_name.lower().endswith(".json"):
        safe_name = f"{safe_name}.json"
    return os.path.join(ensure_directory(directory), safe_name)
