"""Maps ``drm-*`` / ``clear-key*`` attributes onto a DrmConfig."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..models import DrmConfig, DrmScheme

DRM_SCHEME = "drm-scheme"
DRM_LICENSE_URL = "drm-license-url"
DRM_KEY_ID = "drm-key-id"
DRM_KEY = "drm-key"
CLEAR_KEY_ID = "clear-key-id"
CLEAR_KEY = "clear-key"


def parse_drm_scheme(value: Optional[str]) -> Optional[DrmScheme]:
    if value is None:
        return None
    try:
        scheme = DrmScheme[value.upper()]
    except KeyError:
        logging.debug("Ignoring unknown DRM scheme %r", value)
        return None
    # Absence of DRM is represented by no config at all.
    if scheme is DrmScheme.NONE:
        return None
    return scheme


def resolve_drm_config(attributes: Dict[str, str]) -> Optional[DrmConfig]:
    """Returns a DrmConfig when ``drm-scheme`` names a known scheme, else ``None``."""

    scheme = parse_drm_scheme(attributes.get(DRM_SCHEME))
    if scheme is None:
        return None
    return DrmConfig(
        scheme=scheme,
        license_url=attributes.get(DRM_LICENSE_URL),
        key_id=attributes.get(DRM_KEY_ID),
        key=attributes.get(DRM_KEY),
        clear_key_id=attributes.get(CLEAR_KEY_ID),
        clear_key=attributes.get(CLEAR_KEY),
    )
