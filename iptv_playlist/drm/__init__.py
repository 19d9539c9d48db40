"""DRM session selection, license callbacks, and offline license handling."""

from .callbacks import (
    HttpMediaDrmCallback,
    InlineClearKeyCallback,
    KeyRequest,
    MediaDrmCallback,
    OfflineClearKeyCallback,
    ProvisionRequest,
)
from .key_systems import KeySystem, key_system_for
from .offline import OfflineLicenseHelper, store_offline_key
from .session import DRM_UNSUPPORTED, DrmHandler, DrmSessionManager, DrmUnsupportedError

__all__ = [
    "DRM_UNSUPPORTED",
    "DrmHandler",
    "DrmSessionManager",
    "DrmUnsupportedError",
    "KeySystem",
    "key_system_for",
    "KeyRequest",
    "ProvisionRequest",
    "MediaDrmCallback",
    "HttpMediaDrmCallback",
    "InlineClearKeyCallback",
    "OfflineClearKeyCallback",
    "OfflineLicenseHelper",
    "store_offline_key",
]
