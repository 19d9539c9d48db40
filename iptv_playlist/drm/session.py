"""Chooses how a DRM session is built for a channel at playback time.

The decision is a plain function of the channel's :class:`DrmConfig`:

* no config (or ``NONE``) -> :data:`DRM_UNSUPPORTED`
* Widevine / PlayReady -> capability probe, then an HTTP license-server session
* ClearKey -> offline key file, inline key material, or an HTTP license-server
  session, in that order of preference

Every failure along the way degrades to :data:`DRM_UNSUPPORTED`; nothing here raises
to the caller. The offline and HTTP branches may block, so call this off the UI thread.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..models import Channel, DrmConfig, DrmConfiguration, DrmScheme, MediaItem, MediaMetadata
from ..utils.http_client import HttpClient
from .callbacks import (
    HttpMediaDrmCallback,
    InlineClearKeyCallback,
    KeyRequest,
    MediaDrmCallback,
    OfflineClearKeyCallback,
    ProvisionRequest,
)
from .key_systems import KeySystem, key_system_for

CapabilityProbe = Callable[[KeySystem], bool]


class DrmUnsupportedError(Exception):
    """Raised when a request is sent through the unsupported sentinel."""


class DrmSessionManager:
    """A key system paired with the callback that obtains its licenses."""

    def __init__(self, key_system: Optional[KeySystem], callback: Optional[MediaDrmCallback]) -> None:
        self.key_system = key_system
        self.callback = callback

    @property
    def is_supported(self) -> bool:
        return self.key_system is not None and self.callback is not None

    def acquire_license(self, request: KeyRequest) -> bytes:
        if not self.is_supported:
            raise DrmUnsupportedError("DRM is not supported for this stream")
        return self.callback.execute_key_request(self.key_system, request)

    def provision(self, request: ProvisionRequest) -> bytes:
        if not self.is_supported:
            raise DrmUnsupportedError("DRM is not supported for this stream")
        return self.callback.execute_provision_request(self.key_system, request)

    def __repr__(self) -> str:
        if not self.is_supported:
            return "DrmSessionManager(unsupported)"
        return f"DrmSessionManager({self.key_system.identifier}, {type(self.callback).__name__})"


DRM_UNSUPPORTED = DrmSessionManager(None, None)


class DrmHandler:
    """Builds DRM sessions and protected media items for channels."""

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        capability_probe: Optional[CapabilityProbe] = None,
        supported_key_systems: Optional[Iterable[KeySystem]] = None,
    ) -> None:
        self._http_client = http_client or HttpClient()
        if supported_key_systems is None:
            self.supported_key_systems = frozenset(KeySystem)
        else:
            self.supported_key_systems = frozenset(supported_key_systems)
        self._capability_probe = capability_probe or self._default_probe

    def create_session_manager(self, drm_config: Optional[DrmConfig]) -> DrmSessionManager:
        if drm_config is None or drm_config.scheme is DrmScheme.NONE:
            return DRM_UNSUPPORTED
        try:
            return self._create_session_manager(drm_config)
        except Exception as exc:
            logging.warning("Falling back to unsupported DRM for %s: %s", drm_config.scheme.value, exc)
            return DRM_UNSUPPORTED

    def _create_session_manager(self, drm_config: DrmConfig) -> DrmSessionManager:
        scheme = drm_config.scheme
        if scheme in (DrmScheme.WIDEVINE, DrmScheme.PLAYREADY):
            key_system = key_system_for(scheme)
            if not self.is_scheme_supported(key_system):
                logging.warning("%s is not supported on this device", key_system.identifier)
                return DRM_UNSUPPORTED
            return self._create_http_session_manager(key_system, drm_config)
        if scheme is DrmScheme.CLEARKEY:
            return self._create_clear_key_session_manager(drm_config)
        raise ValueError(f"Unhandled DRM scheme {scheme.value}")

    def _create_clear_key_session_manager(self, drm_config: DrmConfig) -> DrmSessionManager:
        if drm_config.is_offline_key and drm_config.offline_key_path:
            return self._create_offline_clear_key_session_manager(drm_config.offline_key_path)
        if drm_config.clear_key_id and drm_config.clear_key:
            callback = InlineClearKeyCallback(drm_config.clear_key_id, drm_config.clear_key)
            return DrmSessionManager(KeySystem.CLEARKEY, callback)
        return self._create_http_session_manager(KeySystem.CLEARKEY, drm_config)

    def _create_offline_clear_key_session_manager(self, key_path: str) -> DrmSessionManager:
        try:
            with open(key_path, "r", encoding="utf-8") as handle:
                key_data = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            logging.warning("Offline ClearKey file %s is unavailable: %s", key_path, exc)
            return DRM_UNSUPPORTED
        return DrmSessionManager(KeySystem.CLEARKEY, OfflineClearKeyCallback(key_data))

    def _create_http_session_manager(self, key_system: KeySystem, drm_config: DrmConfig) -> DrmSessionManager:
        callback = HttpMediaDrmCallback(drm_config.license_url or "", drm_config.headers, self._http_client)
        return DrmSessionManager(key_system, callback)

    def is_scheme_supported(self, key_system: KeySystem) -> bool:
        try:
            return bool(self._capability_probe(key_system))
        except Exception as exc:
            logging.warning("Capability probe for %s failed: %s", key_system.identifier, exc)
            return False

    def _default_probe(self, key_system: KeySystem) -> bool:
        return key_system in self.supported_key_systems

    def create_protected_media_item(self, url: str, drm_config: Optional[DrmConfig]) -> MediaItem:
        """Describes ``url`` together with the license settings the player needs."""

        if drm_config is None or drm_config.scheme is DrmScheme.NONE:
            return MediaItem(uri=url)

        configuration = DrmConfiguration(
            scheme=drm_config.scheme,
            key_system=key_system_for(drm_config.scheme).identifier,
            license_uri=drm_config.license_url,
            license_request_headers=dict(drm_config.headers),
        )
        if drm_config.scheme is DrmScheme.CLEARKEY and drm_config.clear_key_id and drm_config.clear_key:
            configuration.key_set_id = f"{drm_config.clear_key_id}:{drm_config.clear_key}".encode("utf-8")
        return MediaItem(uri=url, drm_configuration=configuration)

    def build_media_item(self, channel: Channel) -> MediaItem:
        metadata = MediaMetadata(title=channel.name, artwork_uri=channel.logo_url, genre=channel.group)
        item = self.create_protected_media_item(channel.url, channel.drm_config)
        return item.model_copy(update={"media_id": str(channel.id), "metadata": metadata})
