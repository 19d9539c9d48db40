"""Background download and release of persistent (offline) licenses."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
import threading
from typing import Awaitable, Callable, List, Optional, Union

from ..models import DrmConfig, DrmScheme, MediaItem
from ..utils.file_utils import build_offline_key_path
from ..utils.http_client import HttpClient
from .callbacks import content_type_for
from .key_systems import key_system_for

DownloadCallback = Callable[[Optional[bytes]], None]
ReleaseCallback = Callable[[bool], None]


def _license_kids(drm_config: DrmConfig) -> List[str]:
    kid = drm_config.key_id or drm_config.clear_key_id
    return [kid] if kid else []


def build_license_request(drm_config: DrmConfig, request_type: str, key_set_id: Optional[bytes] = None) -> bytes:
    payload = {"kids": _license_kids(drm_config), "type": request_type}
    if key_set_id is not None:
        payload["keySetId"] = base64.urlsafe_b64encode(key_set_id).rstrip(b"=").decode("ascii")
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


class OfflineLicenseHelper:
    """Fire-and-forget license jobs; results arrive through callbacks, never exceptions.

    Each job runs its own event loop on a daemon thread and cannot be cancelled.
    """

    def __init__(self, http_client: Optional[HttpClient] = None) -> None:
        self._http_client = http_client or HttpClient()

    def download_license(
        self, drm_config: DrmConfig, media_item: MediaItem, callback: DownloadCallback
    ) -> Optional[threading.Thread]:
        if drm_config.scheme is DrmScheme.NONE or not drm_config.license_url:
            callback(None)
            return None
        body = build_license_request(drm_config, "persistent-license")
        return self._start(self._download(drm_config, media_item, body, callback), "offline-license-download")

    def release_license(
        self,
        key_set_id: bytes,
        drm_config: DrmConfig,
        callback: Optional[ReleaseCallback] = None,
    ) -> Optional[threading.Thread]:
        if drm_config.scheme is DrmScheme.NONE or not drm_config.license_url:
            logging.warning("Cannot release offline license without a license URL")
            if callback:
                callback(False)
            return None
        body = build_license_request(drm_config, "license-release", key_set_id)
        return self._start(self._release(drm_config, body, callback), "offline-license-release")

    def _start(self, job: Awaitable[None], name: str) -> threading.Thread:
        thread = threading.Thread(target=asyncio.run, args=(job,), name=name, daemon=True)
        thread.start()
        return thread

    def _headers(self, drm_config: DrmConfig) -> dict:
        headers = {"Content-Type": content_type_for(key_system_for(drm_config.scheme))}
        headers.update(drm_config.headers)
        return headers

    async def _download(
        self, drm_config: DrmConfig, media_item: MediaItem, body: bytes, callback: DownloadCallback
    ) -> None:
        try:
            key_set_id = await self._http_client.post_license_async(
                drm_config.license_url, body, self._headers(drm_config)
            )
        except Exception as exc:
            logging.error("Offline license download for %s failed: %s", media_item.uri, exc)
            callback(None)
            return
        if not key_set_id:
            logging.error("License server returned an empty offline license for %s", media_item.uri)
            callback(None)
            return
        logging.info("Downloaded offline license for %s (%s bytes)", media_item.uri, len(key_set_id))
        callback(key_set_id)

    async def _release(self, drm_config: DrmConfig, body: bytes, callback: Optional[ReleaseCallback]) -> None:
        try:
            await self._http_client.post_license_async(drm_config.license_url, body, self._headers(drm_config))
        except Exception as exc:
            logging.error("Releasing offline license at %s failed: %s", drm_config.license_url, exc)
            released = False
        else:
            released = True
        if callback:
            callback(released)


def store_offline_key(drm_config: DrmConfig, key_data: Union[str, bytes], directory: str, name: str) -> DrmConfig:
    """Writes clear-key material to disk and returns a config that points at it."""

    path = build_offline_key_path(directory, name)
    text = key_data.decode("utf-8") if isinstance(key_data, bytes) else key_data
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
    logging.debug("Saved offline key material to %s", path)
    return drm_config.model_copy(update={"is_offline_key": True, "offline_key_path": path})
