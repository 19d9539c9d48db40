"""HTTP transport for DRM license servers."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import aiohttp
import requests

DEFAULT_USER_AGENT = "IPTV Playlist Player"
DEFAULT_TIMEOUT = 10

LICENSE_HEADERS_TEMPLATE: Dict[str, str] = {
    "user-agent": DEFAULT_USER_AGENT,
    "accept": "*/*",
}


class LicenseRequestError(Exception):
    """Raised when a license server answers with a non-success status."""

    def __init__(self, url: str, status: int) -> None:
        super().__init__(f"License server {url} answered with HTTP {status}")
        self.url = url
        self.status = status


class HttpClient:
    """Posts key and provisioning requests, synchronously or from an event loop."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self.timeout = timeout
        self._headers = LICENSE_HEADERS_TEMPLATE.copy()
        self._headers["user-agent"] = user_agent
        self._session = requests.Session()
        self._session.headers.update(self._headers)

    def post_license(self, url: str, body: bytes, headers: Optional[Dict[str, str]] = None) -> bytes:
        """POST ``body`` to a license or provisioning endpoint and return the raw reply."""

        try:
            response = self._session.post(
                url,
                data=body,
                headers=headers or {},
                timeout=self.timeout,
                allow_redirects=True,
            )
        except requests.RequestException as exc:  # pragma: no cover - network errors
            logging.error("License request to %s failed: %s", url, exc)
            raise

        if not response.ok:
            logging.error("License server %s rejected the request (status %s).", url, response.status_code)
            raise LicenseRequestError(url, response.status_code)
        return response.content

    async def post_license_async(
        self, url: str, body: bytes, headers: Optional[Dict[str, str]] = None
    ) -> bytes:
        """Asynchronously POST ``body``; used by the background offline-license jobs."""

        merged = self._headers.copy()
        merged.update(headers or {})
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout, headers=merged) as session:
            async with session.post(url, data=body) as resp:
                if resp.status >= 400:
                    raise LicenseRequestError(url, resp.status)
                return await resp.read()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
