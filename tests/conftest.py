from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pytest

from iptv_playlist.sample_data import SAMPLE_M3U_CONTENT


class FakeHttpClient:
    """Stands in for HttpClient; records every license POST."""

    def __init__(self, response: bytes = b"license-bytes", error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Tuple[str, bytes, Dict[str, str]]] = []

    def post_license(self, url: str, body: bytes, headers: Optional[Dict[str, str]] = None) -> bytes:
        self.calls.append((url, body, dict(headers or {})))
        if self.error is not None:
            raise self.error
        return self.response

    async def post_license_async(self, url: str, body: bytes, headers: Optional[Dict[str, str]] = None) -> bytes:
        return self.post_license(url, body, headers)

    def close(self) -> None:
        pass


@pytest.fixture
def fake_http_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def http_client_factory():
    return FakeHttpClient


@pytest.fixture
def sample_playlist() -> str:
    return SAMPLE_M3U_CONTENT
