"""Key-request callbacks that answer a CDM's license and provisioning requests."""

from __future__ import annotations

import json
from typing import Dict, NamedTuple, Optional

from ..utils.http_client import HttpClient
from .key_systems import KeySystem

PLAYREADY_SOAP_ACTION = "http://schemas.microsoft.com/DRM/2007/03/protocols/AcquireLicense"


class KeyRequest(NamedTuple):
    data: bytes
    license_server_url: str = ""


class ProvisionRequest(NamedTuple):
    data: bytes
    default_url: str


class MediaDrmCallback:
    """Interface the playback engine calls when the CDM needs a license."""

    def execute_provision_request(self, key_system: KeySystem, request: ProvisionRequest) -> bytes:
        raise NotImplementedError

    def execute_key_request(self, key_system: KeySystem, request: KeyRequest) -> bytes:
        raise NotImplementedError


def build_clear_key_response(key_id: str, key: str) -> bytes:
    """JSON Web Key set answering a clear-key license request."""

    payload = {
        "keys": [{"kty": "oct", "kid": key_id, "k": key}],
        "type": "temporary",
    }
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def content_type_for(key_system: KeySystem) -> str:
    if key_system is KeySystem.PLAYREADY:
        return "text/xml"
    if key_system is KeySystem.CLEARKEY:
        return "application/json"
    return "application/octet-stream"


class HttpMediaDrmCallback(MediaDrmCallback):
    """Forwards requests to a license server over HTTP."""

    def __init__(self, license_url: str, headers: Optional[Dict[str, str]], http_client: HttpClient) -> None:
        self.license_url = license_url
        self.headers = dict(headers or {})
        self._http_client = http_client

    def execute_provision_request(self, key_system: KeySystem, request: ProvisionRequest) -> bytes:
        url = f"{request.default_url}&signedRequest={request.data.decode('utf-8', errors='replace')}"
        return self._http_client.post_license(url, b"", headers={"Content-Type": "application/json"})

    def execute_key_request(self, key_system: KeySystem, request: KeyRequest) -> bytes:
        url = self.license_url or request.license_server_url
        if not url:
            raise ValueError("No license URL configured for the key request")

        headers = {"Content-Type": content_type_for(key_system)}
        if key_system is KeySystem.PLAYREADY:
            headers["SOAPAction"] = PLAYREADY_SOAP_ACTION
        headers.update(self.headers)
        return self._http_client.post_license(url, request.data, headers=headers)


class InlineClearKeyCallback(MediaDrmCallback):
    """Answers clear-key requests from key material embedded in the playlist."""

    def __init__(self, key_id: str, key: str) -> None:
        self.key_id = key_id
        self.key = key

    def execute_provision_request(self, key_system: KeySystem, request: ProvisionRequest) -> bytes:
        return b""

    def execute_key_request(self, key_system: KeySystem, request: KeyRequest) -> bytes:
        return build_clear_key_response(self.key_id, self.key)


class OfflineClearKeyCallback(MediaDrmCallback):
    """Answers clear-key requests with a key set read from local storage."""

    def __init__(self, key_data: str) -> None:
        self.key_data = key_data

    def execute_provision_request(self, key_system: KeySystem, request: ProvisionRequest) -> bytes:
        return b""

    def execute_key_request(self, key_system: KeySystem, request: KeyRequest) -> bytes:
        try:
            key_set = json.loads(self.key_data)
        except json.JSONDecodeError as exc:
            raise ValueError("Failed to parse offline ClearKey data") from exc
        if not isinstance(key_set, dict):
            raise ValueError("Offline ClearKey data must be a JSON object")
        return json.dumps(key_set, separators=(",", ":")).encode("utf-8")
