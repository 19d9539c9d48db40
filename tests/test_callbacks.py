import json

import pytest

from iptv_playlist.drm.callbacks import (
    HttpMediaDrmCallback,
    InlineClearKeyCallback,
    KeyRequest,
    OfflineClearKeyCallback,
    ProvisionRequest,
    build_clear_key_response,
)
from iptv_playlist.drm.key_systems import KeySystem


def test_clear_key_response_document():
    assert json.loads(build_clear_key_response("kid", "key")) == {
        "keys": [{"kty": "oct", "kid": "kid", "k": "key"}],
        "type": "temporary",
    }


def test_inline_callback_needs_no_provisioning():
    callback = InlineClearKeyCallback("kid", "key")

    assert callback.execute_provision_request(KeySystem.CLEARKEY, ProvisionRequest(b"x", "https://p")) == b""


def test_offline_callback_rejects_invalid_json():
    callback = OfflineClearKeyCallback("not json")

    with pytest.raises(ValueError):
        callback.execute_key_request(KeySystem.CLEARKEY, KeyRequest(b""))


def test_offline_callback_rejects_non_object_json():
    with pytest.raises(ValueError):
        OfflineClearKeyCallback("[1, 2]").execute_key_request(KeySystem.CLEARKEY, KeyRequest(b""))


def test_http_callback_falls_back_to_request_url(fake_http_client):
    callback = HttpMediaDrmCallback("", {}, fake_http_client)

    callback.execute_key_request(KeySystem.WIDEVINE, KeyRequest(b"c", license_server_url="https://from-pssh"))

    assert fake_http_client.calls[0][0] == "https://from-pssh"


def test_http_callback_without_any_url_raises(fake_http_client):
    callback = HttpMediaDrmCallback("", {}, fake_http_client)

    with pytest.raises(ValueError):
        callback.execute_key_request(KeySystem.WIDEVINE, KeyRequest(b"c"))


def test_configured_headers_override_defaults(fake_http_client):
    callback = HttpMediaDrmCallback("https://lic", {"Content-Type": "application/x-custom"}, fake_http_client)

    callback.execute_key_request(KeySystem.WIDEVINE, KeyRequest(b"c"))

    assert fake_http_client.calls[0][2]["Content-Type"] == "application/x-custom"


def test_http_provisioning_appends_signed_request(fake_http_client):
    callback = HttpMediaDrmCallback("https://lic", {}, fake_http_client)

    callback.execute_provision_request(KeySystem.WIDEVINE, ProvisionRequest(b"abc", "https://prov/?a=1"))

    url, body, _ = fake_http_client.calls[0]
    assert url == "https://prov/?a=1&signedRequest=abc"
    assert body == b""
