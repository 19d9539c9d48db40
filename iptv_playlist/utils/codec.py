"""Versioned text codecs for values the persistence layer stores as columns.

String maps are written as an ordered list of ``[key, value]`` pairs so that no
reflection is needed to read them back::

    {"version": 1, "pairs": [["User-Agent", "VLC"], ["Referer", "https://a"]]}
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

from ..models import DrmConfig, DrmScheme

CODEC_VERSION = 1


class CodecError(ValueError):
    """Raised when a stored payload cannot be decoded."""


def _encode_pairs(mapping: Mapping[str, str]) -> List[List[str]]:
    return [[str(key), str(value)] for key, value in mapping.items()]


def _decode_pairs(pairs: Any) -> Dict[str, str]:
    if not isinstance(pairs, list):
        raise CodecError("pairs must be a list")
    result: Dict[str, str] = {}
    for pair in pairs:
        if not isinstance(pair, list) or len(pair) != 2 or not all(isinstance(item, str) for item in pair):
            raise CodecError(f"malformed pair: {pair!r}")
        result[pair[0]] = pair[1]
    return result


def _load(text: str) -> Dict[str, Any]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CodecError(f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise CodecError("payload must be a JSON object")
    version = payload.get("version")
    if version != CODEC_VERSION:
        raise CodecError(f"unsupported codec version: {version!r}")
    return payload


def encode_string_map(mapping: Mapping[str, str]) -> str:
    return json.dumps({"version": CODEC_VERSION, "pairs": _encode_pairs(mapping)}, ensure_ascii=False)


def decode_string_map(text: Optional[str]) -> Dict[str, str]:
    if not text:
        return {}
    return _decode_pairs(_load(text).get("pairs"))


def encode_drm_config(config: Optional[DrmConfig]) -> Optional[str]:
    if config is None:
        return None
    payload = config.model_dump(mode="json", exclude={"headers"})
    payload["headers"] = _encode_pairs(config.headers)
    payload["version"] = CODEC_VERSION
    return json.dumps(payload, ensure_ascii=False)


def decode_drm_config(text: Optional[str]) -> Optional[DrmConfig]:
    if text is None:
        return None
    payload = _load(text)
    try:
        scheme = DrmScheme(payload["scheme"])
    except (KeyError, ValueError) as exc:
        raise CodecError(f"invalid DRM scheme: {payload.get('scheme')!r}") from exc
    return DrmConfig(
        scheme=scheme,
        license_url=payload.get("license_url"),
        key_id=payload.get("key_id"),
        key=payload.get("key"),
        clear_key_id=payload.get("clear_key_id"),
        clear_key=payload.get("clear_key"),
        headers=_decode_pairs(payload.get("headers", [])),
        is_offline_key=bool(payload.get("is_offline_key", False)),
        offline_key_path=payload.get("offline_key_path"),
    )
