"""Utility helpers for HTTP, filesystem, and persistence codecs."""

from .codec import CodecError, decode_drm_config, decode_string_map, encode_drm_config, encode_string_map
from .file_utils import build_offline_key_path, ensure_directory, sanitize_filename
from .http_client import HttpClient, LicenseRequestError

__all__ = [
    "HttpClient",
    "LicenseRequestError",
    "ensure_directory",
    "sanitize_filename",
    "build_offline_key_path",
    "CodecError",
    "encode_string_map",
    "decode_string_map",
    "encode_drm_config",
    "decode_drm_config",
]
