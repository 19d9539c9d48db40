"""EME key-system identifiers for each DRM scheme."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..models import DrmScheme


class KeySystem(Enum):
    WIDEVINE = ("com.widevine.alpha", "edef8ba9-79d6-4ace-a3c8-27dcd51d21ed")
    PLAYREADY = ("com.microsoft.playready", "9a04f079-9840-4286-ab92-e65be0885f95")
    CLEARKEY = ("org.w3.clearkey", "e2719d58-a985-b3c9-781a-b030af78d30e")

    def __init__(self, identifier: str, uuid: str) -> None:
        self.identifier = identifier
        self.uuid = uuid

    @classmethod
    def from_name(cls, value: str) -> Optional["KeySystem"]:
        """Looks a key system up by enum name, EME identifier, or UUID."""

        needle = value.strip().lower()
        for key_system in cls:
            if needle in (key_system.name.lower(), key_system.identifier, key_system.uuid):
                return key_system
        return None


_SCHEME_KEY_SYSTEMS = {
    DrmScheme.WIDEVINE: KeySystem.WIDEVINE,
    DrmScheme.PLAYREADY: KeySystem.PLAYREADY,
    DrmScheme.CLEARKEY: KeySystem.CLEARKEY,
}


def key_system_for(scheme: DrmScheme) -> KeySystem:
    """Raises ``ValueError`` for ``DrmScheme.NONE``, which has no key system."""

    try:
        return _SCHEME_KEY_SYSTEMS[scheme]
    except KeyError:
        raise ValueError(f"No key system for DRM scheme {scheme.value}") from None
