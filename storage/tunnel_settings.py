# storage/tunnel_settings.py
from __future__ import annotations
import os
from typing import Callable, Optional
from storage.preferences import Preferences
from validators import parse_mtu, is_valid_mtu
from logger import log

SHARED_PREFERENCES = "wireguard"
KEY_MTU = "mtu"


class WireguardMtu:
    """Tunnel MTU override; None means the tunnel default is used."""

    def __init__(
        self,
        prefs_dir: Optional[os.PathLike] = None,
        preferences: Optional[Preferences] = None,
    ):
        self.preferences = preferences or Preferences(SHARED_PREFERENCES, prefs_dir)
        self.on_change: Optional[Callable[[Optional[int]], None]] = None
        self._mtu = self._load()

    def get(self) -> Optional[int]:
        return self._mtu

    def set(self, mtu: Optional[int]) -> None:
        if mtu is not None and not is_valid_mtu(mtu):
            raise ValueError(f"MTU out of range: {mtu}")
        self.preferences.put_string(KEY_MTU, "" if mtu is None else str(mtu))
        self._mtu = mtu
        log.info("WireGuard MTU set to %s", mtu if mtu is not None else "(default)")
        if self.on_change is not None:
            self.on_change(mtu)

    def _load(self) -> Optional[int]:
        raw = self.preferences.get_string(KEY_MTU)
        if raw is None or raw == "":
            return None
        mtu = parse_mtu(raw)
        if not is_valid_mtu(mtu):
            log.warning("Discarding invalid stored MTU %r", raw)
            return None
        return mtu
