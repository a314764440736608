# storage/custom_dns.py
from __future__ import annotations
import os
from typing import Callable, Optional
from storage.preferences import Preferences
from validators import Address, is_valid_address, parse_address, format_address
from logger import log

SHARED_PREFERENCES = "custom_dns"
KEY_ADDRESS = "address"


class CustomDns:
    """Custom DNS server address, persisted and observable.

    ``set()`` always writes the new value to the preferences file first and
    then calls ``on_change`` with it. Only one listener is kept; assigning
    ``on_change`` replaces the previous one.
    """

    def __init__(
        self,
        prefs_dir: Optional[os.PathLike] = None,
        preferences: Optional[Preferences] = None,
    ):
        self.preferences = preferences or Preferences(SHARED_PREFERENCES, prefs_dir)
        self.on_change: Optional[Callable[[Optional[Address]], None]] = None
        self._address = self._load()

    def get(self) -> Optional[Address]:
        return self._address

    def set(self, address: Optional[Address]) -> None:
        self.preferences.put_string(KEY_ADDRESS, format_address(address))
        self._address = address
        log.info("Custom DNS server set to %s", address or "(none)")
        if self.on_change is not None:
            self.on_change(address)

    @property
    def dns_server_address(self) -> Optional[Address]:
        return self.get()

    @dns_server_address.setter
    def dns_server_address(self, address: Optional[Address]) -> None:
        self.set(address)

    def _load(self) -> Optional[Address]:
        raw = self.preferences.get_string(KEY_ADDRESS)
        if raw is None:
            return None
        if raw.startswith("/"):
            raw = raw[1:]
        if not is_valid_address(raw):
            if raw:
                log.warning("Discarding invalid stored DNS address %r", raw)
            return None
        return parse_address(raw)
