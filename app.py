# app.py
from __future__ import annotations
import os
from typing import Optional
from textual.app import App
from storage.custom_dns import CustomDns
from storage.tunnel_settings import WireguardMtu
from logger import log


class VpnSettingsApp(App):
    """VPN client advanced settings."""

    CSS = """
    Screen {
        background: $surface;
    }
    #form {
        margin: 1 2;
    }
    #nav_buttons {
        dock: bottom;
        height: 3;
        align: center middle;
        margin: 1 2;
    }
    Button {
        margin: 0 1;
    }
    #status_msg {
        margin-top: 1;
    }
    #err_msg {
        margin-top: 1;
        color: $error;
    }
    """

    def __init__(self, prefs_dir: Optional[os.PathLike] = None) -> None:
        super().__init__()
        self.custom_dns = CustomDns(prefs_dir)
        self.wireguard_mtu = WireguardMtu(prefs_dir)
        log.info("VpnSettingsApp started")

    async def on_mount(self) -> None:
        from screens.advanced_settings import AdvancedSettingsScreen
        await self.push_screen(AdvancedSettingsScreen())
