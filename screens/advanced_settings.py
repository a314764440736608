# screens/advanced_settings.py
from __future__ import annotations
from typing import Optional
from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Button, Static
from textual.containers import Horizontal, VerticalScroll
from widgets.vpn_header import VpnHeader
from widgets.input_cell import InputCell
from fields import DnsField, MtuField
from validators import Address, format_address
from logger import log


class AdvancedSettingsScreen(Screen):
    """Custom DNS server and WireGuard MTU settings."""

    BINDINGS = [
        ("escape", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.dns_field = DnsField(on_submit_dns_server=self._submit_dns)
        self.mtu_field = MtuField(on_submit_mtu=self._submit_mtu)
        self.dns_field.on_rejected_text = self._show_error
        self.mtu_field.on_rejected_text = self._show_error
        self.last_error = ""

    def compose(self) -> ComposeResult:
        self.dns_field.address = self.app.custom_dns.get()
        self.mtu_field.value = self.app.wireguard_mtu.get()
        yield VpnHeader("Advanced settings")
        with VerticalScroll(id="form"):
            yield InputCell(
                "Custom DNS server:",
                self.dns_field,
                placeholder="e.g. 1.1.1.1 or 2606:4700::1111",
                id="dns",
            )
            yield InputCell(
                "WireGuard MTU:",
                self.mtu_field,
                placeholder="Default",
                id="mtu",
            )
            yield Static("", id="status_msg")
            yield Static("", id="err_msg")
        with Horizontal(id="nav_buttons"):
            yield Button("Clear DNS", id="btn_clear_dns", variant="default")
            yield Button("Clear MTU", id="btn_clear_mtu", variant="default")
            yield Button("Quit", id="btn_quit", variant="primary")
        yield Footer()

    def on_mount(self) -> None:
        self.app.custom_dns.on_change = self._dns_changed
        self.app.wireguard_mtu.on_change = self._mtu_changed
        self._show_status()

    def on_unmount(self) -> None:
        self.app.custom_dns.on_change = None
        self.app.wireguard_mtu.on_change = None

    # -- Submissions -------------------------------------------------------

    def _submit_dns(self, address: Optional[Address]) -> None:
        try:
            self.app.custom_dns.set(address)
        except OSError as e:
            log.error("Failed to save DNS server: %s", e)
            self._show_error(f"Could not save DNS server: {e}")

    def _submit_mtu(self, mtu: Optional[int]) -> None:
        try:
            self.app.wireguard_mtu.set(mtu)
        except OSError as e:
            log.error("Failed to save MTU: %s", e)
            self._show_error(f"Could not save MTU: {e}")

    def _dns_changed(self, address: Optional[Address]) -> None:
        self._show_error("")
        log.info("Settings: DNS server now %s", address or "(default)")
        self._show_status()

    def _mtu_changed(self, mtu: Optional[int]) -> None:
        self._show_error("")
        log.info("Settings: MTU now %s", mtu if mtu is not None else "(default)")
        self._show_status()

    def _show_status(self) -> None:
        dns = self.app.custom_dns.get()
        mtu = self.app.wireguard_mtu.get()
        lines = [
            f"  DNS server : [cyan]{format_address(dns) or 'default'}[/cyan]",
            f"  MTU        : [cyan]{mtu if mtu is not None else 'default'}[/cyan]",
        ]
        self.query_one("#status_msg", Static).update("\n".join(lines))

    def _show_error(self, msg: str) -> None:
        self.last_error = msg
        self.query_one("#err_msg", Static).update(Text(f"Error: {msg}") if msg else "")

    # -- Buttons -----------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn_clear_dns":
            self.query_one("#dns", InputCell).text = ""
            self._submit_dns(None)
        elif event.button.id == "btn_clear_mtu":
            self.query_one("#mtu", InputCell).text = ""
            self._submit_mtu(None)
        elif event.button.id == "btn_quit":
            self.action_quit()

    def action_quit(self) -> None:
        log.info("Settings screen closed")
        self.app.exit()
