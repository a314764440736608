# fields.py
"""Toolkit-independent behaviour of the settings input cells.

A cell is one ``ValidatedTextField`` configured by a ``FieldConfig``: the
accepted characters, a validity predicate that only drives the visual
valid/invalid state, and a submit handler fired when the field loses focus.
``DnsField`` and ``MtuField`` build those configurations and translate the
submitted text into an address or an MTU value.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Optional

from validators import (
    Address, DNS_CHARS, MTU_CHARS, MIN_MTU, MAX_MTU,
    is_valid_address, parse_address, format_address,
    parse_mtu, is_valid_mtu, validate_dns, validate_mtu,
)
from logger import log

MTU_FOOTER = f"Set WireGuard MTU value. Valid range: {MIN_MTU} - {MAX_MTU}."


@dataclass
class FieldConfig:
    allowed_chars: str
    is_valid_input: Optional[Callable[[str], bool]] = None
    on_submit_text: Optional[Callable[[str], None]] = None
    footer: Optional[str] = None

    @property
    def restrict(self) -> str:
        """Regex form of the allowlist, as expected by textual's Input."""
        return f"[{re.escape(self.allowed_chars)}]*"


class ValidatedTextField:
    def __init__(self, config: FieldConfig, text: str = "") -> None:
        self.config = config
        self._text = text
        self._focused = False

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value

    @property
    def focused(self) -> bool:
        return self._focused

    def check(self, text: str) -> bool:
        predicate = self.config.is_valid_input
        return True if predicate is None else predicate(text)

    @property
    def is_valid(self) -> bool:
        return self.check(self._text)

    @property
    def footer(self) -> Optional[str]:
        return self.config.footer

    def filter(self, chars: str) -> str:
        return "".join(c for c in chars if c in self.config.allowed_chars)

    def type_text(self, chars: str) -> None:
        """Append keystrokes, dropping any outside the allowlist."""
        self._text += self.filter(chars)

    def set_focus(self, has_focus: bool) -> None:
        was_focused = self._focused
        self._focused = has_focus
        if was_focused and not has_focus:
            submit = self.config.on_submit_text
            if submit is not None:
                submit(self._text)


class DnsField(ValidatedTextField):
    """Custom DNS server cell: hex digits, '.' and ':' only."""

    def __init__(
        self,
        on_submit_dns_server: Optional[Callable[[Optional[Address]], None]] = None,
        text: str = "",
    ) -> None:
        super().__init__(
            FieldConfig(
                allowed_chars=DNS_CHARS,
                is_valid_input=is_valid_address,
                on_submit_text=self._submit,
            ),
            text,
        )
        self.on_submit_dns_server = on_submit_dns_server
        # Called with an explanation when a non-empty submission is ignored
        self.on_rejected_text: Optional[Callable[[str], None]] = None

    @property
    def address(self) -> Optional[Address]:
        return parse_address(self.text) if is_valid_address(self.text) else None

    @address.setter
    def address(self, value: Optional[Address]) -> None:
        self.text = format_address(value)

    def _submit(self, text: str) -> None:
        ok, msg = validate_dns(text)
        if ok:
            address: Optional[Address] = parse_address(text)
        elif text == "":
            address = None
        else:
            log.info("DNS cell: ignoring invalid input %r", text)
            if self.on_rejected_text is not None:
                self.on_rejected_text(msg)
            return
        if self.on_submit_dns_server is not None:
            self.on_submit_dns_server(address)


class MtuField(ValidatedTextField):
    """WireGuard MTU cell: decimal digits only, range MIN_MTU..MAX_MTU."""

    MIN_MTU = MIN_MTU
    MAX_MTU = MAX_MTU

    def __init__(
        self,
        on_submit_mtu: Optional[Callable[[Optional[int]], None]] = None,
        text: str = "",
    ) -> None:
        super().__init__(
            FieldConfig(
                allowed_chars=MTU_CHARS,
                is_valid_input=lambda t: is_valid_mtu(parse_mtu(t)),
                on_submit_text=self._submit,
                footer=MTU_FOOTER,
            ),
            text,
        )
        self.on_submit_mtu = on_submit_mtu
        self.on_rejected_text: Optional[Callable[[str], None]] = None

    @property
    def value(self) -> Optional[int]:
        return parse_mtu(self.text)

    @value.setter
    def value(self, value: Optional[int]) -> None:
        self.text = "" if value is None else str(value)

    def _submit(self, text: str) -> None:
        ok, msg = validate_mtu(text)
        if ok:
            value: Optional[int] = parse_mtu(text)
        elif text == "":
            value = None
        else:
            log.info("MTU cell: ignoring out-of-range input %r", text)
            if self.on_rejected_text is not None:
                self.on_rejected_text(msg)
            return
        if self.on_submit_mtu is not None:
            self.on_submit_mtu(value)
