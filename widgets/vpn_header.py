# widgets/vpn_header.py
from __future__ import annotations
from functools import lru_cache
import pyfiglet
from textual.widgets import Static


@lru_cache(maxsize=None)
def banner(title: str, font: str = "small") -> str:
    return pyfiglet.figlet_format(title, font=font).rstrip("\n")


class VpnHeader(Static):
    """ASCII-art product name with the current page name underneath."""

    DEFAULT_CSS = """
    VpnHeader {
        color: #44ad4d;
        text-style: bold;
        width: 100%;
        padding: 0 2;
        margin-bottom: 1;
    }
    """

    def __init__(self, page: str = "", title: str = "VPN") -> None:
        text = banner(title)
        if page:
            text = f"{text}\n{page}"
        super().__init__(text, markup=False)
