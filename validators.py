# validators.py
from __future__ import annotations
import ipaddress
import re
from typing import Optional, Tuple, Union

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

MIN_MTU = 1280
MAX_MTU = 1420

# Accepted keystrokes for each cell
DNS_CHARS = "0123456789abcdefABCDEF.:"
MTU_CHARS = "0123456789"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def is_valid_address(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def parse_address(text: str) -> Address:
    """Parse an IPv4 or IPv6 literal. Raises ValueError on bad input."""
    return ipaddress.ip_address(text)


def format_address(address: Optional[Address]) -> str:
    """Text form used for storage and display; '' for no address."""
    if address is None:
        return ""
    return str(address).lstrip("/")


def validate_dns(text: str) -> Tuple[bool, str]:
    if is_valid_address(text):
        return True, ""
    return False, f"'{text}' is not a valid DNS server IP."


def parse_mtu(text: str) -> Optional[int]:
    value = text.strip()
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def is_valid_mtu(value: Optional[int]) -> bool:
    return value is not None and MIN_MTU <= value <= MAX_MTU


def validate_mtu(text: str) -> Tuple[bool, str]:
    if is_valid_mtu(parse_mtu(text)):
        return True, ""
    return False, f"MTU must be {MIN_MTU}-{MAX_MTU}, got '{text}'."
