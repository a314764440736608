import logging
import os
import sys
from pathlib import Path

LOG_FILE = Path(
    os.environ.get(
        "VPN_SETTINGS_LOG",
        Path.home() / ".cache" / "vpn_settings" / "vpn_settings.log",
    )
)
FALLBACK_LOG_FILE = Path("/tmp/vpn_settings.log")


def _open_log(path: Path) -> logging.FileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path)


def setup_logger(log_file: Path = LOG_FILE) -> logging.Logger:
    """Settings log: everything to the file, warnings and up to stderr.

    VPN_SETTINGS_DEBUG=1 also sends debug output to stderr.
    """
    logger = logging.getLogger("vpn_settings")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    try:
        fh = _open_log(log_file)
    except OSError:
        fh = logging.FileHandler(FALLBACK_LOG_FILE)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.DEBUG if os.environ.get("VPN_SETTINGS_DEBUG") else logging.WARNING)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    return logger

log = setup_logger()
