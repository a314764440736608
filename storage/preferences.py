# storage/preferences.py
from __future__ import annotations
import os
import yaml
from pathlib import Path
from typing import Dict, Optional
from logger import log

PREFS_DIR = Path(
    os.environ.get("VPN_SETTINGS_DIR", Path.home() / ".config" / "vpn_settings")
)


class Preferences:
    """Named key/value store, one YAML file per name under prefs_dir."""

    def __init__(self, name: str, prefs_dir: Optional[os.PathLike] = None):
        self.name = name
        self.prefs_dir = Path(prefs_dir) if prefs_dir is not None else PREFS_DIR
        self._values: Dict[str, str] = self._load()

    @property
    def path(self) -> Path:
        return self.prefs_dir / f"{self.name}.yaml"

    # -- Read --------------------------------------------------------------

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            log.warning("Could not read preferences %s: %s", self.path, e)
            return {}
        if data is None:
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring malformed preferences file %s", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    # -- Write -------------------------------------------------------------

    def put_string(self, key: str, value: str) -> None:
        """Write the file, then update the cached values. Raises OSError."""
        values = dict(self._values)
        values[key] = value
        self._write(values)
        self._values = values

    def _write(self, values: Dict[str, str]) -> None:
        self.prefs_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            yaml.safe_dump(values, f, default_flow_style=False)
        os.chmod(self.path, 0o600)
        log.debug("Wrote preferences %s", self.path)
