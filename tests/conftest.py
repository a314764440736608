import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from storage.preferences import Preferences

@pytest.fixture
def prefs_dir(tmp_path):
    return tmp_path / "prefs"

@pytest.fixture
def dns_prefs(prefs_dir):
    return Preferences("custom_dns", prefs_dir)

@pytest.fixture
def broken_prefs_dir(tmp_path):
    """A prefs_dir that is a plain file, so every write fails."""
    path = tmp_path / "prefs"
    path.write_text("not a directory\n")
    return path
