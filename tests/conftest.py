import os
import sys

import pytest

# flat layout: make the top-level packages importable without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setenv("SORTVIZ_SETTINGS", str(path))
    return path
