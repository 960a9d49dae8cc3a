from __future__ import annotations

import pytest

from cs2chat.app import config as app_config


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config, "user_config_dir", lambda appname, appauthor=None: str(tmp_path))
    return tmp_path
