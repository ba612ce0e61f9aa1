import logging
from pathlib import Path

import pytest

from quiz_admin import config
from quiz_admin.utils import json_utils


def test_json_round_trip(tmp_path: Path) -> None:
    payload = {"content_hi": "प्रश्न", "count": 2}
    dumped = json_utils.json_dump(payload)
    assert "प्रश्न" in dumped
    assert json_utils.json_load(dumped) == payload

    compact = json_utils.compact_json_dump(payload)
    assert "\n" not in compact
    assert json_utils.json_load(compact) == payload

    path = tmp_path / "payload.json"
    path.write_text(dumped, encoding="utf-8")
    assert json_utils.read_json_file(path, {}) == payload
    assert json_utils.read_json_file(tmp_path / "missing.json", {"fallback": True}) == {"fallback": True}


def test_parse_int_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PREVIEW_LENGTH", "40")
    assert config._parse_int_env("PREVIEW_LENGTH", 100) == 40
    monkeypatch.setenv("PREVIEW_LENGTH", "forty")
    assert config._parse_int_env("PREVIEW_LENGTH", 100) == 100
    monkeypatch.delenv("PREVIEW_LENGTH")
    assert config._parse_int_env("PREVIEW_LENGTH", 100) == 100


def test_parse_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config._parse_log_level("LOG_LEVEL", logging.INFO) == logging.DEBUG
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert config._parse_log_level("LOG_LEVEL", logging.INFO) == logging.INFO
