# tests/test_config_manager.py
import json

import pytest

from DecimalCalc import config_manager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


def test_missing_file_falls_back_to_defaults(config_file):
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("precision") == 50


def test_corrupt_file_falls_back_to_defaults(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("darkmode") is False


def test_file_values_override_defaults(config_file):
    config_file.write_text(json.dumps({"precision": 12}), encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["precision"] == 12
    assert settings["show_tree"] is False


def test_unknown_key_is_zero(config_file):
    assert config_manager.load_setting_value("no_such_setting") == 0


def test_save_setting(config_file):
    settings = config_manager.load_setting_value("all")
    settings["darkmode"] = True
    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("darkmode") is True


def test_descriptions_cover_every_setting():
    descriptions = config_manager.load_setting_description("all")
    assert set(descriptions) == set(config_manager.DEFAULT_SETTINGS)
