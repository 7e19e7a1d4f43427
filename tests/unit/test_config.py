"""Tests for settings loading."""

import pytest

from paliscript.config import engine_config, load_settings
from paliscript.models import EngineConfig


def test_packaged_defaults():
    settings = load_settings()

    assert settings["logging"]["level"] == "INFO"
    assert settings["conversion"]["script"] == "THAI"
    assert settings["conversion"]["also_convert_numbers"] is False
    assert settings["batch"]["workers"] == 4


def test_override_merges_sections(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "conversion:\n  script: KHMER\n  pali_only_thai_forms: true\n",
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings["conversion"]["script"] == "KHMER"
    assert settings["conversion"]["also_convert_numbers"] is False
    assert settings["logging"]["format"] == "pretty"
    assert engine_config(settings) == EngineConfig(pali_only_thai_forms=True)


def test_missing_settings_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_settings_must_be_mapping(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings(path)


def test_default_engine_config():
    assert engine_config(load_settings()) == EngineConfig()


def test_malformed_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("logging: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid settings file"):
        load_settings(path)
