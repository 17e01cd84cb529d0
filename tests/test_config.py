"""Tests for configuration validation."""

import pytest

from guide_outlines import Config, validate_config


def test_defaults_are_valid():
    assert Config.validate() == []
    validate_config(Config())


@pytest.mark.parametrize(
    "attr, value",
    [
        ("LOG_LEVEL", "VERBOSE"),
        ("DEFAULT_OUTLINE", "prototype"),
        ("JSON_INDENT", -1),
        ("OUTPUT_DIR", ""),
        ("DEFAULT_SEARCH_LIMIT", 0),
    ],
)
def test_invalid_setting(monkeypatch, attr, value):
    monkeypatch.setattr(Config, attr, value)
    assert len(Config.validate()) == 1
    with pytest.raises(ValueError):
        validate_config(Config())


def test_default_outline_name_is_normalized(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_OUTLINE", "Core_JS")
    assert Config.validate() == []


def test_properties(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
    config = Config()
    assert config.log_level == "DEBUG"
    assert config.default_outline == Config.DEFAULT_OUTLINE
    assert config.json_indent == Config.JSON_INDENT


def test_print_config(capsys):
    Config.print_config()
    out = capsys.readouterr().out
    assert Config.DEFAULT_OUTLINE in out
    assert Config.OUTPUT_DIR in out
