"""Tests for JSON config loading."""

import json

import pytest

from config import DEFAULT_CONFIG, load_config, validate_config


def write_cfg(tmp_path, data):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_config_merges(tmp_path):
    cfg = load_config(write_cfg(tmp_path, {"pow_strategy": "linear"}))
    assert cfg["pow_strategy"] == "linear"
    assert cfg["default_order"] == DEFAULT_CONFIG["default_order"]
    assert DEFAULT_CONFIG["pow_strategy"] == "builtin"


def test_load_config_custom_base(tmp_path):
    cfg = load_config(write_cfg(tmp_path, {"log_level": "DEBUG"}), base={"default_order": 17})
    assert cfg["default_order"] == 17
    assert cfg["log_level"] == "DEBUG"
    assert cfg["pow_strategy"] == "builtin"


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


def test_load_config_rejects_unknown_strategy(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_cfg(tmp_path, {"pow_strategy": "montgomery"}))


def test_load_config_rejects_bad_order(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_cfg(tmp_path, {"default_order": 0}))


def test_load_config_rejects_non_object(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_cfg(tmp_path, [1, 2]))


def test_default_config_is_valid():
    assert validate_config(DEFAULT_CONFIG.copy()) == DEFAULT_CONFIG
