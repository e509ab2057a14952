# tests/test_config_manager.py

import json

import pytest

from prefix_autocompleter.utils.config_manager import DEFAULTS, Config


def test_missing_file_created_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS


def test_no_autosave_does_not_touch_disk(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path), autosave=False)
    cfg.set("top_k", 9)
    assert not path.exists()


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"top_k": 10, "show_weights": False}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg["top_k"] == 10
    assert cfg["show_weights"] is False
    assert cfg["bench_runs"] == DEFAULTS["bench_runs"]


def test_corrupt_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS


def test_unknown_and_bad_values_ignored_on_load(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"colour": "red", "top_k": "lots"}), encoding="utf8")
    cfg = Config(str(path))
    assert "colour" not in cfg.data
    assert cfg["top_k"] == DEFAULTS["top_k"]


def test_set_coerces_and_persists(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert cfg.set("top_k", "8") == 8
    assert cfg.set("show_weights", "no") is False
    assert cfg.set("log_color", "TRUE") is True
    again = Config(str(path))
    assert again["top_k"] == 8
    assert again["show_weights"] is False


def test_set_rejects_unknown_key_and_bad_value(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(KeyError):
        cfg.set("nope", 1)
    with pytest.raises(ValueError):
        cfg.set("top_k", "many")
    with pytest.raises(ValueError):
        cfg.set("show_weights", "maybe")


def test_log_level_validated_on_set(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    with pytest.raises(ValueError):
        cfg.set("log_level", "bogus")
    assert cfg["log_level"] == DEFAULTS["log_level"]
    assert json.loads(path.read_text(encoding="utf8"))["log_level"] == DEFAULTS["log_level"]
    assert cfg.set("log_level", "warn") == "WARNING"
    assert cfg.set("log_level", "debug") == "DEBUG"


def test_bad_log_level_in_file_falls_back_to_default(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "bogus", "top_k": 3}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg["log_level"] == DEFAULTS["log_level"]
    assert cfg["top_k"] == 3


def test_negative_counts_rejected(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    for key in ("top_k", "bench_runs", "bench_warmup"):
        with pytest.raises(ValueError):
            cfg.set(key, -3)
        assert cfg[key] == DEFAULTS[key]
    path.write_text(json.dumps({"top_k": -3}), encoding="utf8")
    assert Config(str(path))["top_k"] == DEFAULTS["top_k"]
