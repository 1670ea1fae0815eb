# tests/test_utils.py
"""Tests for utils: load_config (modes, cache, errors, env override) and the topic debug logger."""

from __future__ import annotations

import io
import json
import os
from importlib import import_module

import pytest

# `utils` re-exports the load_config function, so fetch the modules themselves
LC = import_module("lottery_ticket_extractor.extraction.utils.load_config")
LOG = import_module("lottery_ticket_extractor.extraction.utils.log")


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    monkeypatch.delenv("LOTTERY_DATA_DIR", raising=False)
    LC.clear_config_cache()
    yield
    LC.clear_config_cache()


def _write(dir_, name, payload):
    path = dir_ / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


# ---------- load_config: modes ----------
def test_raw_mode_returns_parsed_json(tmp_path):
    _write(tmp_path, "cfg.json", {"a": [1, 2]})
    assert LC.load_config("cfg", base_dir=tmp_path) == {"a": [1, 2]}
    assert LC.load_config("cfg.json", base_dir=tmp_path) == {"a": [1, 2]}


def test_validated_dict_runs_validator_and_wraps_errors(tmp_path):
    _write(tmp_path, "s.json", {"n": 1})

    def _double(d):
        d["n"] *= 2
        return d

    def _boom(d):
        raise KeyError("missing")

    assert LC.load_config("s", mode="validated_dict", base_dir=tmp_path, validator=_double) == {"n": 2}
    # validator output never leaks into the cache
    assert LC.load_config("s", mode="validated_dict", base_dir=tmp_path) == {"n": 1}
    with pytest.raises(LC.ConfigParseError, match="validator failed"):
        LC.load_config("s", mode="validated_dict", base_dir=tmp_path, validator=_boom)


def test_validated_dict_requires_object(tmp_path):
    _write(tmp_path, "l.json", [1, 2])
    with pytest.raises(LC.ConfigTypeError):
        LC.load_config("l", mode="validated_dict", base_dir=tmp_path)


# ---------- load_config: errors ----------
def test_missing_file_and_bad_json(tmp_path):
    _write(tmp_path, "bad.json", "{not json")
    with pytest.raises(LC.ConfigFileNotFound):
        LC.load_config("absent", base_dir=tmp_path)
    with pytest.raises(LC.ConfigParseError):
        LC.load_config("bad", base_dir=tmp_path)


def test_refuses_paths_outside_data_dir(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    _write(tmp_path, "secret.json", {"k": 1})
    with pytest.raises(LC.ConfigFileNotFound, match="outside data dir"):
        LC.load_config("../secret", base_dir=data)


def test_unknown_mode_raises(tmp_path):
    _write(tmp_path, "cfg.json", {})
    with pytest.raises(ValueError):
        LC.load_config("cfg", mode="nope", base_dir=tmp_path)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        LC.load_config("cfg", mode="set", base_dir=tmp_path)  # type: ignore[arg-type]


def test_data_dir_discovery(tmp_path):
    nested = tmp_path / "data" / "x" / "y"
    nested.mkdir(parents=True)
    assert LC._default_data_dir(nested) == (tmp_path / "data").resolve()
    # the packaged data dir is found from the module location
    assert (LC._default_data_dir() / "batch_settings.json").is_file()


# ---------- load_config: cache & env ----------
def test_cache_hit_and_clear(tmp_path):
    path = _write(tmp_path, "cfg.json", {"v": 1})
    assert LC.load_config("cfg", base_dir=tmp_path) == {"v": 1}
    # same mtime → served from cache even if content changed
    st = path.stat()
    _write(tmp_path, "cfg.json", {"v": 2})
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns))
    assert LC.load_config("cfg", base_dir=tmp_path) == {"v": 1}
    LC.clear_config_cache()
    assert LC.load_config("cfg", base_dir=tmp_path) == {"v": 2}


def test_cached_null_is_not_parsed_again(tmp_path, monkeypatch):
    _write(tmp_path, "empty.json", "null")
    parses = []
    real_load = LC.json.load

    def _counting_load(f):
        parses.append(f.name)
        return real_load(f)

    monkeypatch.setattr(LC.json, "load", _counting_load)
    assert LC.load_config("empty", base_dir=tmp_path) is None
    assert LC.load_config("empty", base_dir=tmp_path) is None
    assert len(parses) == 1


def test_validator_mutating_nested_values_keeps_cache_intact(tmp_path):
    _write(tmp_path, "nested.json", {"outer": {"n": 1}, "items": [1]})

    def _mutate(d):
        d["outer"]["n"] = 99
        d["items"].append(2)
        return d

    out = LC.load_config("nested", mode="validated_dict", base_dir=tmp_path, validator=_mutate)
    assert out == {"outer": {"n": 99}, "items": [1, 2]}
    assert LC.load_config("nested", mode="validated_dict", base_dir=tmp_path) == {
        "outer": {"n": 1},
        "items": [1],
    }


def test_env_override_beats_base_dir(tmp_path, monkeypatch):
    env_dir = tmp_path / "env"
    arg_dir = tmp_path / "arg"
    env_dir.mkdir()
    arg_dir.mkdir()
    _write(env_dir, "cfg.json", {"from": "env"})
    _write(arg_dir, "cfg.json", {"from": "arg"})
    monkeypatch.setenv("LOTTERY_DATA_DIR", str(env_dir))
    assert LC.load_config("cfg", base_dir=arg_dir) == {"from": "env"}


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.setenv("LOTTERY_DATA_DIR", "/somewhere/else")
    _write(tmp_path, "cfg.json", {"ok": True})
    with LC.temp_data_dir(tmp_path):
        assert os.environ["LOTTERY_DATA_DIR"] == str(tmp_path)
        assert LC.load_config("cfg") == {"ok": True}
    assert os.environ["LOTTERY_DATA_DIR"] == "/somewhere/else"


# ---------- log ----------
def test_debug_silent_without_topics(monkeypatch):
    monkeypatch.delenv("LOTTERY_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("hidden", topic="batch", stream=buf)
    assert buf.getvalue() == ""


def test_debug_prints_enabled_topics(monkeypatch):
    monkeypatch.setenv("LOTTERY_DEBUG_TOPICS", " Batch , search ")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("shown", topic="BATCH", level="info", stream=buf)
    LOG.debug("hidden", topic="config", stream=buf)
    out = buf.getvalue()
    assert "[batch][INFO] shown" in out
    assert "hidden" not in out
    monkeypatch.delenv("LOTTERY_DEBUG_TOPICS")
    LOG.reload_topics()


def test_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("LOTTERY_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    assert LOG.topic_enabled("anything")
    LOG.debug("to stderr")
    assert "[ticket][DEBUG] to stderr" in capsys.readouterr().err
    monkeypatch.delenv("LOTTERY_DEBUG_TOPICS")
    LOG.reload_topics()
