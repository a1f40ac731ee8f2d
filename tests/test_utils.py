# tests/test_utils.py
"""End-to-end tests for utils (load_config, log) with cache/env fallbacks."""

from __future__ import annotations

import json
import os

import pytest

from xcolor_expressions.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    load_config,
    resolve_data_dir,
)
from xcolor_expressions.utils import log as LOG


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via XCOLOR_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("XCOLOR_DATA_DIR", str(data))
    clear_config_cache()
    return data


# ---------- load_config tests ----------
def test_default_data_dir_is_the_package_data():
    found = resolve_data_dir()
    assert found.name == "data"
    assert (found / "presets" / "default.json").is_file()


def test_data_dir_env_fallback_and_explicit_base(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    assert resolve_data_dir() == tmp_path.resolve()
    assert resolve_data_dir(tmp_path / "other") == (tmp_path / "other").resolve()


def test_load_config_cache_hit_until_cleared(tmp_data_dir):
    p = tmp_data_dir / "names.json"
    p.write_text(json.dumps({"ink": 1}), encoding="utf-8")

    out1 = load_config("names")
    assert out1 == {"ink": 1}

    # same mtime → cached object comes back even though content changed
    stat = p.stat()
    p.write_text(json.dumps({"changed": 2}), encoding="utf-8")
    os.utime(p, ns=(stat.st_atime_ns, stat.st_mtime_ns))
    assert load_config("names.json") is out1

    clear_config_cache()
    assert load_config("names") == {"changed": 2}


def test_load_config_errors(tmp_data_dir):
    (tmp_data_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


# ---------- log.debug tests ----------
def test_log_debug_silent_without_topics(capsys):
    LOG.reload_topics()
    LOG.debug("nobody listens", topic="parse")
    assert "nobody listens" not in capsys.readouterr().err


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("XCOLOR_DEBUG_TOPICS", "parse")
    LOG.reload_topics()

    LOG.debug("hello on parse", topic="parse")
    LOG.debug("should be silent", topic="registry")

    captured = capsys.readouterr()
    assert "hello on parse" in captured.err
    assert "[parse][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("XCOLOR_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][WARNING] m2" in captured.err


def test_parser_traces_under_parse_topic(monkeypatch, capsys, registry):
    from xcolor_expressions import parse

    monkeypatch.setenv("XCOLOR_DEBUG_TOPICS", "parse")
    LOG.reload_topics()
    parse("red!50!blue", registry)
    assert "'red!50!blue': step 1 (50%)" in capsys.readouterr().err
