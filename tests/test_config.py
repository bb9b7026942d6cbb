"""Tests for site definition loading."""

from pathlib import Path

from graphsite.config import load_config
from graphsite.result import ErrorKind


def _write(tmp_path, text):
    path = tmp_path / "site.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_full_definition(tmp_path):
    path = _write(tmp_path, """
store:
  endpoint: http://localhost:3030/
  dataset: docs
  db_type: tdb2
  timeout: 5
imports:
  - path: data/a.ttl
    graph: http://example.org/g
  - path: data/b.rdf
site:
  output_dir: out
  workers: 2
""")
    result = load_config(path)
    assert result.ok, result
    config = result.data
    assert config.store.endpoint == "http://localhost:3030"
    assert config.store.db_type == "tdb2"
    assert config.store.timeout == 5
    assert config.imports[0].path == tmp_path / "data" / "a.ttl"
    assert config.imports[0].graph == "http://example.org/g"
    assert config.imports[1].graph is None
    assert config.site.output_dir == tmp_path / "out"
    assert config.site.workers == 2


def test_defaults(tmp_path):
    path = _write(tmp_path, "store:\n  endpoint: http://h\n  dataset: d\n")
    config = load_config(path).data
    assert config.store.db_type == "mem"
    assert config.store.timeout == 30
    assert config.imports == []
    assert config.site.output_dir == tmp_path / "dist" / "site"
    assert config.site.workers == 4


def test_missing_file():
    result = load_config(Path("/nonexistent/site.yaml"))
    assert not result.ok
    assert result.kind is ErrorKind.CONFIG


def test_missing_store_key(tmp_path):
    result = load_config(_write(tmp_path, "store:\n  endpoint: http://h\n"))
    assert not result.ok
    assert "dataset" in result.error


def test_bad_yaml(tmp_path):
    result = load_config(_write(tmp_path, "store: [unclosed"))
    assert not result.ok
    assert result.error.startswith("YAML parse error")


def test_zero_workers_rejected(tmp_path):
    result = load_config(_write(tmp_path, "store:\n  endpoint: h\n  dataset: d\nsite:\n  workers: 0\n"))
    assert not result.ok
    assert "workers" in result.error
