"""Tests for configuration loading."""

from pathlib import Path

from citysearch.config import Config, get_config, reload_config


def test_defaults():
    config = Config()
    assert config.search.default_radius == 100.0
    assert config.search.default_metric == 0
    assert config.logging.level == "WARNING"


def test_yaml_overrides(tmp_path):
    (tmp_path / "search.yaml").write_text(
        "dataset:\n"
        "  path: cities.txt\n"
        "search:\n"
        "  default_radius: 2.5\n"
        "  default_metric: 2\n"
        "logging:\n"
        "  level: debug\n"
    )
    config = Config.load(tmp_path)
    assert config.dataset.path == tmp_path / "cities.txt"
    assert config.search.default_radius == 2.5
    assert config.search.default_metric == 2
    assert config.logging.level == "DEBUG"


def test_absolute_dataset_path_kept(tmp_path):
    target = tmp_path / "elsewhere" / "cities.txt"
    (tmp_path / "search.yaml").write_text(f"dataset:\n  path: {target}\n")
    assert Config.load(tmp_path).dataset.path == target


def test_empty_yaml_keeps_defaults(tmp_path):
    (tmp_path / "search.yaml").write_text("")
    assert Config.load(tmp_path).search.default_radius == 100.0


def test_env_overrides_yaml(tmp_path, monkeypatch):
    (tmp_path / "search.yaml").write_text("search:\n  default_radius: 2.5\n")
    monkeypatch.setenv("CITYSEARCH_DEFAULT_RADIUS", "7")
    monkeypatch.setenv("CITYSEARCH_DEFAULT_METRIC", "1")
    monkeypatch.setenv("CITYSEARCH_DATA_FILE", "/data/cities.txt")
    monkeypatch.setenv("CITYSEARCH_LOG_LEVEL", "info")
    config = Config.load(tmp_path)
    assert config.search.default_radius == 7.0
    assert config.search.default_metric == 1
    assert config.dataset.path == Path("/data/cities.txt")
    assert config.logging.level == "INFO"


def test_reload_replaces_global(tmp_path, monkeypatch):
    monkeypatch.setattr("citysearch.config._config", None)
    (tmp_path / "search.yaml").write_text("search:\n  default_metric: 1\n")
    config = reload_config(tmp_path)
    assert get_config() is config
    assert config.search.default_metric == 1
