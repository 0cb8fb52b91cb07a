"""Tests for YAML configuration loading."""

from pathlib import Path

from article_manifest.config import AppConfig, load_config


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)

    assert cfg == AppConfig()
    assert cfg.paths.articles_dir == "articles"
    assert cfg.paths.output_path == "manifest.json"
    assert cfg.output.indent == 2


def test_load_config_returns_independent_copy():
    cfg = load_config(None)
    cfg.paths.articles_dir = "elsewhere"

    assert load_config(None).paths.articles_dir == "articles"


def test_load_config_merges_sections(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "paths:\n  articles_dir: posts\nlogging:\n  level: DEBUG\n  file: true\nunknown: 1\n",
        encoding="utf-8",
    )

    cfg = load_config(str(config_path))

    assert cfg.paths.articles_dir == "posts"
    assert cfg.paths.output_path == "manifest.json"
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.file is True
    assert cfg.logging.format == "jsonl"


def test_load_config_empty_file_uses_defaults(tmp_path: Path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(str(config_path)) == AppConfig()
