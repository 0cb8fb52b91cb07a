"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from article_manifest.cli import app

runner = CliRunner()


def _make_articles(tmp_path: Path) -> Path:
    articles_dir = tmp_path / "articles"
    articles_dir.mkdir()
    (articles_dir / "hello.md").write_text(
        '---\ntitle: "Hello"\ndate: 2025-03-01\ntags: [intro, meta]\n---\nHi\n',
        encoding="utf-8",
    )
    (articles_dir / "wip.md").write_text(
        "---\ntitle: WIP\ndate: 2025-04-01\ndraft: true\n---\n", encoding="utf-8"
    )
    return articles_dir


def test_generate_writes_manifest(tmp_path: Path):
    articles_dir = _make_articles(tmp_path)
    output_path = tmp_path / "manifest.json"

    result = runner.invoke(
        app,
        ["generate", "-a", str(articles_dir), "-o", str(output_path), "--log-level", "ERROR"],
    )

    assert result.exit_code == 0, result.output
    manifest = json.loads(output_path.read_text(encoding="utf-8"))
    assert manifest == [
        {"title": "Hello", "date": "2025-03-01", "tags": ["intro", "meta"], "slug": "hello"}
    ]


def test_generate_dry_run_prints_json(tmp_path: Path):
    articles_dir = _make_articles(tmp_path)
    output_path = tmp_path / "manifest.json"

    result = runner.invoke(
        app,
        [
            "generate",
            "-a",
            str(articles_dir),
            "-o",
            str(output_path),
            "--dry-run",
            "--log-level",
            "ERROR",
        ],
    )

    assert result.exit_code == 0, result.output
    assert not output_path.exists()
    assert [item["slug"] for item in json.loads(result.output)] == ["hello"]


def test_generate_reads_paths_from_environment(tmp_path: Path, monkeypatch):
    articles_dir = _make_articles(tmp_path)
    output_path = tmp_path / "env-manifest.json"
    monkeypatch.setenv("ARTICLE_MANIFEST_ARTICLES_DIR", str(articles_dir))
    monkeypatch.setenv("ARTICLE_MANIFEST_OUTPUT", str(output_path))
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["generate", "--log-level", "ERROR"])

    assert result.exit_code == 0, result.output
    assert output_path.exists()


def test_generate_uses_config_file(tmp_path: Path):
    articles_dir = _make_articles(tmp_path)
    output_path = tmp_path / "from-config.json"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"paths:\n  articles_dir: {articles_dir.as_posix()}\n"
        f"  output_path: {output_path.as_posix()}\n"
        "logging:\n  level: ERROR\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["generate", "-c", str(config_path)])

    assert result.exit_code == 0, result.output
    assert json.loads(output_path.read_text(encoding="utf-8"))[0]["slug"] == "hello"


def test_generate_missing_directory_exits_with_error(tmp_path: Path):
    output_path = tmp_path / "manifest.json"

    result = runner.invoke(
        app,
        [
            "generate",
            "-a",
            str(tmp_path / "missing"),
            "-o",
            str(output_path),
            "--log-level",
            "ERROR",
        ],
    )

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not output_path.exists()


def test_generate_log_file_flag_writes_jsonl_next_to_manifest(tmp_path: Path):
    articles_dir = _make_articles(tmp_path)
    output_dir = tmp_path / "site"
    output_path = output_dir / "manifest.json"

    result = runner.invoke(
        app,
        ["generate", "-a", str(articles_dir), "-o", str(output_path), "--log-file"],
    )

    assert result.exit_code == 0, result.output
    lines = (output_dir / "manifest.log.jsonl").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line)["event"] for line in lines]
    assert events[0] == "manifest_start"
    assert events[-1] == "manifest_written"


def test_generate_error_message_keeps_brackets(tmp_path: Path):
    missing = tmp_path / "gone[/]"

    result = runner.invoke(
        app,
        ["generate", "-a", str(missing), "-o", str(tmp_path / "m.json"), "--log-level", "ERROR"],
    )

    assert result.exit_code == 1
    assert "gone[/]" in result.output.replace("\n", "")
