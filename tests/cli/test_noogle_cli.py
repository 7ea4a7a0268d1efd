import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from noogle.cli.app import app

runner = CliRunner()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    data = [
        {
            "meta": {
                "title": "lib.lists.concat",
                "path": ["lib", "lists", "concat"],
                "aliases": [["lib", "concat"]],
                "signature": "concat :: [a] -> [a] -> [a]",
                "count_applied": 0,
                "attr_position": {"file": "/a/b/c/d/lib/lists.nix", "line": 12, "column": 3},
            },
            "content": {"content": "# Examples\n\nJoin lists."},
        },
        {"meta": {"title": "lib.id", "path": ["lib", "id"]}},
    ]
    (tmp_path / "data.json").write_text(json.dumps(data))
    (tmp_path / ".noogle.toml").write_text('[source]\nbase_url = "https://x/y"\n')
    return tmp_path


def test_build_command(site_root: Path) -> None:
    result = runner.invoke(app, ["build", "--site-root", str(site_root), "--log-level", "WARNING"])

    assert result.exit_code == 0, result.output
    assert "Rendered 2 pages" in result.output
    assert (site_root / "dist" / "f" / "lib" / "id" / "index.html").is_file()


def test_build_command_missing_corpus(tmp_path: Path) -> None:
    result = runner.invoke(app, ["build", "--site-root", str(tmp_path), "--log-level", "WARNING"])

    assert result.exit_code == 1
    assert "Build failed" in result.output


def test_show_command(site_root: Path) -> None:
    result = runner.invoke(app, ["show", "lib.lists.concat", "--site-root", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "list, list" in result.output
    assert "lib.concat" in result.output


def test_show_command_unknown_entry(site_root: Path) -> None:
    result = runner.invoke(app, ["show", "lib.nope", "--site-root", str(site_root)])

    assert result.exit_code == 1
    assert "No documentation found yet." in result.output


def test_paths_command(site_root: Path) -> None:
    result = runner.invoke(app, ["paths", "--site-root", str(site_root)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["lib/lists/concat", "lib/id"]


def test_cli_paths_are_relative_to_working_directory(
    site_root: Path, tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    workdir = tmp_path_factory.mktemp("workdir")
    (workdir / "corpus.json").write_text((site_root / "data.json").read_text())
    monkeypatch.chdir(workdir)

    result = runner.invoke(
        app,
        ["build", "--site-root", str(site_root), "--data", "corpus.json", "--out", "public", "--log-level", "WARNING"],
    )

    assert result.exit_code == 0, result.output
    assert (workdir / "public" / "f" / "lib" / "id" / "index.html").is_file()
    assert not (site_root / "public").exists()
