from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

The pipeline is patched out; these tests cover exit codes, credential
checks and the two output modes.
"""

import json

import pytest

from docsee.domain.errors import ListingFetchError
from docsee.domain.listing_models import FileFetchFailure
from docsee.domain.pipeline_models import create_error_result, create_success_result
from docsee.domain.stats_models import AggregateStatistics
from docsee.domain.tree_models import leaf
from docsee.infra.logging import shutdown_logging
from docsee.interface.cli import app


@pytest.fixture(autouse=True)
def reset_logging():
    """The controller configures logging; detach it after every test."""
    yield
    shutdown_logging()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with a known token."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    return tmp_path


def _success():
    return create_success_result(
        "octo", "docs", "/tmp/index.html",
        {"a.md": leaf("https://raw.test/a.md")},
        AggregateStatistics(folder_count=1, file_count=2, word_count=2, total_size_bytes=11),
        [FileFetchFailure("b.md", "https://raw.test/docs/b.md", "HTTP 404 Not Found")],
    )


def test_missing_repository_option(isolated_env, capsys):
    assert app.main([]) == 1
    assert "Usage: docsee --github owner/repository" in capsys.readouterr().err


def test_malformed_repository(isolated_env, capsys):
    assert app.main(["--github", "octo"]) == 1
    assert "owner/repository" in capsys.readouterr().err


def test_missing_token(isolated_env, monkeypatch, capsys):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    assert app.main(["--github", "octo/docs"]) == 1
    assert "GITHUB_TOKEN not set" in capsys.readouterr().err


def test_success_human_summary(isolated_env, monkeypatch, capsys):
    calls = []

    def fake_run(cfg, token):
        calls.append((cfg, token))
        return _success()

    monkeypatch.setattr(app, "run_pipeline", fake_run)

    assert app.main(["--github", "octo/docs", "--workers", "3"]) == 0

    cfg, token = calls[0]
    assert token == "env-token"
    assert cfg["repository"] == "octo/docs"
    assert cfg["workers"] == 3

    out = capsys.readouterr().out
    assert "File count: 2" in out
    assert "Average file size: 0.01 KB" in out
    assert "b.md: HTTP 404 Not Found" in out


def test_token_from_env_file(isolated_env, monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    (isolated_env / ".env").write_text("GITHUB_TOKEN=file-token\n", encoding="utf-8")
    tokens = []
    monkeypatch.setattr(app, "run_pipeline", lambda cfg, token: tokens.append(token) or _success())

    assert app.main(["--github", "octo/docs"]) == 0
    assert tokens == ["file-token"]


def test_json_output(isolated_env, monkeypatch, capsys):
    monkeypatch.setattr(app, "run_pipeline", lambda cfg, token: _success())

    assert app.main(["--github", "octo/docs", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is True
    assert data["statistics"]["word_count"] == 2
    assert data["tree"] == {"a.md": "https://raw.test/a.md"}


def test_fatal_pipeline_failure(isolated_env, monkeypatch, capsys):
    error = ListingFetchError("https://api.github.com/repos/octo/docs/contents/", "Bad credentials", 401)
    monkeypatch.setattr(app, "run_pipeline", lambda cfg, token: create_error_result(str(error), "octo", "docs"))

    assert app.main(["--github", "octo/docs"]) == 1
    assert "ERROR: Failed to fetch" in capsys.readouterr().err


def test_keyboard_interrupt(isolated_env, monkeypatch):
    def interrupted(cfg, token):
        raise KeyboardInterrupt

    monkeypatch.setattr(app, "run_pipeline", interrupted)

    assert app.main(["--github", "octo/docs"]) == 130
