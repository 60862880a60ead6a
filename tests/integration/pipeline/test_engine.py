from __future__ import annotations

"""
Integration tests for the docsee pipeline.

Runs the full build → aggregate → render → write chain against the
in-memory FakeGitHub and checks the result object and the written page.
"""

import logging
from pathlib import Path

from docsee.core.pipeline.engine import run_pipeline
from docsee.domain.stats_models import AggregateStatistics


def test_pipeline_happy_path(fake_github, scenario_layout, mock_config_dict):
    gh = fake_github(scenario_layout)

    result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert result.ok is True
    assert (result.owner, result.repository) == ("octo", "docs")
    assert result.statistics == AggregateStatistics(
        folder_count=1, file_count=2, word_count=2, total_size_bytes=11
    )
    assert result.failures == []

    page = Path(result.output_path).read_text(encoding="utf-8")
    assert page.startswith("<!DOCTYPE html>")
    assert '<a href="https://raw.test/a.md" target="_blank">a.md</a>' in page
    assert "{{content}}" not in page and "{{analysis}}" not in page
    assert result.summary["template"] == "(built-in)"
    assert result.summary["failed_files"] == 0


def test_pipeline_isolates_file_failures(fake_github, scenario_layout, mock_config_dict, caplog):
    gh = fake_github(scenario_layout, failing_files={"docs/b.md"})

    with caplog.at_level(logging.WARNING):
        result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert result.ok is True
    assert result.statistics.file_count == 2
    assert result.statistics.word_count == 2
    assert result.statistics.total_size_bytes == 11
    assert [f.name for f in result.failures] == ["b.md"]
    assert result.summary["failed_files"] == 1
    assert "could not be fetched" in caplog.text


def test_pipeline_root_listing_failure(fake_github, scenario_layout, mock_config_dict):
    gh = fake_github(scenario_layout, failing_listings={""})

    result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert result.ok is False
    assert "Failed to fetch" in result.error
    assert result.statistics is None
    assert result.tree == {}
    assert result.summary["status_code"] == 404
    assert gh.fetched == []
    assert not Path(mock_config_dict["output_path"]).exists()


def test_pipeline_rejects_bad_repository(fake_github, mock_config_dict):
    gh = fake_github({})
    mock_config_dict["repository"] = "no-slash"

    result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert result.ok is False
    assert "owner/repository" in result.error
    assert gh.listed == []


def test_pipeline_custom_template(fake_github, scenario_layout, mock_config_dict, tmp_path):
    template = tmp_path / "custom.html"
    template.write_text("<body>[{{analysis}}]({{content}})</body>", encoding="utf-8")
    mock_config_dict["template_path"] = str(template)
    gh = fake_github(scenario_layout)

    result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    page = Path(result.output_path).read_text(encoding="utf-8")
    assert page.startswith("<body>[")
    assert "(<ul class='tree'>" in page
    assert result.summary["template"] == str(template)


def test_pipeline_uses_template_in_working_directory(fake_github, scenario_layout, mock_config_dict,
                                                     tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "template.html").write_text("CWD {{analysis}} {{content}}", encoding="utf-8")
    gh = fake_github(scenario_layout)

    result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert Path(result.output_path).read_text(encoding="utf-8").startswith("CWD ")


def test_pipeline_missing_template_is_fatal(fake_github, scenario_layout, mock_config_dict, tmp_path):
    mock_config_dict["template_path"] = str(tmp_path / "nope.html")
    gh = fake_github(scenario_layout)

    result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert result.ok is False
    assert "Failed to read template" in result.error


def test_pipeline_parallel_workers(fake_github, mock_config_dict):
    layout = {f"f{i}.md": "w " * i for i in range(10)}
    layout["sub"] = {"g.md": "one two"}
    gh = fake_github(layout)
    mock_config_dict["workers"] = 4

    result = run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert result.ok is True
    assert result.statistics.file_count == 11
    assert result.statistics.folder_count == 1
    assert result.statistics.word_count == sum(range(10)) + 2
    assert result.summary["workers"] == 4


def test_pipeline_print_tree(fake_github, scenario_layout, mock_config_dict, caplog):
    mock_config_dict["print_tree"] = True
    gh = fake_github(scenario_layout)

    with caplog.at_level(logging.INFO):
        run_pipeline(mock_config_dict, "tok", fetch_listing=gh.list, fetch_body=gh.fetch)

    assert "Tree Preview:" in caplog.text
    assert "└── docs/" in caplog.text
