from __future__ import annotations

"""
Integration tests for the tag cloud pipeline engine.

Exercises the full read -> count -> rank -> render -> write chain on
real files, including every failure category.
"""

from pathlib import Path

from tagcloud.core.pipeline.engine import (
    KIND_EMPTY_INPUT,
    KIND_INVALID_CONFIGURATION,
    KIND_MISSING_INPUT,
    KIND_OUTPUT_EXISTS,
    run_pipeline,
)
from tagcloud.domain.models import RankedEntry


def test_pipeline_end_to_end_scenario(mock_config_dict) -> None:
    result = run_pipeline(mock_config_dict)

    assert result.ok, result.error
    assert result.entries == [RankedEntry("cat", 2), RankedEntry("mat", 1), RankedEntry("the", 3)]
    assert result.summary["distinct_words"] == 6
    assert result.summary["total_words"] == 9
    assert (result.summary["min_count"], result.summary["max_count"]) == (1, 3)

    html = Path(result.output_path).read_text(encoding="utf-8")
    assert f"<h2>Top 3 words in {mock_config_dict['input_path']}</h2>" in html
    assert 'class="f29" title="count: 2">cat</span>' in html
    assert 'class="f11" title="count: 1">mat</span>' in html
    assert 'class="f48" title="count: 3">the</span>' in html
    assert html.index(">cat<") < html.index(">mat<") < html.index(">the<")


def test_pipeline_derives_output_path(mock_config_dict, sample_text_file) -> None:
    mock_config_dict["output_path"] = ""

    result = run_pipeline(mock_config_dict)

    assert result.ok
    assert result.output_path == str(sample_text_file.with_suffix(".html"))
    assert sample_text_file.with_suffix(".html").exists()


def test_pipeline_empty_input_produces_no_output(mock_config_dict, tmp_path) -> None:
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    mock_config_dict["input_path"] = str(empty)

    result = run_pipeline(mock_config_dict)

    assert not result.ok
    assert result.error_kind == KIND_EMPTY_INPUT
    assert not Path(mock_config_dict["output_path"]).exists()


def test_pipeline_separator_only_input_renders_empty_cloud(mock_config_dict, tmp_path) -> None:
    punct = tmp_path / "punct.txt"
    punct.write_text("... !!! ???\n", encoding="utf-8")
    mock_config_dict["input_path"] = str(punct)

    result = run_pipeline(mock_config_dict)

    assert result.ok
    assert result.entries == []
    assert not any(line.startswith("<span") for line in result.html_lines)


def test_pipeline_missing_input(mock_config_dict, tmp_path) -> None:
    mock_config_dict["input_path"] = str(tmp_path / "nope.txt")

    result = run_pipeline(mock_config_dict)

    assert result.error_kind == KIND_MISSING_INPUT


def test_pipeline_blank_input_path(mock_config_dict) -> None:
    mock_config_dict["input_path"] = "   "

    result = run_pipeline(mock_config_dict)

    assert result.error_kind == KIND_MISSING_INPUT


def test_pipeline_negative_count_is_rejected_before_reading(mock_config_dict) -> None:
    mock_config_dict["word_count"] = -2

    result = run_pipeline(mock_config_dict)

    assert result.error_kind == KIND_INVALID_CONFIGURATION
    assert not Path(mock_config_dict["output_path"]).exists()


def test_pipeline_refuses_to_overwrite(mock_config_dict) -> None:
    out = Path(mock_config_dict["output_path"])
    out.parent.mkdir(parents=True)
    out.write_text("keep me", encoding="utf-8")

    result = run_pipeline(mock_config_dict)

    assert result.error_kind == KIND_OUTPUT_EXISTS
    assert out.read_text(encoding="utf-8") == "keep me"

    result = run_pipeline(mock_config_dict, overwrite=True)

    assert result.ok
    assert result.summary["output_existed"] is True
    assert out.read_text(encoding="utf-8").startswith("<html>")


def test_pipeline_dry_run_writes_nothing(mock_config_dict) -> None:
    result = run_pipeline(mock_config_dict, dry_run=True)

    assert result.ok
    assert result.summary["dry_run"] is True
    assert result.html_lines[0] == "<html>"
    assert not Path(mock_config_dict["output_path"]).exists()


def test_pipeline_zero_words(mock_config_dict) -> None:
    mock_config_dict["word_count"] = 0

    result = run_pipeline(mock_config_dict)

    assert result.ok
    assert result.entries == []
    assert "<h2>Top 0 words in" in "\n".join(result.html_lines)


def test_pipeline_uniform_counts_render_at_font_max(mock_config_dict, tmp_path) -> None:
    src = tmp_path / "uniform.txt"
    src.write_text("red green blue\nRED GREEN BLUE\n", encoding="utf-8")
    mock_config_dict["input_path"] = str(src)
    mock_config_dict["font_max"] = 40

    result = run_pipeline(mock_config_dict)

    spans = [line for line in result.html_lines if line.startswith("<span")]
    assert len(spans) == 3
    assert all('class="f40"' in s for s in spans)


def test_pipeline_never_overwrites_its_own_input(mock_config_dict, tmp_path) -> None:
    """An '.html' input with no explicit output would derive itself as target."""
    source = tmp_path / "notes.html"
    source.write_text("alpha beta beta\n", encoding="utf-8")
    mock_config_dict["input_path"] = str(source)
    mock_config_dict["output_path"] = ""

    result = run_pipeline(mock_config_dict, overwrite=True)

    assert not result.ok
    assert result.error_kind == KIND_INVALID_CONFIGURATION
    assert source.read_text(encoding="utf-8") == "alpha beta beta\n"


def test_pipeline_rejects_explicit_output_equal_to_input(mock_config_dict, sample_text_file) -> None:
    mock_config_dict["output_path"] = str(sample_text_file)

    result = run_pipeline(mock_config_dict, overwrite=True)

    assert result.error_kind == KIND_INVALID_CONFIGURATION
    assert sample_text_file.read_text(encoding="utf-8").startswith("the cat")
