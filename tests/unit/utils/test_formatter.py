"""Tests for termsearch.utils.formatter module."""

from __future__ import annotations

import json

from rich.console import Console

from termsearch.core.types import (
    Boost,
    OutputFormat,
    SearchOutcome,
    SearchStats,
    TermMatch,
    TermSearchResult,
    Token,
)
from termsearch.utils.formatter import (
    format_result,
    format_stats,
    format_text,
    render_highlight_console,
    to_json_bytes,
)


def _outcome() -> SearchOutcome:
    result = TermSearchResult.from_matches(
        "Mac", [TermMatch.equals("mac", Token("Mac", "name"))], 1
    )
    result.score.add(Boost.of_amount(2.8))
    stats = SearchStats(items_scanned=3, items_matched=1, results=1, elapsed_ms=1.25, terms=1)
    return SearchOutcome([result], stats)


class TestFormatText:
    def test_lines(self):
        lines = format_text(_outcome()).splitlines()
        assert lines[0] == "1. Mac  score=2.80 [all]"
        assert lines[1].strip() == "equals:mac->name: mac"
        assert lines[-1].startswith("# items_scanned=3 items_matched=1 results=1 terms=1")

    def test_without_stats(self):
        assert "#" not in format_text(_outcome(), stats=False)

    def test_label(self):
        assert format_text(_outcome(), label=lambda item: item.upper()).startswith("1. MAC")

    def test_empty(self):
        assert format_text(SearchOutcome(), stats=False) == ""


class TestJson:
    def test_payload(self):
        data = json.loads(to_json_bytes(_outcome()))
        result = data["results"][0]
        assert result["rank"] == 1
        assert result["item"] == "Mac"
        assert result["score"] == 2.8
        assert result["match_all"] is True
        assert result["matched_terms"] == ["mac"]
        assert result["matches"] == [
            {"key": "equals", "term": "mac", "token": "mac", "name": "name"}
        ]
        assert data["stats"]["items_scanned"] == 3

    def test_format_result_json(self):
        assert json.loads(format_result(_outcome(), OutputFormat.JSON))["results"]


class TestFormatResult:
    def test_text(self):
        assert format_result(_outcome(), OutputFormat.TEXT).startswith("1. Mac")

    def test_highlight_without_tty_falls_back_to_text(self):
        # pytest captures stdout, so it is never a tty here
        assert format_result(_outcome(), OutputFormat.HIGHLIGHT).startswith("1. Mac")

    def test_text_without_stats(self):
        rendered = format_result(_outcome(), OutputFormat.TEXT, stats=False)
        assert rendered.splitlines() == ["1. Mac  score=2.80 [all]"]

    def test_stats_line(self):
        assert format_stats(_outcome()) == (
            "# items_scanned=3 items_matched=1 results=1 terms=1 elapsed_ms=1.25"
        )


class TestRichConsole:
    def test_table(self):
        console = Console(record=True, width=120)
        render_highlight_console(_outcome(), console=console)
        text = console.export_text()
        assert "Mac" in text
        assert "2.80" in text
        assert "items_scanned=3" in text
