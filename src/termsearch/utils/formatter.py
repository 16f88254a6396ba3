"""
Output formatting module for termsearch.

This module renders ranked search outcomes as plain text, JSON or a rich
console table. Every format shows, per result, its rank, score, match-all
flag, matched terms and the match records that explain the score.

Key Functions:
    format_result: Main entry point for formatting an outcome in any supported format
    to_json_bytes: JSON serialization using orjson
    format_text: Plain text formatting
    render_highlight_console: Rich table output
    format_stats: One-line execution statistics summary

Example:
    >>> from termsearch.utils.formatter import format_result
    >>> from termsearch.core.types import OutputFormat
    >>>
    >>> outcome = search.execute_with_stats()
    >>> print(format_result(outcome, OutputFormat.TEXT))
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import asdict
from typing import Any

import orjson
from rich.console import Console
from rich.table import Table

from ..core.types import OutputFormat, SearchOutcome, TermSearchResult

ItemLabel = Callable[[Any], str]


def _default_label(item: Any) -> str:
    return str(item)


def _result_payload(rank: int, result: TermSearchResult[Any], label: ItemLabel) -> dict[str, Any]:
    return {
        "rank": rank,
        "item": label(result.item),
        "score": result.score_value,
        "match_all": result.match_all,
        "matched_terms": sorted(result.matched_terms),
        "matches": [
            {"key": m.key, "term": m.term, "token": m.token.value, "name": m.token.name}
            for m in sorted(result.matched_tokens, key=lambda m: (m.term, m.key, m.token.value))
        ],
    }


def to_json_bytes(outcome: SearchOutcome[Any], label: ItemLabel = _default_label) -> bytes:
    """Serialize an outcome to indented JSON bytes."""
    payload = {
        "results": [
            _result_payload(rank, result, label)
            for rank, result in enumerate(outcome.results, start=1)
        ],
        "stats": asdict(outcome.stats),
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_stats(outcome: SearchOutcome[Any]) -> str:
    """One-line ``# key=value`` summary of the execution statistics."""
    s = outcome.stats
    return (
        f"# items_scanned={s.items_scanned} items_matched={s.items_matched} "
        f"results={s.results} terms={s.terms} elapsed_ms={s.elapsed_ms:.2f}"
    )


def format_text(
    outcome: SearchOutcome[Any], label: ItemLabel = _default_label, stats: bool = True
) -> str:
    """
    Format an outcome as plain text, one block per result.

    Example output:
        1. Mac  score=2.30
             equals:mac->mac
    """
    out: list[str] = []
    for rank, result in enumerate(outcome.results, start=1):
        flag = " [all]" if result.match_all else ""
        out.append(f"{rank}. {label(result.item)}  score={result.score_value:.2f}{flag}")
        for line in result.explain():
            out.append(f"     {line}")
    if stats:
        out.append(format_stats(outcome))
    return "\n".join(out)


def render_highlight_console(
    outcome: SearchOutcome[Any],
    console: Console | None = None,
    label: ItemLabel = _default_label,
    stats: bool = True,
) -> None:
    """Render an outcome as a rich table."""
    if console is None:
        console = Console()
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Item")
    table.add_column("Score", justify="right")
    table.add_column("All", justify="center")
    table.add_column("Matches")
    for rank, result in enumerate(outcome.results, start=1):
        table.add_row(
            str(rank),
            label(result.item),
            f"{result.score_value:.2f}",
            "✓" if result.match_all else "",
            "\n".join(result.explain()),
        )
    console.print(table)
    if stats:
        console.print(f"[dim]{format_stats(outcome)}[/dim]")


def format_result(
    outcome: SearchOutcome[Any],
    fmt: OutputFormat,
    label: ItemLabel = _default_label,
    stats: bool = True,
) -> str:
    """
    Format an outcome according to the specified output format.

    ``stats`` controls the trailing summary line of the text and table
    formats; JSON always carries its ``stats`` object.
    """
    if fmt == OutputFormat.JSON:
        return to_json_bytes(outcome, label).decode("utf-8")
    if fmt == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
        render_highlight_console(outcome, label=label, stats=stats)
        return ""
    return format_text(outcome, label, stats=stats)
