"""
Command-line interface for termsearch.

The ``find`` command ranks records read from a file or stdin against a query.
Input may be a JSON array, JSON lines, or plain text with one item per line.
JSON records are tokenized into one named token per selected field, so that
``--boost`` can weight specific fields.

Example Usage:
    Rank plain lines:
        $ printf 'Mac\\nMacdonald Douglas\\nBig Mac\\n' | termsearch find "mac"

    Rank JSON records by two fields, requiring every term to match:
        $ termsearch find "john richards" --file people.json \\
          --field name --field address --match-all --format json

    Weight matches on the name field:
        $ termsearch find "john" --file people.jsonl --boost name=2.5 --limit 3

For more information, run: termsearch find --help
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import click
import orjson

from ..core.api import FullTextSearch
from ..core.config import SearchConfig
from ..core.types import Boost, OutputFormat, TokenList
from ..search.scorer import BoostTokenScoring, SearchScoring, default_scorers
from ..utils.error_handling import SearchError
from ..utils.formatter import format_result, format_stats
from ..utils.logging_config import LogFormat, LogLevel, configure_logging


def parse_items(text: str) -> list[Any]:
    """Parse a JSON array, JSON lines, or plain text lines into items.

    Text that merely starts with ``[`` but is not a JSON array is read as
    plain lines. Malformed JSON lines are an error.
    """
    stripped = text.strip()
    if not stripped:
        return []
    if stripped.startswith("["):
        try:
            data = orjson.loads(stripped)
        except orjson.JSONDecodeError:
            data = None
        if isinstance(data, list):
            return data
    lines = [line for line in stripped.splitlines() if line.strip()]
    if all(line.lstrip().startswith("{") for line in lines):
        return [orjson.loads(line) for line in lines]
    return [line.strip() for line in lines]


def make_record_tokenizer(
    fields: Sequence[str], fold_case: bool = True
) -> Callable[[Any], TokenList]:
    """Build a tokenizer producing one named token per record field value."""

    def tokenize(item: Any) -> TokenList:
        tokens = TokenList()
        if not isinstance(item, dict):
            if item is not None:
                tokens.add_token(str(item), fold_case=fold_case)
            return tokens
        names = fields or [k for k, v in item.items() if isinstance(v, (str, int, float, list))]
        for name in names:
            value = item.get(name)
            if isinstance(value, list):
                tokens.add_named(
                    name, [str(v) for v in value if v is not None], fold_case=fold_case
                )
            elif value is not None and value != "":
                tokens.add_token(str(value), name, fold_case=fold_case)
        return tokens

    return tokenize


def make_label(fields: Sequence[str]) -> Callable[[Any], str]:
    def label(item: Any) -> str:
        if isinstance(item, dict):
            keys = fields or list(item)
            return " | ".join(str(item[k]) for k in keys if item.get(k) not in (None, ""))
        return str(item)

    return label


def _parse_boosts(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, Boost]:
    boosts: dict[str, Boost] = {}
    for value in values:
        name, sep, amount = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected FIELD=AMOUNT, got {value!r}")
        try:
            boosts[name] = Boost.of_amount(float(amount), f"field_{name}")
        except ValueError:
            raise click.BadParameter(f"amount for {name!r} is not a number: {amount!r}") from None
    return boosts


@click.group()
@click.version_option(package_name="termsearch")
def cli() -> None:
    """termsearch - fuzzy term matching and ranking"""
    pass


@cli.command("find")
@click.argument("query")
@click.option(
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Items to search: JSON array, JSON lines or plain text lines (default: stdin)",
)
@click.option("--field", "fields", multiple=True, help="Record field to tokenize; repeatable")
@click.option("--match-all", is_flag=True, default=False, help="Require every term to match")
@click.option("--no-starts-with", is_flag=True, default=False, help="Disable prefix matching")
@click.option("--case-sensitive", is_flag=True, default=False, help="Match case-sensitively")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Maximum results")
@click.option(
    "--boost",
    "boosts",
    multiple=True,
    callback=_parse_boosts,
    help="Extra score for matches on a field, as FIELD=AMOUNT; repeatable",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--stats", is_flag=True, default=False, help="Print execution statistics to stderr")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Log level",
)
@click.option("--log-file", help="Log file path")
@click.option(
    "--log-format",
    type=click.Choice(["simple", "detailed", "json", "structured"]),
    default="simple",
    help="Log format",
)
def find_cmd(
    query: str,
    source: Any,
    fields: tuple[str, ...],
    match_all: bool,
    no_starts_with: bool,
    case_sensitive: bool,
    limit: int | None,
    boosts: dict[str, Boost],
    fmt: str,
    stats: bool,
    debug: bool,
    log_level: str,
    log_file: str | None,
    log_format: str,
) -> None:
    """Rank items read from --file (or stdin) against QUERY."""
    if debug:
        log_level = "DEBUG"
    logger = configure_logging(
        level=LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=Path(log_file) if log_file else None,
        enable_file=bool(log_file),
        enable_console=True,
    )

    try:
        items = parse_items(source.read())
    except (ValueError, orjson.JSONDecodeError) as e:
        raise click.ClickException(f"Could not parse items: {e}") from e

    cfg = SearchConfig(
        query=query,
        match_all=match_all,
        starts_with=not no_starts_with,
        ignore_case=not case_sensitive,
        limit=limit,
    )
    scorers: list[SearchScoring] = default_scorers()
    if boosts:
        scorers.append(BoostTokenScoring(boosts))

    try:
        search = FullTextSearch.from_config(
            cfg,
            items,
            make_record_tokenizer(fields, fold_case=cfg.ignore_case),
            scorers=scorers,
            logger=logger,
        )
        outcome = search.execute_with_stats()
    except SearchError as e:
        raise click.ClickException(e.message) from e

    label = make_label(fields)
    # a tty highlight table is printed by the formatter itself
    rendered = format_result(outcome, OutputFormat(fmt), label, stats=False)
    if rendered:
        click.echo(rendered)

    if stats:
        click.echo(format_stats(outcome), err=True)


def main() -> None:
    cli(prog_name="termsearch")


if __name__ == "__main__":
    main()
