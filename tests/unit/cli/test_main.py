"""
Tests for termsearch.cli.main module.

- TestParsing: item parsing, record tokenizing and labels
- TestFindCmd: find command
- TestMainFunction: main() entry point
"""

import importlib
import json
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from termsearch.cli import cli, main
from termsearch.cli.main import make_label, make_record_tokenizer, parse_items
from termsearch.core.types import Token
from termsearch.utils.logging_config import configure_logging

MACS = "Big Mac\nMacdonald Douglas\nMac\n"

PEOPLE = json.dumps(
    [
        {"name": "Joe John Johnson", "city": "Boston"},
        {"name": "John Bob Richards", "city": "Austin"},
        {"name": "Richard Noneby", "city": "Samsonmouth"},
    ]
)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    configure_logging(enable_console=False)


class TestParsing:
    """Tests for input parsing helpers."""

    def test_plain_lines(self):
        assert parse_items("a\n\n  b  \n") == ["a", "b"]

    def test_json_array(self):
        assert parse_items('[{"name": "Mac"}]') == [{"name": "Mac"}]

    def test_json_lines(self):
        assert parse_items('{"name": "Mac"}\n{"name": "Big Mac"}\n') == [
            {"name": "Mac"},
            {"name": "Big Mac"},
        ]

    def test_empty(self):
        assert parse_items("  \n") == []

    def test_malformed_json_lines_rejected(self):
        with pytest.raises(ValueError):
            parse_items('{"name": "Mac"}\n{"name": ')

    def test_bracketed_plain_lines(self):
        assert parse_items("[draft] Mac\nBig Mac\n") == ["[draft] Mac", "Big Mac"]
        assert parse_items("[1, 2") == ["[1, 2"]

    def test_record_tokenizer(self):
        tokenize = make_record_tokenizer(["name", "emails"])
        tokens = tokenize({"name": "Mac", "emails": ["a@b.com", None], "city": "Austin"})
        assert set(tokens) == {Token("Mac", "name"), Token("a@b.com", "emails")}

    def test_record_tokenizer_all_fields(self):
        tokens = make_record_tokenizer([])({"name": "Mac", "age": 40, "extra": None})
        assert {t.name for t in tokens} == {"name", "age"}

    def test_record_tokenizer_keeps_case(self):
        tokens = make_record_tokenizer([], fold_case=False)("Mac")
        assert [t.value for t in tokens] == ["Mac"]

    def test_label(self):
        assert make_label(["name", "city"])({"name": "Mac", "city": ""}) == "Mac"
        assert make_label([])("plain") == "plain"


class TestFindCmd:
    """Tests for the find command."""

    def test_plain_text_input(self):
        result = CliRunner().invoke(cli, ["find", "mac"], input=MACS)
        assert result.exit_code == 0, result.output
        lines = [line for line in result.output.splitlines() if line[:1].isdigit()]
        assert lines == [
            "1. Mac  score=2.80 [all]",
            "2. Macdonald Douglas  score=2.50 [all]",
            "3. Big Mac  score=2.35 [all]",
        ]

    def test_file_option(self, tmp_path):
        path = tmp_path / "macs.txt"
        path.write_text(MACS)
        result = CliRunner().invoke(cli, ["find", "mac", "--file", str(path), "--limit", "1"])
        assert result.exit_code == 0, result.output
        assert "1. Mac  score=2.80" in result.output
        assert not any(line.startswith("2.") for line in result.output.splitlines())

    def test_json_output_with_fields(self):
        result = CliRunner().invoke(
            cli,
            ["find", "john richards", "--field", "name", "--format", "json"],
            input=PEOPLE,
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [r["item"] for r in data["results"]] == ["John Bob Richards", "Joe John Johnson"]
        assert data["results"][0]["match_all"] is True
        assert data["results"][0]["score"] == pytest.approx(4.85)
        assert {m["name"] for m in data["results"][0]["matches"]} == {"name"}
        assert data["stats"]["items_scanned"] == 3

    def test_match_all(self):
        result = CliRunner().invoke(
            cli,
            ["find", "john richards", "--field", "name", "--match-all", "--format", "json"],
            input=PEOPLE,
        )
        assert result.exit_code == 0, result.output
        assert [r["item"] for r in json.loads(result.output)["results"]] == ["John Bob Richards"]

    def test_boost(self):
        records = json.dumps([{"name": "Adams", "city": "John"}, {"name": "John", "city": "Adams"}])
        plain = CliRunner().invoke(cli, ["find", "john", "--format", "json"], input=records)
        boosted = CliRunner().invoke(
            cli, ["find", "john", "--boost", "name=2", "--format", "json"], input=records
        )
        assert plain.exit_code == 0, plain.output
        assert boosted.exit_code == 0, boosted.output
        assert [r["item"] for r in json.loads(plain.output)["results"]] == [
            "Adams | John",
            "John | Adams",
        ]
        assert [r["item"] for r in json.loads(boosted.output)["results"]] == [
            "John | Adams",
            "Adams | John",
        ]

    def test_no_starts_with(self):
        result = CliRunner().invoke(
            cli, ["find", "mac", "--no-starts-with", "--format", "json"], input=MACS
        )
        assert result.exit_code == 0, result.output
        keys = {m["key"] for r in json.loads(result.output)["results"] for m in r["matches"]}
        assert keys == {"equals", "contains"}

    def test_case_sensitive(self):
        result = CliRunner().invoke(
            cli, ["find", "Mac", "--case-sensitive", "--format", "json"], input="mac\nMac\n"
        )
        assert result.exit_code == 0, result.output
        assert [r["item"] for r in json.loads(result.output)["results"]] == ["Mac"]

    def test_text_output_has_no_stats_by_default(self):
        result = CliRunner().invoke(cli, ["find", "mac"], input="Mac\nBig Mac\n")
        assert result.exit_code == 0, result.output
        assert "items_scanned" not in result.output
        assert result.stdout.splitlines()[0] == "1. Mac  score=2.80 [all]"

    def test_stats_for_text_go_to_stderr(self):
        result = CliRunner().invoke(cli, ["find", "mac", "--stats"], input="Mac\nBig Mac\n")
        assert result.exit_code == 0, result.output
        assert "items_scanned" not in result.stdout
        assert "# items_scanned=2 items_matched=2 results=2 terms=1" in result.stderr

    def test_stats_for_json(self):
        result = CliRunner().invoke(
            cli, ["find", "mac", "--format", "json", "--stats"], input=MACS
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["stats"]["results"] == 3
        assert "# items_scanned=3 items_matched=3 results=3" in result.stderr

    def test_bracketed_plain_text_input(self):
        result = CliRunner().invoke(cli, ["find", "mac"], input="[draft] Mac\nBig Mac\n")
        assert result.exit_code == 0, result.output
        lines = [line for line in result.stdout.splitlines() if line[:1].isdigit()]
        assert lines == [
            "1. [draft] Mac  score=2.35 [all]",
            "2. Big Mac  score=2.35 [all]",
        ]

    def test_blank_query(self):
        result = CliRunner().invoke(cli, ["find", " ", "--format", "json"], input=MACS)
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["results"] == []

    def test_bad_boost(self):
        result = CliRunner().invoke(cli, ["find", "mac", "--boost", "name"], input=MACS)
        assert result.exit_code == 2
        assert "FIELD=AMOUNT" in result.output

    def test_bad_boost_amount(self):
        result = CliRunner().invoke(cli, ["find", "mac", "--boost", "name=lots"], input=MACS)
        assert result.exit_code == 2
        assert "not a number" in result.output

    def test_negative_limit(self):
        result = CliRunner().invoke(cli, ["find", "mac", "--limit", "-1"], input=MACS)
        assert result.exit_code == 2

    def test_unparseable_input(self):
        result = CliRunner().invoke(cli, ["find", "mac"], input='{"name": "Mac"}\n{"name": ')
        assert result.exit_code == 1
        assert "Could not parse items" in result.output

    def test_help(self):
        result = CliRunner().invoke(cli, ["find", "--help"])
        assert result.exit_code == 0
        assert "--match-all" in result.output


class TestMainFunction:
    def test_main_invokes_cli(self):
        module = importlib.import_module("termsearch.cli.main")
        with patch.object(module, "cli") as mock_cli:
            main()
        mock_cli.assert_called_once_with(prog_name="termsearch")

    def test_cli_is_group(self):
        assert isinstance(cli, click.Group)
        assert "find" in cli.commands
