"""Tests for the command line front end.

Test coverage:
- Reading lines from a stream (LF/CRLF, whitespace, empty lines)
- Output line format, with and without verbose mode
- Config from argparse flags
- main(): stdin, --input, --deal, error exit status
"""

import io

import pytest

from holdem.engine import InputError, rank_hands
from holdem.rules import CardSet, Hand
from holdem.scripts.rank_hands import (
    RankConfig,
    build_parser,
    format_ranking,
    format_rankings,
    main,
    read_input,
)

TABLE = "KH KD KS AD AS\nBar TS JD\nFoo AC TD\n"


class TestReadInput:
    """Tests for read_input."""

    def test_reads_lines(self):
        assert read_input(io.StringIO("foo\nbar")) == ["foo", "bar"]

    def test_crlf_line_endings(self):
        assert read_input(io.StringIO("foo\r\nbar")) == ["foo", "bar"]

    def test_strips_whitespace(self):
        lines = read_input(io.StringIO(" \tfoo   \r\nbar\t\nbaz"))
        assert lines == ["foo", "bar", "baz"]

    def test_skips_empty_lines(self):
        assert read_input(io.StringIO("foo\n\n   \nbar\n\n")) == ["foo", "bar"]

    @pytest.mark.parametrize("text", ["", "foo", "foo\n", "foo\r\n", "foo\n\n\n"])
    def test_requires_two_lines(self, text):
        with pytest.raises(InputError, match="At least 2 lines of input are required."):
            read_input(io.StringIO(text))


class TestFormat:
    """Tests for the output lines."""

    def setup_method(self):
        self.rankings = rank_hands(
            CardSet.from_string("KH KD KS AD AS"),
            [Hand.from_string("Bar TS JD"), Hand.from_string("Foo AC TD")],
        )

    def test_plain_lines(self):
        assert format_rankings(self.rankings) == [
            "1 Foo Full House Ace King",
            "2 Bar Full House King Ace",
        ]

    def test_verbose_line(self):
        line = format_ranking(self.rankings[0], verbose=True)
        assert line == "1 Foo Full House Ace King [AC TD] (AD AS AC KD KH)"


class TestConfig:
    """Tests for RankConfig built from flags."""

    def test_defaults(self):
        config = RankConfig.from_args(build_parser().parse_args([]))
        assert config == RankConfig()

    def test_verbose_raises_log_level(self):
        config = RankConfig.from_args(build_parser().parse_args(["-v"]))
        assert config.verbose
        assert config.log_level == "INFO"

    def test_explicit_log_level_wins(self):
        config = RankConfig.from_args(build_parser().parse_args(["-v", "--log-level", "debug"]))
        assert config.log_level == "DEBUG"

    def test_deal_and_seed(self):
        config = RankConfig.from_args(build_parser().parse_args(["--deal", "3", "--seed", "7", "--no-color"]))
        assert config.deal == 3
        assert config.seed == 7
        assert not config.color


class TestMain:
    """Tests for the main entry point."""

    def test_ranks_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(TABLE))
        assert main([]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["1 Foo Full House Ace King", "2 Bar Full House King Ace"]

    def test_verbose(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(TABLE))
        assert main(["--verbose"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[1] == "2 Bar Full House King Ace [TS JD] (KD KH KS AD AS)"

    def test_input_file(self, tmp_path, capsys):
        path = tmp_path / "table.txt"
        path.write_text("2C 4D 6S 8H TC\nP1 3S 5H\n", encoding="utf-8")
        assert main(["--input", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == ["1 P1 Straight 6"]

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().out.startswith("Error: ")

    def test_error_exit(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("KH KD KS AD\nFoo AC TD\n"))
        assert main([]) == 1
        assert capsys.readouterr().out.strip() == "Error: 5 community cards are required."

    def test_too_few_lines(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("KH KD KS AD AS\n"))
        assert main([]) == 1
        assert capsys.readouterr().out.strip() == "Error: At least 2 lines of input are required."

    def test_deal(self, capsys):
        assert main(["--deal", "3", "--seed", "42"]) == 0
        out = capsys.readouterr().out.splitlines()
        # Four table lines, then three ranking lines
        assert len(out) == 7
        assert out[4].startswith("1 ")

    def test_deal_is_reproducible(self, capsys):
        main(["--deal", "3", "--seed", "42"])
        first = capsys.readouterr().out
        main(["--deal", "3", "--seed", "42"])
        assert capsys.readouterr().out == first

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--help"])
        assert excinfo.value.code == 0
        assert "Royal Flush" in capsys.readouterr().out
