import logging

import pytest

from flagparse import FlagParser


def build_parser(**kwargs) -> FlagParser:
    parser = FlagParser(program="buy-servers", **kwargs)
    parser.number("money-factor").short_opt("m").default("0.9")
    return parser


def test_success_returns_result():
    parser = build_parser()
    result = parser.parse_or_exit(["-m", "0.5", "hack.js"])
    assert result.early_exit is False
    assert result["money-factor"] == 0.5
    assert result.positionals == ("hack.js",)


def test_error_prints_reason_and_exits(capsys):
    parser = build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_or_exit(["--nope"])
    assert excinfo.value.code == 2
    out = capsys.readouterr().out
    assert out.startswith("unknown long option '--nope'")
    assert "Usage: buy-servers [OPTIONS]" in out


def test_help_exits_cleanly(capsys):
    parser = build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_or_exit(["-h"])
    assert excinfo.value.code == 0
    assert "--money-factor <number>" in capsys.readouterr().out


def test_no_exit_returns_early_exit_result(capsys):
    parser = build_parser(exit_on_error=False)
    result = parser.parse_or_exit(["-m", "lots"])
    assert result.early_exit is True
    assert result.values == {}
    assert "invalid number value 'lots' for option -m" in capsys.readouterr().out

    result = parser.parse_or_exit(["--help"])
    assert result.early_exit is True
    capsys.readouterr()


def test_failure_is_logged(caplog, capsys):
    parser = build_parser(exit_on_error=False)
    with caplog.at_level(logging.DEBUG, logger="flagparse"):
        parser.parse_or_exit(["-x"])
    assert "Parse failed for buy-servers" in caplog.text
    capsys.readouterr()
