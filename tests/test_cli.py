"""Tests for the spgen command line."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from spgen import __version__, entropy
from spgen.alphabet import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from spgen.cli import cli
from spgen.config import DEFAULT_CONFIG


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "--length" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_default_password(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    password = result.output.strip()
    assert len(password) == 12
    assert set(password) <= set(LOWERCASE + UPPERCASE + DIGITS + SYMBOLS)


def test_length_and_classes(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-n", "30", "--no-upper", "--no-symbols"])
    assert result.exit_code == 0
    password = result.output.strip()
    assert len(password) == 30
    assert set(password) <= set(LOWERCASE + DIGITS)


def test_count(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "5", "--length", "16"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 5
    assert all(len(line) == 16 for line in lines)


@pytest.mark.parametrize("length", ["3", "129", "abc"])
def test_length_outside_range(cli_runner: CliRunner, length: str) -> None:
    result = cli_runner.invoke(cli, ["--length", length])
    assert result.exit_code == 2


def test_zero_count_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--count", "0"])
    assert result.exit_code == 2


def test_no_class_selected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["--length", "8", "--no-lower", "--no-upper", "--no-digits", "--no-symbols"]
    )
    assert result.exit_code == 2
    assert "Please select at least one character type." in result.output


def test_entropy_failure_is_fatal(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken(upper: int) -> int:
        raise OSError("no entropy")

    monkeypatch.setattr(entropy.secrets, "randbelow", broken)
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "Secure random source failed" in result.output


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "--length", "8"])
    assert result.exit_code == 0


@pytest.mark.parametrize("length", [DEFAULT_CONFIG.min_length, DEFAULT_CONFIG.max_length])
def test_length_bounds_come_from_config(cli_runner: CliRunner, length: int) -> None:
    result = cli_runner.invoke(cli, ["--length", str(length)])
    assert result.exit_code == 0
    assert len(result.output.strip()) == length
