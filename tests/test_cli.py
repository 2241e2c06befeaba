"""Tests for the root wordladder CLI."""

import pytest
from click.testing import CliRunner

from wordladder import __version__
from wordladder.cli import cli

EXPECTED_COMMANDS = ["path", "distance", "neighbors", "stats"]


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "wordladder" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output


def test_help_lists_commands_in_registration_order(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    positions = [result.output.index(f"  {command} ") for command in EXPECTED_COMMANDS]
    assert positions == sorted(positions)


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_help_names_word_sources(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert "-w/--words" in result.output
    assert "wordladder.toml" in result.output


def test_examples_are_indented(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["path", "--examples"])
    lines = [line for line in result.output.splitlines()[1:] if line]
    assert lines
    assert all(line.startswith("  wordladder ") for line in lines)
