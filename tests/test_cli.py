import pytest
from click.testing import CliRunner

import main
from main import cli


@pytest.fixture
def cli_runner(monkeypatch):
    monkeypatch.setattr(main.Config, "PAUSE_BETWEEN_RUNS", 0.0)
    return CliRunner()


def test_run_prints_tables_and_summary(cli_runner):
    result = cli_runner.invoke(cli, ["run", "--sizes", "50,100"])

    assert result.exit_code == 0, result.output
    assert "Summary" in result.output
    assert "Recommendation" in result.output
    assert "Testing 50 operations" in result.output
    assert "Testing 100 operations" in result.output


def test_run_with_details(cli_runner):
    result = cli_runner.invoke(cli, ["run", "-s", "40", "--details"])

    assert result.exit_code == 0, result.output
    assert "iterations" in result.output


def test_run_rejects_non_positive_size(cli_runner):
    result = cli_runner.invoke(cli, ["run", "-s", "100,0"])

    assert result.exit_code == 1
    assert "positive integer" in result.output


def test_run_rejects_garbage_sizes(cli_runner):
    result = cli_runner.invoke(cli, ["run", "-s", "ten"])
    assert result.exit_code == 2


def test_run_rejects_unknown_variant(cli_runner):
    result = cli_runner.invoke(cli, ["run", "-s", "10", "--variant-a", "vector"])

    assert result.exit_code == 1
    assert "Unknown sequence" in result.output


def test_details_command(cli_runner):
    result = cli_runner.invoke(cli, ["details", "--size", "100"])

    assert result.exit_code == 0, result.output
    assert "Detailed analysis for 100 operations" in result.output
    assert "Conclusions" in result.output


def test_details_rejects_zero(cli_runner):
    result = cli_runner.invoke(cli, ["details", "--size", "0"])
    assert result.exit_code == 1


def test_list_sequences(cli_runner):
    result = cli_runner.invoke(cli, ["list-sequences"])

    assert result.exit_code == 0
    assert "list" in result.output
    assert "deque" in result.output
    assert "LinkedSequence" in result.output


def test_run_rejects_empty_default_sizes(cli_runner, monkeypatch):
    monkeypatch.setattr(main.Config, "DEFAULT_SIZES", [])

    result = cli_runner.invoke(cli, ["run"])

    assert result.exit_code == 1
    assert "No operation counts given" in result.output
    assert "List Benchmark" not in result.output


def test_run_rejects_separator_only_sizes(cli_runner):
    result = cli_runner.invoke(cli, ["run", "-s", ","])

    assert result.exit_code == 1
    assert "No operation counts given" in result.output


def test_run_rejects_repeated_sizes(cli_runner):
    result = cli_runner.invoke(cli, ["run", "-s", "100,100"])

    assert result.exit_code == 1
    assert "unique" in result.output
