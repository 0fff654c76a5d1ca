"""
Tests for the Typer CLI.
"""

import pytest
from typer.testing import CliRunner

from callbooking.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("locale: en\ntimezone: America/Sao_Paulo\n", encoding="utf-8")
    return path


def test_time_intervals_defaults(config_file):
    result = runner.invoke(app, ["time-intervals", "--defaults", "--mock", "--config", str(config_file)])

    assert result.exit_code == 0, result.output
    assert "Monday" in result.output
    assert "5 day(s) saved" in result.output


def test_time_intervals_with_day_options(config_file):
    result = runner.invoke(
        app,
        ["time-intervals", "--day", "0=09:00-11:00", "--disable", "5", "--mock", "--config", str(config_file)],
    )

    assert result.exit_code == 0, result.output
    assert "Sunday" in result.output
    assert "5 day(s) saved" in result.output


def test_time_intervals_too_short(config_file):
    result = runner.invoke(
        app,
        ["time-intervals", "--day", "1=08:00-08:30", "--mock", "--config", str(config_file)],
    )

    assert result.exit_code == 1
    assert "End time must be at least 1 hour after start time" in result.output


def test_time_intervals_interactive(config_file):
    """Declining every day ends with the empty selection message."""
    result = runner.invoke(
        app,
        ["time-intervals", "--mock", "--config", str(config_file)],
        input="n\n" * 7,
    )

    assert result.exit_code == 1
    assert "You must select at least one day of the week" in result.output


def test_confirm_mock(config_file):
    result = runner.invoke(
        app,
        [
            "confirm", "jane-doe",
            "--date", "2024-03-15T14:00",
            "--name", "John Doe",
            "--email", "john@example.com",
            "--mock",
            "--config", str(config_file),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "15 de March de 2024" in result.output
    assert "Booking confirmed" in result.output


def test_confirm_invalid_name(config_file):
    result = runner.invoke(
        app,
        [
            "confirm", "jane-doe",
            "--date", "2024-03-15T14:00",
            "--name", "Jo",
            "--email", "john@example.com",
            "--mock",
            "--config", str(config_file),
        ],
    )

    assert result.exit_code == 1
    assert "Name must have at least 3 characters" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "callbooking" in result.output


@pytest.mark.parametrize("date", ["P1D", "not a date"])
def test_confirm_rejects_value_that_is_not_a_moment(config_file, date):
    """Durations and garbage stop with a message, not a traceback."""
    result = runner.invoke(
        app,
        [
            "confirm", "jane-doe",
            "--date", date,
            "--name", "John Doe",
            "--email", "john@example.com",
            "--mock",
            "--config", str(config_file),
        ],
    )

    assert result.exit_code == 1
    assert "Could not parse date" in result.output
    assert not isinstance(result.exception, AttributeError)
