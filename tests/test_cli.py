"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from stronk.cli import main
from stronk.config import get_settings
from stronk.errors import RoutineError


@pytest.fixture
def runner(temp_db_path, monkeypatch):
    """CLI runner pointed at a temporary database."""
    monkeypatch.setenv("STRONK_DB_FILE", str(temp_db_path))
    monkeypatch.setenv("STRONK_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


@pytest.fixture
def initialized(runner):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


def set_maxes(runner, denom="2.5"):
    return runner.invoke(
        main,
        [
            "tm", "set",
            "--press", "127.5",
            "--squat", "230",
            "--bench", "190",
            "--deadlift", "280",
            "--smallest-denom", denom,
        ],
    )


class TestInit:
    def test_init(self, runner, temp_db_path):
        result = runner.invoke(main, ["init"])

        assert result.exit_code == 0
        assert "Database initialized" in result.output
        assert temp_db_path.exists()

    def test_commands_need_init(self, runner):
        result = runner.invoke(main, ["next"])

        assert result.exit_code == 1
        assert "stronk init" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestTrainingMaxCommands:
    def test_show_empty(self, initialized):
        result = initialized.invoke(main, ["tm", "show"])

        assert result.exit_code == 0
        assert "No training maxes set" in result.output

    def test_set_and_show(self, initialized):
        assert set_maxes(initialized).exit_code == 0

        result = initialized.invoke(main, ["tm", "show"])

        assert result.exit_code == 0
        assert "Overhead Press" in result.output
        assert "127.5" in result.output
        assert "Smallest denomination: 2.5" in result.output

    def test_bad_weight(self, initialized):
        """Weights with two decimal places are a usage error."""
        result = set_maxes(initialized, denom="1.25")

        assert result.exit_code == 2
        assert "one digit" in result.output


class TestLiftCommands:
    def test_next(self, initialized):
        set_maxes(initialized)
        result = initialized.invoke(main, ["next"])

        assert result.exit_code == 0
        assert "Week 1 - Press Day" in result.output
        assert "->" in result.output
        assert "50" in result.output

    def test_record_and_list(self, initialized):
        result = initialized.invoke(
            main,
            [
                "record", "overhead_press", "warmup", "50",
                "--set", "0", "--reps", "5",
                "--day", "0", "--week", "0", "--iteration", "0",
                "--note", "easy",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Recorded lift 1" in result.output

        result = initialized.invoke(main, ["lifts"])

        assert result.exit_code == 0
        assert "easy" in result.output
        assert "Total: 1 lift(s)" in result.output

    def test_record_outside_routine(self, initialized):
        result = initialized.invoke(
            main,
            [
                "record", "SQUAT", "MAIN", "200",
                "--set", "0", "--reps", "5",
                "--day", "0", "--week", "9", "--iteration", "0",
            ],
        )

        assert result.exit_code == 1
        assert "outside the routine" in result.output

    def test_edit(self, initialized):
        initialized.invoke(
            main,
            [
                "record", "OVERHEAD_PRESS", "WARMUP", "50",
                "--set", "0", "--reps", "5",
                "--day", "0", "--week", "0", "--iteration", "0",
            ],
        )
        result = initialized.invoke(main, ["edit", "1", "--reps", "4", "--note", "tired"])

        assert result.exit_code == 0
        assert "Updated lift 1" in result.output

    def test_edit_missing(self, initialized):
        result = initialized.invoke(main, ["edit", "99", "--reps", "4"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_skip_week(self, initialized):
        result = initialized.invoke(main, ["skip-week", "3", "0", "--note", "busy"])

        assert result.exit_code == 0
        assert "Skipped week 3" in result.output

    def test_skip_non_optional_week(self, initialized):
        result = initialized.invoke(main, ["skip-week", "0", "0"])

        assert result.exit_code == 1
        assert "isn't optional" in result.output

    def test_lifts_empty(self, initialized):
        result = initialized.invoke(main, ["lifts"])

        assert result.exit_code == 0
        assert "No lifts recorded yet" in result.output


class TestBadRoutineFile:
    """A broken routine file is reported, not dumped as a traceback."""

    @pytest.fixture
    def broken_routine(self, initialized, tmp_path, monkeypatch):
        path = tmp_path / "routine.json"
        path.write_text("{not json")
        monkeypatch.setenv("STRONK_ROUTINE_FILE", str(path))
        get_settings.cache_clear()
        return initialized

    @pytest.mark.parametrize(
        "args",
        [["next"], ["tm", "show"], ["lifts"], ["skip-week", "3", "0"]],
    )
    def test_commands_exit_cleanly(self, broken_routine, args):
        result = broken_routine.invoke(main, args)

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
        assert "failed to parse routine file" in result.output
        assert not isinstance(result.exception, RoutineError)

    def test_missing_file(self, initialized, tmp_path, monkeypatch):
        monkeypatch.setenv("STRONK_ROUTINE_FILE", str(tmp_path / "nope.json"))
        get_settings.cache_clear()

        result = initialized.invoke(main, ["next"])

        assert result.exit_code == 1
        assert "failed to open routine file" in result.output


class TestOversizedArguments:
    def test_record_huge_reps(self, initialized):
        result = initialized.invoke(
            main,
            [
                "record", "SQUAT", "MAIN", "200",
                "--set", "0", "--reps", str(10**20),
                "--day", "1", "--week", "0", "--iteration", "0",
            ],
        )

        assert result.exit_code == 1
        assert "too large" in result.output

    def test_edit_huge_id(self, initialized):
        result = initialized.invoke(main, ["edit", str(10**20), "--reps", "4"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_lifts_limit_out_of_range(self, initialized):
        result = initialized.invoke(main, ["lifts", "--limit", str(10**20)])

        assert result.exit_code == 2
