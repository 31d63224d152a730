"""Tests for the time_tiny command line entry point."""

from unittest.mock import patch

import pytest

from time_tiny.__main__ import main


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("time_tiny.__main__.setup_logging") as mock_setup:
        yield mock_setup


def test_now_prints_clock_time(capsys):
    with patch("time_tiny.clock.read_local_clock", return_value=(6, 7, 8)):
        assert main(["now"]) == 0
    assert capsys.readouterr().out == "06:07:08\n"


def test_parse_echoes_valid_time(capsys):
    assert main(["parse", "23:59:59"]) == 0
    assert capsys.readouterr().out == "23:59:59\n"


def test_parse_reports_malformed_time(capsys):
    assert main(["parse", "1:02:03"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "does not match hh:mm:ss" in captured.err


def test_datetime_prints_iso(capsys):
    assert main(["datetime", "10:45:00"]) == 0
    assert capsys.readouterr().out == "1970-01-01T10:45:00\n"


def test_datetime_with_time_zone(capsys):
    assert main(["datetime", "10:45:00", "--time-zone", "UTC"]) == 0
    assert capsys.readouterr().out == "1970-01-01T10:45:00+00:00\n"


def test_log_level_passed_to_setup(no_logging_setup, capsys):
    main(["--log-level", "DEBUG", "parse", "00:00:00"])
    no_logging_setup.assert_called_once_with(level="DEBUG")


def test_missing_command_exits():
    with pytest.raises(SystemExit):
        main([])
