"""Tests for command line argument parser."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from lfmq.platform.lastfm import Period
from lfmq.platform.logging import DEFAULT_LOG_FILE
from lfmq.ui.cli.args import ArgumentParser, ChartArgs, ConfigArgs, InfoArgs


@pytest.fixture()
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    mock_config = mocker.patch("lfmq.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    return mocker.patch("lfmq.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    chart_args = parser.parse_args(["top-tracks", "RJ", "--limit", "3", "--period", "7day"])
    assert chart_args.command == "top-tracks"
    assert chart_args.user == "RJ"
    assert chart_args.limit == 3
    assert chart_args.period is Period.SEVEN_DAYS

    info_args = parser.parse_args(["info", "RJ"])
    assert info_args.command == "info"


def test_process_args_chart(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(
        ["top-artists", "LAST.HQ", "--limit", "1", "--page", "2", "--period", "one_year", "--verbose"]
    )

    assert isinstance(args, ChartArgs)
    assert args.command == "top-artists"
    assert args.user == "LAST.HQ"
    assert (args.limit, args.page) == (1, 2)
    assert args.period is Period.TWELVE_MONTHS
    assert args.verbose and not args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE


def test_process_args_defaults_leave_options_unset(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["top-albums", "RJ"])

    assert isinstance(args, ChartArgs)
    assert args.limit is None and args.page is None and args.period is None
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO


def test_process_args_info_quiet(mocker: MockerFixture) -> None:
    mock_config = mocker.patch("lfmq.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("lfmq.ui.cli.args.parser.setup_logger")
    custom_log_path = Path("/tmp/custom.log")
    mock_config.load.return_value.log_file = custom_log_path

    args = ArgumentParser.process_args(["info", "RJ", "--quiet"])

    assert isinstance(args, InfoArgs)
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR
    assert mock_setup_logger.call_args.kwargs["log_file"] == custom_log_path


def test_process_args_config(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["config", "--api-key", "abc", "--show"])

    assert isinstance(args, ConfigArgs)
    assert args.api_key == "abc"
    assert args.contact is None
    assert args.show


def test_invalid_period_exits(mock_setup_logger: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["top-artists", "RJ", "--period", "fortnight"])

    assert excinfo.value.code == 2
    assert "Unsupported period 'fortnight'" in capsys.readouterr().err
