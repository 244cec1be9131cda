"""Tests for command line argument parser."""

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from spotifyctl.features.playback.domain.commands import PlayerCommand
from spotifyctl.features.playback.domain.formatter import FormatConfig
from spotifyctl.ui.cli.args import ArgumentParser, ControlArgs, HelpArgs, StatusArgs


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    status_args = parser.parse_args(["status", "--max-length", "20", "--trunc", ""])
    assert status_args.command == "status"
    assert status_args.max_length == 20
    assert status_args.trunc == ""

    for command in PlayerCommand:
        assert parser.parse_args([command.value]).command == command.value


def test_process_args_status_defaults(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("spotifyctl.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["status"])

    assert isinstance(args, StatusArgs)
    assert args.format_config == FormatConfig()
    assert args.player == "spotify"
    assert args.timeout_ms == 10_000
    assert not args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.WARNING
    assert mock_setup_logger.call_args.kwargs["log_file"] is None


def test_process_args_status_options() -> None:
    args = ArgumentParser.process_args(
        [
            "status",
            "--format",
            "%title% by %artist%",
            "--max-length",
            "30",
            "--max-artist-length",
            "10",
            "--max-title-length",
            "20",
            "--trunc",
            "~",
        ]
    )

    assert isinstance(args, StatusArgs)
    assert args.format_config == FormatConfig(
        max_artist_length=10,
        max_title_length=20,
        max_length=30,
        format="%title% by %artist%",
        trunc="~",
    )


@pytest.mark.parametrize(
    "argv",
    [["-q", "status"], ["status", "-q"], ["--quiet", "next"], ["next", "--quiet"]],
)
def test_quiet_flag_accepted_before_or_after_command(
    argv: list[str], mocker: MockerFixture
) -> None:
    mock_setup_logger = mocker.patch("spotifyctl.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(argv)

    assert isinstance(args, (StatusArgs, ControlArgs))
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_verbose_sets_debug_level(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("spotifyctl.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["-q", "status", "--verbose"])

    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_process_args_control() -> None:
    args = ArgumentParser.process_args(["--player", "vlc", "playpause"])

    assert args == ControlArgs(
        command=PlayerCommand.PLAYPAUSE,
        player="vlc",
        timeout_ms=10_000,
        quiet=False,
        verbose=False,
    )


def test_process_args_help() -> None:
    assert ArgumentParser.process_args(["help"]) == HelpArgs(command="help")


@pytest.mark.parametrize(
    "argv",
    [
        ["status", "--max-length", "0"],
        ["status", "--max-artist-length", "-2"],
        ["status", "--max-title-length", "many"],
        ["stop"],
        [],
    ],
)
def test_invalid_input_exits_with_usage_error(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(argv)

    assert excinfo.value.code == 2
    assert "usage: spotifyctl" in capsys.readouterr().err


def test_positive_int_error_message(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["status", "--max-artist-length", "0"])

    assert "Artist length must be a positive integer!" in capsys.readouterr().err


def test_config_file_supplies_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "spotifyctl.toml"
    _ = config_file.write_text(
        'player = "mpd"\nquiet = true\nmax_length = 40\ntrunc = "…"\n', encoding="utf-8"
    )

    args = ArgumentParser.process_args(
        ["--config", str(config_file), "status", "--max-length", "25"]
    )

    assert isinstance(args, StatusArgs)
    assert args.player == "mpd"
    assert args.quiet
    assert args.format_config.max_length == 25
    assert args.format_config.trunc == "…"


@pytest.mark.parametrize(
    "argv",
    [
        ["--max-length", "20", "--trunc", "~", "status"],
        ["--max-length", "20", "status", "--trunc", "~"],
        ["-q", "--trunc", "~", "status", "--max-length", "20"],
    ],
)
def test_format_options_accepted_before_status(argv: list[str]) -> None:
    args = ArgumentParser.process_args(argv)

    assert isinstance(args, StatusArgs)
    assert args.format_config.max_length == 20
    assert args.format_config.trunc == "~"


def test_format_option_after_status_wins() -> None:
    args = ArgumentParser.process_args(["--max-length", "20", "status", "--max-length", "25"])

    assert isinstance(args, StatusArgs)
    assert args.format_config.max_length == 25


@pytest.mark.parametrize("argv", [["help", "-q"], ["-q", "help", "--verbose"]])
def test_help_accepts_global_flags(argv: list[str]) -> None:
    assert ArgumentParser.process_args(argv) == HelpArgs(command="help")
