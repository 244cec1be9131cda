"""Tests for configuration loading."""

from __future__ import annotations

import logging
import textwrap
import tomllib
from pathlib import Path

import pytest

from spotifyctl.config.config import DEFAULT_PLAYER, DEFAULT_TIMEOUT_MS, Config
from spotifyctl.features.playback.domain.formatter import FormatConfig


def _write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_missing_file_yields_defaults(isolated_config: Path) -> None:
    config = Config.load()

    assert config.player == DEFAULT_PLAYER
    assert config.timeout_ms == DEFAULT_TIMEOUT_MS
    assert config.format_config() == FormatConfig()
    assert not isolated_config.exists()


def test_loads_values_from_toml(isolated_config: Path) -> None:
    _ = _write(
        isolated_config,
        """
        format = "%title% - %artist%"
        trunc = "…"
        max_length = 40
        max_title_length = 25
        player = "vlc"
        quiet = true
        log_file = "~/spotifyctl.log"
        """,
    )

    config = Config.load()

    assert config.player == "vlc"
    assert config.quiet is True
    assert config.log_file == Path("~/spotifyctl.log").expanduser()
    assert config.format_config() == FormatConfig(
        format="%title% - %artist%",
        trunc="…",
        max_length=40,
        max_title_length=25,
    )


def test_overrides_win_over_file(isolated_config: Path) -> None:
    _ = _write(isolated_config, 'trunc = "…"\nmax_length = 40\n')

    format_config = Config.load().format_config(max_length=20, trunc="")

    assert format_config.max_length == 20
    assert format_config.trunc == ""


def test_load_is_cached_per_path(isolated_config: Path, tmp_path: Path) -> None:
    first = Config.load()
    assert Config.load() is first

    other = _write(tmp_path / "other.toml", 'player = "mpd"\n')
    assert Config.load(other).player == "mpd"


def test_unknown_keys_are_ignored_with_warning(
    isolated_config: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _ = _write(isolated_config, 'colour = "red"\nplayer = "vlc"\n')

    with caplog.at_level(logging.WARNING, logger="spotifyctl"):
        config = Config.load()

    assert config.player == "vlc"
    assert "colour" in caplog.text


@pytest.mark.parametrize(
    "body",
    ["max_length = 0\n", "max_artist_length = -1\n", "timeout_ms = 0\n", 'player = " "\n'],
)
def test_invalid_values_raise(isolated_config: Path, body: str) -> None:
    _ = _write(isolated_config, body)

    with pytest.raises(ValueError):
        _ = Config.load()


def test_invalid_toml_raises(isolated_config: Path) -> None:
    _ = _write(isolated_config, "max_length = [\n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
