"""Shared pytest fixtures: reply builders, a fake player transport and config isolation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from spotifyctl.features.playback.domain.commands import PlayerCommand
from spotifyctl.features.playback.domain.reply import Keyed, Node, Primitive, Sequence, Variant
from spotifyctl.features.playback.usecases.ports import TransportError

ReplyBuilder = Callable[..., Node]


@dataclass
class FakeTransport:
    """In-memory stand-in for the D-Bus transport."""

    reply: Node | None = None
    error: TransportError | None = None
    commands: list[PlayerCommand] = field(default_factory=list)
    queries: int = 0

    def query_metadata(self) -> Node:
        self.queries += 1
        if self.error is not None:
            raise self.error
        assert self.reply is not None
        return self.reply

    def send_command(self, command: PlayerCommand) -> None:
        if self.error is not None:
            raise self.error
        self.commands.append(command)


def build_reply(
    title: str | None = None,
    artists: list[str] | None = None,
    **extra: Node,
) -> Node:
    """Build ``variant(a{sv})`` the way an MPRIS player answers ``Metadata``."""

    entries: list[tuple[str, Node]] = [
        ("mpris:trackid", Variant(Primitive("/com/spotify/track/1"), "o")),
    ]
    if artists is not None:
        entries.append(
            ("xesam:artist", Variant(Sequence(tuple(Primitive(a) for a in artists)), "as"))
        )
    if title is not None:
        entries.append(("xesam:title", Variant(Primitive(title), "s")))
    entries.extend(extra.items())
    return Variant(Keyed(tuple(entries)), "a{sv}")


@pytest.fixture
def make_reply() -> ReplyBuilder:
    """Builder for metadata replies."""

    return build_reply


@pytest.fixture
def fake_transport() -> FakeTransport:
    """A transport answering with a playing track."""

    return FakeTransport(reply=build_reply(title="Sing For The Moment", artists=["Eminem"]))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config lookup at an empty temp location and reset the singleton."""

    import spotifyctl.config.config as config_module

    config_file = tmp_path / "spotifyctl" / "config.toml"
    monkeypatch.setenv("SPOTIFYCTL_CONFIG", str(config_file))
    monkeypatch.setattr(config_module.Config, "_instance", None)
    monkeypatch.setattr(config_module.Config, "_loaded_from", None)
    yield config_file


@pytest.fixture
def transport_cls() -> type[FakeTransport]:
    """The fake transport class, for tests that need a custom reply or error."""

    return FakeTransport
