"""MPRIS transport over the D-Bus session bus.

Where: platform/mpris/client.py
What: dbus-python adapter implementing ``PlayerTransportPort``.
Why: Confine bus connections, timeouts and DBusException handling to one place.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, final

import dbus

from spotifyctl.features.playback.domain.commands import PlayerCommand
from spotifyctl.features.playback.domain.reply import Node
from spotifyctl.features.playback.usecases.ports import TransportError
from spotifyctl.platform.logging import logger

from .conversion import to_node

BUS_NAME_PREFIX: Final[str] = "org.mpris.MediaPlayer2."
OBJECT_PATH: Final[str] = "/org/mpris/MediaPlayer2"
PROPERTIES_IFACE: Final[str] = "org.freedesktop.DBus.Properties"
PLAYER_IFACE: Final[str] = "org.mpris.MediaPlayer2.Player"
METADATA_PROPERTY: Final[str] = "Metadata"

# Error names meaning nobody owns the player's bus name.
_PLAYER_MISSING_ERRORS: Final[frozenset[str]] = frozenset(
    {
        "org.freedesktop.DBus.Error.ServiceUnknown",
        "org.freedesktop.DBus.Error.NameHasNoOwner",
    }
)


def _describe(error: dbus.exceptions.DBusException) -> TransportError:
    """Translate a DBusException into a ``TransportError``."""

    name = error.get_dbus_name() or ""
    message = error.get_dbus_message() or str(error) or name or "D-Bus call failed"
    return TransportError(message, player_missing=name in _PLAYER_MISSING_ERRORS)


@final
class MprisClient:
    """Talk to ``org.mpris.MediaPlayer2.<player>`` on the session bus."""

    player: str
    timeout_ms: int
    _bus_factory: Callable[[], Any]
    _bus: Any

    def __init__(
        self,
        player: str = "spotify",
        timeout_ms: int = 10_000,
        bus_factory: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            player: MPRIS player name (``spotify``, ``vlc`` ...).
            timeout_ms: Per-call reply timeout in milliseconds.
            bus_factory: Callable returning a bus connection. Defaults to
                ``dbus.SessionBus``.
        """
        self.player = player
        self.timeout_ms = timeout_ms
        self._bus_factory = bus_factory if bus_factory is not None else dbus.SessionBus
        self._bus = None

    @property
    def bus_name(self) -> str:
        """Well-known bus name of the player."""

        return f"{BUS_NAME_PREFIX}{self.player}"

    def _player_object(self) -> Any:
        """Connect lazily and return the remote player object."""

        try:
            if self._bus is None:
                self._bus = self._bus_factory()
            return self._bus.get_object(self.bus_name, OBJECT_PATH, introspect=False)
        except dbus.exceptions.DBusException as e:
            raise _describe(e) from e

    def query_metadata(self) -> Node:
        """Fetch the player's ``Metadata`` property.

        Raises:
            TransportError: If the bus call fails or times out, or the reply
                holds values that cannot be converted.
        """
        remote = self._player_object()
        logger.debug(
            "Querying %s.%s",
            PLAYER_IFACE,
            METADATA_PROPERTY,
            extra={"player_event": "player.query", "player": self.player},
        )
        try:
            reply = remote.Get(
                PLAYER_IFACE,
                METADATA_PROPERTY,
                dbus_interface=PROPERTIES_IFACE,
                timeout=self.timeout_ms / 1000,
            )
        except dbus.exceptions.DBusException as e:
            raise _describe(e) from e

        # Properties.Get returns its value as a variant (variant_level=1).
        try:
            return to_node(reply)
        except TypeError as e:
            raise TransportError(
                f"Unexpected {METADATA_PROPERTY} reply from {self.bus_name}: {e}"
            ) from e

    def send_command(self, command: PlayerCommand) -> None:
        """Call ``command`` on the player interface; the empty reply is discarded.

        Raises:
            TransportError: If the bus call fails or times out.
        """
        remote = self._player_object()
        method = remote.get_dbus_method(command.method_name, dbus_interface=PLAYER_IFACE)
        try:
            _ = method(timeout=self.timeout_ms / 1000)
        except dbus.exceptions.DBusException as e:
            raise _describe(e) from e

    def close(self) -> None:
        """Drop the cached bus connection."""

        self._bus = None


__all__ = [
    "BUS_NAME_PREFIX",
    "METADATA_PROPERTY",
    "MprisClient",
    "OBJECT_PATH",
    "PLAYER_IFACE",
    "PROPERTIES_IFACE",
]
