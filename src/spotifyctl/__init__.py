"""spotifyctl: status-bar output and playback control for MPRIS players."""

__version__ = "0.1.0"
