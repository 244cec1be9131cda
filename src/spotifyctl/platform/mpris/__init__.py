"""MPRIS transport over D-Bus.

``client`` needs dbus-python; ``conversion`` is importable without it.
"""
