"""Exceptions raised by rbshuffle.

Every error that should abort a run derives from RbShuffleError so the
command line entry point can report it and exit with a non-zero status.
"""

from __future__ import annotations


class RbShuffleError(Exception):
    """Base class for fatal run errors."""


class LocationDecodeError(RbShuffleError, ValueError):
    """A playlist location contains a malformed percent escape."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Unable to decode location {location!r}: {reason}")
        self.location = location


class ReorderInvariantError(RbShuffleError, RuntimeError):
    """The reordered sequence is not a permutation of the input."""


class PlaylistFileError(RbShuffleError):
    """The playlists file could not be read, parsed or written."""
