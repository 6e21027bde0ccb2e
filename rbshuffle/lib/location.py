"""Helpers for the location strings stored in a Rhythmbox playlist.

A location is a percent-escaped URI such as
``file:///music/Some%20Artist/01%20Intro.mp3``. Tracks are grouped by the
folder part of the decoded path and sorted by the file name part.
"""

from __future__ import annotations

import re
from urllib.parse import unquote_to_bytes

from rbshuffle.lib.errors import LocationDecodeError

FILE_SCHEME = "file://"
PATH_SEPARATOR = "/"

# A "%" must always introduce exactly two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def unescape(location: str) -> str:
    """Percent-decode a location, treating "+" as a space.

    Raises:
        LocationDecodeError: If the location holds a "%" that is not followed by
            two hexadecimal digits.
    """
    bad = _BAD_ESCAPE.search(location)
    if bad is not None:
        raise LocationDecodeError(
            location, f"invalid escape {location[bad.start() : bad.start() + 3]!r}"
        )
    raw = unquote_to_bytes(location.replace("+", " "))
    # Undecodable bytes survive as surrogates so grouping never fails on them
    return raw.decode("utf-8", errors="surrogateescape")


def location_text(location: str) -> str:
    """Return the decoded path of a location with any file:// prefix removed."""
    text = unescape(location)
    if text.startswith(FILE_SCHEME):
        text = text[len(FILE_SCHEME) :]
    return text


def split_location(location: str) -> tuple[str, str]:
    """Split a location into its group key and leaf name.

    The group key is everything up to and including the final path separator,
    the leaf name is the rest. A location without a separator has an empty
    group key.

    Example:
        ```python
        split_location("file://%2Fmusic%2FArtist%2Fsong.mp3")
        # ('/music/Artist/', 'song.mp3')
        ```
    """
    head, sep, leaf = location_text(location).rpartition(PATH_SEPARATOR)
    return head + sep, leaf


def group_key(location: str) -> str:
    return split_location(location)[0]


def leaf_name(location: str) -> str:
    return split_location(location)[1]
