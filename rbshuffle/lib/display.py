"""Console output describing a playlist."""

from __future__ import annotations

from rbshuffle.lib.location import location_text
from rbshuffle.lib.playlist_document import Playlist


def display_text(location: str) -> str:
    """Decoded path of a location that is always safe to print.

    Bytes that are not valid UTF-8 are shown as U+FFFD.
    """
    raw = location_text(location).encode("utf-8", "surrogateescape")
    return raw.decode("utf-8", "replace")


def display_playlist(playlist: Playlist, show_locations: bool = False) -> None:
    """Print a playlist's attributes, optionally with every decoded location.

    Raises:
        LocationDecodeError: If ``show_locations`` is set and a location cannot
            be decoded.
    """
    locations = playlist.locations
    print("===")
    print("len(Locations):", len(locations))
    if show_locations:
        for location in locations:
            print("  ", display_text(location))
    print("Name:", playlist.name)
    print("ShowBrowser:", playlist.show_browser)
    print("BrowserPos:", playlist.browser_position)
    print("SearchType:", playlist.search_type)
    print("Type:", playlist.type)
    print("SortKey:", playlist.sort_key)
    print("SortDirection:", playlist.sort_direction)
    conjunction = playlist.conjunction
    if conjunction is not None:
        print("Conjunction:", conjunction)
