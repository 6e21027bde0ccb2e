"""Read and write the Rhythmbox playlists file.

The whole document is kept as an ElementTree so that elements and attributes
this module does not know about (automatic playlist queries, newer Rhythmbox
attributes) survive a round trip untouched.
"""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from rbshuffle.lib.errors import PlaylistFileError

XML_HEADER = '<?xml version="1.0"?>\n'
INDENT = "  "

STATIC_TYPE = "static"


def _parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in ("1", "t", "true")


def _parse_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        logging.debug(f"Ignoring non-integer attribute value: {value}")
        return None


class Playlist:
    """A view over one ``<playlist>`` element."""

    def __init__(self, element: ET.Element) -> None:
        self.element = element

    @property
    def name(self) -> str:
        return self.element.get("name", "")

    @name.setter
    def name(self, value: str) -> None:
        self.element.set("name", value)

    @property
    def type(self) -> str:
        return self.element.get("type", "")

    @property
    def is_static(self) -> bool:
        return self.type == STATIC_TYPE

    @property
    def show_browser(self) -> bool:
        return _parse_bool(self.element.get("show-browser"))

    @property
    def browser_position(self) -> int | None:
        return _parse_int(self.element.get("browser-position"))

    @property
    def search_type(self) -> str:
        return self.element.get("search-type", "")

    @property
    def sort_key(self) -> str:
        return self.element.get("sort-key", "")

    @property
    def sort_direction(self) -> int | None:
        return _parse_int(self.element.get("sort-direction"))

    @property
    def conjunction(self) -> str | None:
        """Inner XML of the automatic playlist query, or None for static playlists."""
        conjunction = self.element.find("conjunction")
        if conjunction is None:
            return None
        inner = conjunction.text or ""
        for child in conjunction:
            inner += ET.tostring(child, encoding="unicode")
        return inner

    @property
    def locations(self) -> list[str]:
        return [(el.text or "").strip() for el in self.element.findall("location")]

    def set_locations(self, locations: list[str]) -> None:
        """Replace the ``<location>`` children, keeping their place among siblings."""
        children = list(self.element)
        old = [child for child in children if child.tag == "location"]
        position = children.index(old[0]) if old else len(children)
        for child in old:
            self.element.remove(child)
        for offset, location in enumerate(locations):
            new = ET.Element("location")
            new.text = location
            self.element.insert(position + offset, new)

    def copy(self, name: str) -> Playlist:
        """Return a detached deep copy of this playlist under a new name."""
        duplicate = Playlist(copy.deepcopy(self.element))
        duplicate.name = name
        return duplicate

    def __repr__(self) -> str:
        return f"Playlist(name={self.name!r}, type={self.type!r}, locations={len(self.locations)})"


class PlaylistDocument:
    """The parsed ``playlists.xml`` document."""

    def __init__(self, root: ET.Element) -> None:
        self.root = root

    @classmethod
    def load(cls, path: str | Path) -> PlaylistDocument:
        """Parse a playlists file.

        Raises:
            PlaylistFileError: If the file cannot be opened or is not well-formed XML.
        """
        logging.info(f"Reading playlists from: {path}")
        try:
            tree = ET.parse(path)
        except ET.ParseError as e:
            raise PlaylistFileError(f"Unable to parse playlists file {path}: {e}") from e
        except OSError as e:
            raise PlaylistFileError(f"Unable to open playlists file {path}: {e}") from e
        return cls(tree.getroot())

    @classmethod
    def from_string(cls, text: str) -> PlaylistDocument:
        try:
            return cls(ET.fromstring(text))
        except ET.ParseError as e:
            raise PlaylistFileError(f"Unable to parse playlists document: {e}") from e

    @property
    def playlists(self) -> list[Playlist]:
        return [Playlist(el) for el in self.root.findall("playlist")]

    @property
    def static_playlists(self) -> list[Playlist]:
        return [p for p in self.playlists if p.is_static]

    def first_static(self) -> Playlist | None:
        return next(iter(self.static_playlists), None)

    def append(self, playlist: Playlist) -> None:
        self.root.append(playlist.element)

    def to_xml(self) -> str:
        """Serialize the document with an XML header and two-space indentation."""
        ET.indent(self.root, space=INDENT)
        return XML_HEADER + ET.tostring(self.root, encoding="unicode") + "\n"

    def write(self, path: str | Path) -> None:
        """Write the document to ``path``.

        The document is serialized before the file is opened, so a failure
        while serializing never leaves a partial file behind.

        Raises:
            PlaylistFileError: If the file cannot be written.
        """
        text = self.to_xml()
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as e:
            raise PlaylistFileError(f"Unable to write playlists file {path}: {e}") from e
        logging.info(f"Wrote {len(self.playlists)} playlists to: {path}")
