"""Pytest fixtures for rbshuffle tests."""

import logging

import pytest

SAMPLE_PLAYLISTS = """<?xml version="1.0"?>
<rhythmdb-playlists>
  <playlist name="My Top Rated" show-browser="false" browser-position="180" search-type="search-match" type="automatic" sort-key="Rating" sort-direction="1">
    <conjunction>
      <equals prop="rating">5</equals>
    </conjunction>
  </playlist>
  <playlist name="Road trip" show-browser="true" browser-position="202" search-type="search-match" type="static">
    <location>file:///music/B/song2.mp3</location>
    <location>file:///music/A/song1.mp3</location>
    <location>file:///music/B/song1.mp3</location>
    <location>file:///music/A/song2.mp3</location>
  </playlist>
  <playlist name="Chill" show-browser="false" browser-position="180" search-type="search-match" type="static">
    <location>file:///music/Zed%20Band/2%20Intro.mp3</location>
    <location>file:///music/Zed%20Band/10%20Outro.mp3</location>
  </playlist>
</rhythmdb-playlists>
"""

AUTOMATIC_ONLY_PLAYLISTS = """<?xml version="1.0"?>
<rhythmdb-playlists>
  <playlist name="Recently Added" show-browser="true" browser-position="180" search-type="search-match" type="automatic" sort-key="FirstSeen" sort-direction="1">
    <conjunction>
      <subtree prop="first-seen">
        <conjunction>
          <current-time-within prop="first-seen">604800</current-time-within>
        </conjunction>
      </subtree>
    </conjunction>
  </playlist>
</rhythmdb-playlists>
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the home and data directories at a temporary folder."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("APPDATA", str(home / "AppData" / "Roaming"))
    return home


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by configure_logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def playlists_file(tmp_path):
    """Write the sample playlists document and return its path."""
    path = tmp_path / "playlists.xml"
    path.write_text(SAMPLE_PLAYLISTS, encoding="utf-8")
    return path


@pytest.fixture
def automatic_only_file(tmp_path):
    path = tmp_path / "automatic.xml"
    path.write_text(AUTOMATIC_ONLY_PLAYLISTS, encoding="utf-8")
    return path


@pytest.fixture
def sample_document():
    """The sample playlists document, parsed."""
    from rbshuffle.lib.playlist_document import PlaylistDocument

    return PlaylistDocument.from_string(SAMPLE_PLAYLISTS)
