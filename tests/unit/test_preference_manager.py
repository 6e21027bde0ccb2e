"""Tests for the PreferenceManager."""

from __future__ import annotations

import os

import pytest

from rbshuffle.lib.preference_manager import PreferenceManager


@pytest.fixture
def temp_config_file(tmp_path):
    """Path of a config file that does not exist yet."""
    return str(tmp_path / "config.ini")


def test_preference_manager_get_nonexistent_preference(temp_config_file):
    """Test getting a preference that doesn't exist returns default value."""
    prefs = PreferenceManager(temp_config_file)
    assert prefs.get("nonexistent", "default") == "default"
    assert prefs.get("nonexistent") is None


def test_preference_manager_relative_path_in_data_directory(isolated_home):
    """Test that a relative config path is placed in the data directory."""
    prefs = PreferenceManager("config.ini")
    assert prefs.config_file_path == os.path.join(str(isolated_home), ".rbshuffle", "config.ini")


def test_preference_manager_set_and_get(temp_config_file):
    prefs = PreferenceManager(temp_config_file)

    success, message = prefs.set("playlists_path", "/music/playlists.xml")
    assert success is True
    assert "successfully" in message.lower()
    assert prefs.get("playlists_path") == "/music/playlists.xml"


def test_preference_manager_set_failure(tmp_path):
    """Test that an unwritable config path reports failure instead of raising."""
    prefs = PreferenceManager(str(tmp_path / "missing-dir" / "config.ini"))
    success, message = prefs.set("display", True)
    assert success is False
    assert "not changed" in message


@pytest.mark.parametrize("val", ["true", "True", "TRUE", "yes", "Yes", "on", "On"])
def test_preference_manager_type_conversion_bool_true(temp_config_file, val):
    prefs = PreferenceManager(temp_config_file)
    prefs.set("shuffle_dirs", val)
    assert prefs.get("shuffle_dirs") is True


@pytest.mark.parametrize("val", ["false", "False", "FALSE", "no", "No", "off", "Off"])
def test_preference_manager_type_conversion_bool_false(temp_config_file, val):
    prefs = PreferenceManager(temp_config_file)
    prefs.set("shuffle_dirs", val)
    assert prefs.get("shuffle_dirs") is False


def test_preference_manager_type_conversion_numbers(temp_config_file):
    prefs = PreferenceManager(temp_config_file)

    prefs.set("int_pref", "-10")
    assert prefs.get("int_pref") == -10

    prefs.set("float_pref", "2.5")
    assert prefs.get("float_pref") == 2.5


def test_preference_manager_persistence(temp_config_file):
    PreferenceManager(temp_config_file).set("in_place", True)
    assert PreferenceManager(temp_config_file).get("in_place") is True


def test_preference_manager_defaults():
    defaults = PreferenceManager.DEFAULTS
    assert set(defaults) == {
        "playlists_path",
        "shuffle_dirs",
        "shuffle_in_dir",
        "in_place",
        "display",
        "display_all",
    }
    assert defaults["shuffle_dirs"] is True
    assert defaults["shuffle_in_dir"] is True
    assert defaults["in_place"] is False
    assert defaults["playlists_path"] is None


class TestResolve:
    """Tests for PreferenceManager.resolve."""

    def test_defaults_when_nothing_set(self, temp_config_file):
        resolved = PreferenceManager(temp_config_file).resolve()
        assert resolved == {
            **PreferenceManager.DEFAULTS,
            "playlists_path": os.path.join(
                os.path.expanduser("~"), ".local", "share", "rhythmbox", "playlists.xml"
            ),
        }

    def test_default_playlists_path_follows_home(self, temp_config_file, isolated_home):
        resolved = PreferenceManager(temp_config_file).resolve()
        assert resolved["playlists_path"] == os.path.join(
            str(isolated_home), ".local", "share", "rhythmbox", "playlists.xml"
        )

    def test_playlists_path_from_config(self, temp_config_file):
        prefs = PreferenceManager(temp_config_file)
        prefs.set("playlists_path", "/music/playlists.xml")
        assert prefs.resolve()["playlists_path"] == "/music/playlists.xml"

    def test_config_overrides_defaults(self, temp_config_file):
        prefs = PreferenceManager(temp_config_file)
        prefs.set("shuffle_dirs", "false")
        assert prefs.resolve()["shuffle_dirs"] is False

    def test_cli_overrides_config(self, temp_config_file):
        prefs = PreferenceManager(temp_config_file)
        prefs.set("shuffle_dirs", "false")
        assert prefs.resolve(shuffle_dirs=True)["shuffle_dirs"] is True

    def test_cli_false_is_provided(self, temp_config_file):
        """Test that an explicit False on the command line beats a default of True."""
        prefs = PreferenceManager(temp_config_file)
        assert prefs.resolve(shuffle_in_dir=False)["shuffle_in_dir"] is False

    def test_none_is_not_provided(self, temp_config_file):
        prefs = PreferenceManager(temp_config_file)
        prefs.set("in_place", "true")
        assert prefs.resolve(in_place=None)["in_place"] is True

    def test_display_all_implies_display(self, temp_config_file):
        resolved = PreferenceManager(temp_config_file).resolve(display_all=True)
        assert resolved["display"] is True

    def test_persist_saves_provided_values_only(self, temp_config_file):
        prefs = PreferenceManager(temp_config_file)
        prefs.resolve(persist=True, shuffle_dirs=False, display=None)

        fresh = PreferenceManager(temp_config_file)
        assert fresh.get("shuffle_dirs") is False
        assert fresh.get("display") is None

    def test_without_persist_nothing_written(self, temp_config_file):
        PreferenceManager(temp_config_file).resolve(shuffle_dirs=False)
        assert not os.path.exists(temp_config_file)
