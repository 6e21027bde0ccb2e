import argparse
import logging
from pathlib import Path

from rbshuffle.version import __version__

# Default values for CLI args
default_log_level = logging.INFO
default_config_file_path = "config.ini"
default_max_log_files = 5


class ArgsNamespace(argparse.Namespace):
    """Provides typehints to the input args"""

    out: Path | None
    playlists_path: str | None
    shuffle_dirs: bool | None
    shuffle_in_dir: bool | None
    in_place: bool | None
    display: bool | None
    display_all: bool | None
    log_level: int
    log_dir: Path | None
    max_log_files: int
    config_file_path: str
    save_preferences: bool


def log_level_type(input):
    """Verify the log level input"""
    try:
        return int(input)
    except ValueError:
        level = logging.getLevelName(str(input).upper())
        if isinstance(level, int):
            return level
        raise argparse.ArgumentTypeError(
            f"Log level must be an int or a level name, but got '{input}'"
        )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rbshuffle",
        description="Reorder a Rhythmbox playlist folder by folder: shuffle or sort the "
        "folders, and shuffle or sort the tracks inside each folder.",
    )

    parser.add_argument(
        "-o",
        "--out",
        help="The file path to write the processed XML to. Nothing is written if omitted.",
        default=None,
        type=Path,
        required=False,
    )
    parser.add_argument(
        "-p",
        "--playlists-path",
        help="Path of the Rhythmbox playlists file. (default: ~/.local/share/rhythmbox/playlists.xml)",
        default=None,
        required=False,
    )
    parser.add_argument(
        "--shuffle-dirs",
        action=argparse.BooleanOptionalAction,
        help="Shuffle the order of the directories; if disabled they are sorted. (default: True)",
        default=None,
    )
    parser.add_argument(
        "--shuffle-in-dir",
        action=argparse.BooleanOptionalAction,
        help="Shuffle the songs within one directory; if disabled they are sorted. (default: True)",
        default=None,
    )
    parser.add_argument(
        "--in-place",
        action=argparse.BooleanOptionalAction,
        help="Reorder every static playlist in place instead of appending a reordered copy "
        "of the first static playlist.",
        default=None,
    )
    parser.add_argument(
        "--display",
        action=argparse.BooleanOptionalAction,
        help="Display info on the processed static playlists.",
        default=None,
    )
    parser.add_argument(
        "--display-all",
        action=argparse.BooleanOptionalAction,
        help="Display the song file paths as well. Implies --display.",
        default=None,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help=f"Logging level int value (DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50). (default: {default_log_level} )",
        default=default_log_level,
        type=log_level_type,
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        help="Directory to store log files in. Defaults to the platform log directory.",
        default=None,
        type=Path,
        required=False,
    )
    parser.add_argument(
        "--max-log-files",
        help=f"Number of log files to keep in the log directory. (default: {default_max_log_files})",
        default=default_max_log_files,
        type=int,
        required=False,
    )
    parser.add_argument(
        "--config-file-path",
        help=f"Path to a config file to load settings from. Command line arguments override config file settings. Default {default_config_file_path}",
        default=default_config_file_path,
        required=False,
    )
    parser.add_argument(
        "--save-preferences",
        action="store_true",
        help="Save the settings given on the command line to the config file.",
        required=False,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def parse_args(argv=None) -> ArgsNamespace:
    return build_parser().parse_args(argv, namespace=ArgsNamespace())
