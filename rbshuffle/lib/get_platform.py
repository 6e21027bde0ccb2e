import os
import sys
from pathlib import Path

from rbshuffle.constants import PACKAGE_NAME, RHYTHMBOX_PLAYLISTS_REL_PATH


def get_platform():
    if sys.platform == "darwin":
        return "osx"
    elif sys.platform.startswith("linux"):
        return "linux"
    elif sys.platform.startswith("win"):
        return "windows"
    else:
        return "unknown"


def is_windows():
    return get_platform() == "windows"


def get_data_directory():
    """
    Returns the writable data directory for the application.
    Windows: %APPDATA%/rbshuffle
    Linux/Mac: ~/.rbshuffle
    """
    if is_windows():
        base_path = os.environ.get("APPDATA") or os.path.expanduser("~")
        path = os.path.join(base_path, PACKAGE_NAME)
    else:
        path = os.path.expanduser(f"~/.{PACKAGE_NAME}")

    if not os.path.exists(path):
        os.makedirs(path)

    return path


def get_log_directory() -> Path:
    """Get the log directory path based on the operating system

    Returns:
        Path: The path to the log directory

    Raises:
        OSError: If the operating system is unsupported
    """
    platform = get_platform()

    if platform == "unknown":
        raise OSError("Unsupported OS. Can't determine logs folder.")

    user_home = Path.home()
    if platform == "windows":
        return user_home / "AppData" / "Local" / PACKAGE_NAME / "Logs"

    return user_home / ".config" / PACKAGE_NAME / "logs"  # macOs and Linux use the same log path


def get_default_playlists_path() -> str:
    return os.path.join(os.path.expanduser("~"), RHYTHMBOX_PLAYLISTS_REL_PATH)
