import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path

from rbshuffle.lib.get_platform import get_log_directory


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Remove old log files, keeping only the most recent `max_files` logs

    Log files are sorted by modification time and the oldest are removed until
    only `max_files` remain. A missing directory is treated as empty.

    Args:
        log_dir (Path): The directory where the log files are stored.
        max_files (int, optional): The maximum number of log files to keep. Defaults to 5.

    Raises:
        PermissionError: If there is no permission to delete log files.
    """
    if not log_dir.exists():
        return

    log_files = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    while len(log_files) > max_files:
        old_log = log_files.pop(0)
        old_log.unlink()


class CustomFormatter(logging.Formatter):
    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(
    log_level: int = logging.INFO, log_dir: Path | None = None, max_log_files: int = 5
):
    """Configures the logger with log file, format and level

    There are two formatters, one for the console and one for the log file. The console
    formatter leaves out the date and time to keep the output of a run short. The log
    file holds the detailed information on time and date.

    The log file name is the date and time of the run with a .log extension.

    Args:
        log_level (int): The log level to log at. logging.[DEBUG | INFO | ERROR | CRITICAL | WARN ].
            Defaults to logging.INFO.
        log_dir (Path | None): Where to store the logs. Defaults to system default.
        max_log_files (int): Keeps only the previous (n) number of log files. Defaults to 5.
    """
    if log_dir is None:
        log_dir = get_log_directory()

    log_dir.mkdir(exist_ok=True, parents=True)
    # Leave room for the file this run is about to create
    clean_old_logs(log_dir=log_dir, max_files=max(max_log_files - 1, 0))

    log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")

    file_handler = logging.handlers.RotatingFileHandler(
        log_filename, maxBytes=10 * 1024**2, backupCount=5, encoding="utf-8"
    )
    stream_handler = logging.StreamHandler()

    file_formatter = CustomFormatter(
        "[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S"
    )
    console_formatter = logging.Formatter("%(levelname)s %(message)s")

    file_handler.setFormatter(file_formatter)
    stream_handler.setFormatter(console_formatter)

    logging.basicConfig(level=log_level, handlers=[file_handler, stream_handler], force=True)

    return log_filename
