"""Logging setup for killallgit.

stdout is reserved for listings, JSON and summaries, so log records go to
stderr, or only to the log file while a full-screen prompt owns the terminal.
"""
import logging
import sys
from pathlib import Path

LEVEL_COLORS = {
    logging.DEBUG: '\033[36m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[35m',
}
RESET = '\033[0m'

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
SHORT_FORMAT = '[%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Colours the level name when stderr is a terminal."""

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelno)
        if color and sys.stderr.isatty():
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(record)


def get_log_file() -> Path:
    """Location of the log file written in debug and full-screen modes."""
    return Path.home() / '.killallgit' / 'killallgit.log'


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def _file_handler() -> logging.Handler:
    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='w')  # one run per file
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _stderr_handler(level: int, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if debug:
        handler.setFormatter(ColoredFormatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(ColoredFormatter(fmt=SHORT_FORMAT))
    return handler


def setup_logging(verbose: bool = False, debug: bool = False, tui_mode: bool = False) -> None:
    """
    Configure the root logger for one killallgit run.

    Args:
        verbose: Show INFO records on stderr
        debug: Show DEBUG records with timestamps, and keep a log file
        tui_mode: A Textual prompt will take over the terminal; log to file only
    """
    level = _level_for(verbose, debug)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = []
    if tui_mode or debug:
        handlers.append(_file_handler())
    if not tui_mode:
        handlers.append(_stderr_handler(level, debug))

    # The file handler wants everything even when the console is quiet
    root_logger.setLevel(logging.DEBUG if tui_mode else level)
    for handler in handlers:
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a killallgit module.

    ``killallgit.services.git.operations`` becomes ``git.operations``.
    """
    for prefix in ('killallgit.', 'services.'):
        if name.startswith(prefix):
            name = name[len(prefix):]
    return logging.getLogger(name)
