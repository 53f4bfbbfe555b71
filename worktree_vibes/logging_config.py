"""Logging configuration for worktree-vibes"""
import copy
import logging
import sys
from pathlib import Path
from typing import Optional

from worktree_vibes.constants import CONFIG_DIR, LOG_FILE_NAME

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
SHORT_FORMAT = '[%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when stderr is a terminal."""

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelname)
        if color and sys.stderr.isatty():
            # Other handlers share the record
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='w')  # one run per file
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level: int, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if debug:
        handler.setFormatter(ColoredFormatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(ColoredFormatter(fmt=SHORT_FORMAT))
    return handler


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    tui_mode: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure logging for the application.

    The picker owns the terminal, so in TUI mode records go only to a log
    file. With --debug the file is written in CLI mode too.

    Args:
        verbose: Show INFO level messages
        debug: Show DEBUG level messages with timestamps
        tui_mode: Log to a file instead of stderr
        log_file: Log file (default: ~/.worktree-vibes/worktree-vibes.log)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.DEBUG if tui_mode else level)

    if tui_mode or debug:
        root_logger.addHandler(_file_handler(log_file or CONFIG_DIR / LOG_FILE_NAME))
    if not tui_mode:
        root_logger.addHandler(_console_handler(level, debug))

    # GitPython logs every command line at DEBUG; the runner already does
    logging.getLogger('git').setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # services.git.* must stay out of GitPython's "git" logger namespace
    if name.startswith('worktree_vibes.'):
        name = name[len('worktree_vibes.'):]

    return logging.getLogger(name)
