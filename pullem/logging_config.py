"""Logging configuration for pullem"""
import copy
import logging
import sys
from pathlib import Path

LOG_DIR_NAME = '.pullem'
LOG_FILE_NAME = 'pullem.log'
DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
SIMPLE_FORMAT = '[%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Colours the level name when the stream is a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, use_color=None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return super().format(record)
        # Other handlers share the record, so colour a copy
        record = copy.copy(record)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure the root logger.

    Records go to stderr so they never interleave with the status lines on
    stdout. Debug mode also writes everything to ~/.pullem/pullem.log,
    overwritten on each run.

    Args:
        verbose: Show INFO records
        debug: Show DEBUG records with timestamps
    """
    level = _level_for(verbose, debug)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        log_dir = Path.home() / LOG_DIR_NAME
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, mode='w')
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    if debug:
        stream_handler.setFormatter(ColoredFormatter(DETAILED_FORMAT, DATE_FORMAT))
    else:
        stream_handler.setFormatter(ColoredFormatter(SIMPLE_FORMAT))
    root_logger.addHandler(stream_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger named after the module, without the package prefix."""
    if name.startswith('pullem.'):
        name = name[len('pullem.'):]
    return logging.getLogger(name)
