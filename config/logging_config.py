"""
Logging for Gym Day-Pass Discovery

Level, directory and file name come from LOG_LEVEL / LOG_DIR / LOG_FILE
(see settings). The hours parser and discovery pipeline log every
degradation ("hours unknown", skipped rows, unknown sort keys) at DEBUG;
those loggers are listed in PARSE_LOGGERS and can be switched on
independently of the root level.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s - %(name)s - %(message)s'


def resolve_log_level(level):
    """
    Accept a logging constant or a name like "debug"; unknown names give INFO.
    """
    if isinstance(level, int):
        return level
    if level:
        resolved = logging.getLevelName(str(level).strip().upper())
        if isinstance(resolved, int):
            return resolved
    return logging.INFO


def _set_parse_loggers(level, parse_debug):
    """DEBUG for the parse loggers when asked, otherwise never below INFO."""
    parse_level = logging.DEBUG if parse_debug else max(level, logging.INFO)
    for name in settings.PARSE_LOGGERS:
        logging.getLogger(name).setLevel(parse_level)


def _install(handlers, level, parse_debug):
    # Parse loggers propagate DEBUG records straight to the root handlers,
    # so only the handlers are opened up; the root logger keeps its level
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(logging.DEBUG if parse_debug else level)
        root_logger.addHandler(handler)
    return root_logger


def setup_logging(level=None, log_dir=None, log_file=None,
                  max_bytes=10485760, backup_count=5, parse_debug=False):
    """
    Console + rotating file logging

    Args:
        level: Level or level name (default: LOG_LEVEL)
        log_dir: Directory for log files (default: LOG_DIR)
        log_file: Log file name (default: LOG_FILE)
        max_bytes: Rotate after this many bytes (10MB)
        backup_count: Rotated files to keep
        parse_debug: Emit the parser's DEBUG degradation messages

    Returns:
        Configured root logger
    """
    level = resolve_log_level(settings.LOG_LEVEL if level is None else level)
    log_path = Path(log_dir or settings.LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    file_handler = RotatingFileHandler(
        log_path / (log_file or settings.LOG_FILE),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger = _install([console_handler, file_handler], level, parse_debug)
    _set_parse_loggers(level, parse_debug)
    return root_logger


def setup_console_logging(level=None, parse_debug=False):
    """
    Console-only logging for scripts and tests, no log directory is created

    Args:
        level: Level or level name (default: LOG_LEVEL)
        parse_debug: Emit "hours unknown" and other parse DEBUG messages
            even when the root level is higher
    """
    level = resolve_log_level(settings.LOG_LEVEL if level is None else level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root_logger = _install([console_handler], level, parse_debug)
    _set_parse_loggers(level, parse_debug)
    return root_logger


def get_logger(name):
    """Logger for a module (usually __name__)."""
    return logging.getLogger(name)
