"""
File logging for tabpeek.

curses owns the terminal while the viewer runs, so records go to a log file
in the config directory and never to the screen.
"""
import logging

import config_paths

LOGGER_NAME = "tabpeek"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level="WARNING", log_path=None):
    """Attach a file handler to the root logger and return the app logger.

    Falls back to a NullHandler when the log file cannot be opened so a
    read-only home directory does not stop the viewer.
    """
    log_path = log_path or config_paths.LOG_PATH
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    for handler in list(root.handlers):
        if getattr(handler, "_tabpeek", False):
            root.removeHandler(handler)
            handler.close()

    try:
        if log_path == config_paths.LOG_PATH:
            config_paths.ensure_config_dirs()
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    except OSError:
        handler = logging.NullHandler()
    handler._tabpeek = True
    root.addHandler(handler)
    return logging.getLogger(LOGGER_NAME)
