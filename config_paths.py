import json
import logging
import os

from palette import COLOR_NAMES, DEFAULT_COLORS, PALETTE_SIZE


logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tabpeek")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "tabpeek.log")

# default settings
BUFFER_SIZE_DEFAULT = 10000
PAGE_STEP_DEFAULT = 100
PROGRESS_EVERY_DEFAULT = 100000
PALETTE_DEFAULT = list(DEFAULT_COLORS)
LOG_LEVEL_DEFAULT = "WARNING"

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError:
        return False
    return True


def _positive_int(value, minimum=1):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= minimum else None


def load_config():
    cfg = {
        "BUFFER_SIZE": BUFFER_SIZE_DEFAULT,
        "PAGE_STEP": PAGE_STEP_DEFAULT,
        "PROGRESS_EVERY": PROGRESS_EVERY_DEFAULT,
        "PALETTE": list(PALETTE_DEFAULT),
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    buffer_size = _positive_int(data.get("buffer_size"), minimum=2)
    if buffer_size is not None:
        cfg["BUFFER_SIZE"] = buffer_size

    page_step = _positive_int(data.get("page_step"))
    if page_step is not None:
        cfg["PAGE_STEP"] = page_step

    progress_every = _positive_int(data.get("progress_every"))
    if progress_every is not None:
        cfg["PROGRESS_EVERY"] = progress_every

    palette = data.get("palette")
    if isinstance(palette, list) and len(palette) == PALETTE_SIZE:
        names = [p.lower() for p in palette if isinstance(p, str)]
        if all(n in COLOR_NAMES for n in names) and len(names) == PALETTE_SIZE:
            cfg["PALETTE"] = names

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
