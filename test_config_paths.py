import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(tmp, payload=None, raw=None):
    cfg_dir = Path(tmp) / "tabpeek"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    cfg_path = cfg_dir / "config.json"
    if payload is not None:
        cfg_path.write_text(json.dumps(payload))
    elif raw is not None:
        cfg_path.write_text(raw)

    # point module paths to temp
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_dir)
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(tmp)
    assert cfg["BUFFER_SIZE"] == 10000
    assert cfg["PAGE_STEP"] == 100
    assert cfg["PROGRESS_EVERY"] == 100000
    assert cfg["PALETTE"] == ["cyan", "green", "yellow", "red", "magenta"]
    assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(
            tmp,
            {
                "buffer_size": 500,
                "page_step": 25,
                "progress_every": 1000,
                "palette": ["Blue", "white", "red", "green", "yellow"],
                "log_level": "debug",
            },
        )
    assert cfg["BUFFER_SIZE"] == 500
    assert cfg["PAGE_STEP"] == 25
    assert cfg["PROGRESS_EVERY"] == 1000
    assert cfg["PALETTE"] == ["blue", "white", "red", "green", "yellow"]
    assert cfg["LOG_LEVEL"] == "DEBUG"


def test_load_config_ignores_invalid_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(
            tmp,
            {
                "buffer_size": 1,
                "page_step": "ten",
                "progress_every": True,
                "palette": ["mauve"],
                "log_level": "loud",
            },
        )
    assert cfg["BUFFER_SIZE"] == 10000
    assert cfg["PAGE_STEP"] == 100
    assert cfg["PROGRESS_EVERY"] == 100000
    assert cfg["PALETTE"] == ["cyan", "green", "yellow", "red", "magenta"]
    assert cfg["LOG_LEVEL"] == "WARNING"


def test_load_config_survives_broken_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(tmp, raw="{not json")
    assert cfg["BUFFER_SIZE"] == 10000


def test_load_config_palette_needs_five_colors():
    with tempfile.TemporaryDirectory() as tmp:
        short = _load_with(tmp, {"palette": ["blue", "white"]})
    with tempfile.TemporaryDirectory() as tmp:
        long = _load_with(tmp, {"palette": ["blue", "white", "red", "green", "yellow", "cyan"]})
    assert short["PALETTE"] == ["cyan", "green", "yellow", "red", "magenta"]
    assert long["PALETTE"] == ["cyan", "green", "yellow", "red", "magenta"]
