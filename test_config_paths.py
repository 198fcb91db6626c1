import json
import logging
import tempfile
from pathlib import Path

import config_paths


def _with_config_json(payload):
    tmp = tempfile.TemporaryDirectory()
    cfg_dir = Path(tmp.name) / "vsheet"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    cfg_path = cfg_dir / "config.json"
    if payload is not None:
        cfg_path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
    return tmp, cfg_dir, cfg_path


def _load(payload):
    tmp, cfg_dir, cfg_path = _with_config_json(payload)
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_dir)
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json
        tmp.cleanup()


def test_load_config_defaults_without_json():
    cfg = _load(None)
    assert cfg["VISIBLE_COLS"] == 8
    assert cfg["THEME"] is None
    assert cfg["CLIPBOARD_INTERFACE_COMMAND"] is None


def test_load_config_reads_json_overrides():
    cfg = _load(
        {
            "visible_cols": 5,
            "theme": "amber",
            "clipboard_interface_command": ["wl-copy"],
        }
    )
    assert cfg["VISIBLE_COLS"] == 5
    assert cfg["THEME"] == "amber"
    assert cfg["CLIPBOARD_INTERFACE_COMMAND"] == ["wl-copy"]


def test_load_config_ignores_invalid_values_per_key():
    cfg = _load(
        {
            "visible_cols": 0,
            "theme": "  ",
            "clipboard_interface_command": ["ok", 3],
        }
    )
    assert cfg["VISIBLE_COLS"] == 8
    assert cfg["THEME"] is None
    assert cfg["CLIPBOARD_INTERFACE_COMMAND"] is None

    cfg = _load({"visible_cols": True, "theme": "dark"})
    assert cfg["VISIBLE_COLS"] == 8
    assert cfg["THEME"] == "dark"


def test_load_config_survives_broken_json():
    cfg = _load("{broken")
    assert cfg["VISIBLE_COLS"] == 8
    cfg = _load("[1, 2]")
    assert cfg["THEME"] is None


def test_ensure_config_dirs_creates_themes(tmp_path, monkeypatch):
    monkeypatch.setattr(config_paths, "CONFIG_DIR", str(tmp_path / "vsheet"))
    monkeypatch.setattr(config_paths, "THEMES_DIR", str(tmp_path / "vsheet" / "themes"))
    config_paths.ensure_config_dirs()
    config_paths.ensure_config_dirs()
    assert (tmp_path / "vsheet" / "themes").is_dir()


def test_setup_logging_writes_to_log_file(tmp_path, monkeypatch):
    log_path = tmp_path / "vsheet.log"
    monkeypatch.setattr(config_paths, "LOG_PATH", str(log_path))
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        config_paths.setup_logging()
        config_paths.setup_logging()
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        logging.getLogger("sheet_editor").info("hello log")
        file_handlers[0].flush()
        assert "hello log" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
