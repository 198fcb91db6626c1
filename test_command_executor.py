import json

import pytest

import config_paths
from key_event import BACKSPACE, ENTER, ESC, KeyEvent
from modes import Command, Normal
from sheet_editor import SheetEditor
from theme import Theme


def _run(editor, line):
    editor.handle_event(KeyEvent(":"))
    for ch in line:
        editor.handle_event(KeyEvent(ch))
    editor.handle_event(KeyEvent(ENTER))


@pytest.fixture
def editor(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_paths, "THEMES_DIR", str(tmp_path / "themes"))
    return SheetEditor(config={})


def test_typing_builds_command_line(editor):
    for k in [":", "c", "o", "x", KeyEvent(BACKSPACE), "l"]:
        editor.handle_event(k if isinstance(k, KeyEvent) else KeyEvent(k))
    assert isinstance(editor.mode, Command)
    assert editor.command_buffer == "col"


def test_esc_discards_command_line(editor):
    for k in [":", "q", KeyEvent(ESC)]:
        editor.handle_event(k if isinstance(k, KeyEvent) else KeyEvent(k))
    assert isinstance(editor.mode, Normal)
    assert editor.command_buffer == ""
    assert editor.running


def test_unknown_command_reports_status(editor):
    _run(editor, "frobnicate now")
    assert isinstance(editor.mode, Normal)
    assert editor.command_buffer == "Unknown command: frobnicate"


def test_empty_command_line_is_noop(editor):
    _run(editor, "   ")
    assert editor.command_buffer == ""
    assert editor.running


@pytest.mark.parametrize("line", ["q", "quit"])
def test_quit(editor, line):
    _run(editor, line)
    assert not editor.running


@pytest.mark.parametrize("line", ["w", "write"])
def test_write_to_current_file(editor, tmp_path, line):
    editor.sheet.set((0, 0), "a,b")
    _run(editor, line)
    assert (tmp_path / "Untitled.csv").read_text(encoding="utf-8") == '"a,b"\n'
    assert editor.command_buffer == "Saved Untitled.csv"
    assert editor.running


def test_write_to_path_adopts_file_name(editor, tmp_path):
    editor.sheet.set((1, 1), "v")
    _run(editor, "w my sheet.csv")
    assert (tmp_path / "my sheet.csv").read_text(encoding="utf-8") == "\n,v\n"
    assert editor.file_name == "my sheet.csv"


def test_write_failure_is_reported(editor, tmp_path):
    _run(editor, "w " + str(tmp_path / "nope" / "x.csv"))
    assert editor.command_buffer.startswith("Save failed:")
    assert editor.running
    assert isinstance(editor.mode, Normal)


def test_wq_saves_then_quits(editor, tmp_path):
    editor.sheet.set((0, 0), "x")
    _run(editor, "wq")
    assert (tmp_path / "Untitled.csv").exists()
    assert not editor.running


def test_wq_stays_open_when_save_fails(editor, tmp_path):
    editor.file_name = str(tmp_path / "nope" / "x.csv")
    _run(editor, "wq")
    assert editor.running
    assert editor.command_buffer.startswith("Save failed:")


def test_oversized_xlsx_save_is_reported_not_raised(editor, tmp_path):
    editor.sheet.set((0, 16384), "x")
    _run(editor, "w big.xlsx")
    assert editor.running
    assert editor.command_buffer.startswith("Save failed:")
    assert editor.file_name == "Untitled.csv"
    assert not (tmp_path / "big.xlsx").exists()


def test_cols_sets_visible_columns(editor):
    _run(editor, "cols 3")
    assert editor.visible_cols == 3
    assert editor.command_buffer == ""


def test_cols_without_argument_restores_default(editor):
    editor.visible_cols = 4
    _run(editor, "cols")
    assert editor.visible_cols == 8


@pytest.mark.parametrize("arg", ["many", "2.5", "0", "-3"])
def test_cols_ignores_malformed_argument(editor, arg):
    editor.visible_cols = 5
    _run(editor, f"cols {arg}")
    assert editor.visible_cols == 5
    assert editor.command_buffer == ""


def test_cols_reclamps_viewport(editor):
    for _ in range(7):
        editor.handle_event(KeyEvent("l"))
    _run(editor, "cols 2")
    assert editor.viewport.col == 6


def test_theme_lists_available(editor, tmp_path):
    themes = tmp_path / "themes"
    themes.mkdir()
    (themes / "dark.json").write_text("{}")
    (themes / "amber.json").write_text("{}")
    (themes / "notes.txt").write_text("")
    _run(editor, "theme")
    assert editor.command_buffer == "Themes: amber, dark"


def test_theme_list_without_directory_reports_error(editor):
    _run(editor, "theme")
    assert editor.command_buffer.startswith("unable to read themes dir")


def test_theme_loads_named_theme(editor, tmp_path):
    themes = tmp_path / "themes"
    themes.mkdir()
    (themes / "amber.json").write_text(json.dumps({"global_fg": [255, 191, 0]}))
    _run(editor, "theme amber")
    assert editor.theme.global_fg == (255, 191, 0)
    assert editor.theme.global_bg == Theme().global_bg
    assert editor.command_buffer == "Theme set to amber"


def test_theme_error_keeps_previous_theme(editor, tmp_path):
    themes = tmp_path / "themes"
    themes.mkdir()
    (themes / "bad.json").write_text(json.dumps({"global_fg": [300, 0, 0]}))
    before = editor.theme
    _run(editor, "theme bad")
    assert editor.theme is before
    assert editor.command_buffer.startswith("invalid theme json")
