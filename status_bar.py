import curses

from modes import Command, Insert


def render_status(editor, width):
    """Footer text: location line and mode line, each padded to ``width``."""
    cell = editor.view.cell_label()
    fname = editor.file_name or "[No Name]"
    location = f"{fname} - [{cell}]"

    mode = editor.mode
    if isinstance(mode, Insert):
        mode_line = f"-- INSERT -- {editor.command_buffer}"
    elif isinstance(mode, Command):
        mode_line = f":{editor.command_buffer}"
    else:
        mode_line = editor.command_buffer

    return [line.ljust(width)[:width] for line in (location, mode_line)]


def draw_status(win, editor, attr=curses.A_NORMAL):
    win.erase()
    h, w = win.getmaxyx()
    for y, line in enumerate(render_status(editor, w)[:h]):
        try:
            win.addnstr(y, 0, line, w, attr)
        except curses.error:
            pass
    win.noutrefresh()
