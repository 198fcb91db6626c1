import curses
from dataclasses import dataclass

ESC = "Esc"
ENTER = "Enter"
LEFT = "Left"
RIGHT = "Right"
UP = "Up"
DOWN = "Down"
BACKSPACE = "Backspace"
DELETE = "Delete"
RESIZE = "Resize"

NAMED_KEYS = {ESC, ENTER, LEFT, RIGHT, UP, DOWN, BACKSPACE, DELETE, RESIZE}

_CURSES_KEYS = {
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_BACKSPACE: BACKSPACE,
    curses.KEY_DC: DELETE,
    curses.KEY_ENTER: ENTER,
    curses.KEY_RESIZE: RESIZE,
}


@dataclass(frozen=True)
class KeyEvent:
    key: str
    ctrl: bool = False

    @property
    def is_char(self) -> bool:
        return len(self.key) == 1


def from_curses(wch):
    """Translate a ``get_wch()`` result into a KeyEvent, or None if unknown."""
    if isinstance(wch, int):
        name = _CURSES_KEYS.get(wch)
        return KeyEvent(name) if name else None

    code = ord(wch)
    if code == 27:
        return KeyEvent(ESC)
    if code in (10, 13):
        return KeyEvent(ENTER)
    if code in (8, 127):
        return KeyEvent(BACKSPACE)
    if 1 <= code <= 26:
        # Ctrl+A .. Ctrl+Z arrive as 1..26
        return KeyEvent(chr(ord("a") + code - 1), ctrl=True)
    if code < 32:
        return None
    return KeyEvent(wch)
