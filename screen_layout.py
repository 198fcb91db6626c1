import curses


class ScreenLayout:
    FOOTER_H = 2

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: grid (title + header + rows), footer (location line + mode line)
        self.footer_h = min(self.FOOTER_H, self.H)
        self.grid_h = max(0, self.H - self.footer_h)

        self.grid_win = None
        if self.grid_h > 0:
            self.grid_win = curses.newwin(self.grid_h, self.W, 0, 0)
            # grid pane must never own cursor
            self.grid_win.leaveok(True)

        self.footer_win = None
        if self.footer_h > 0:
            self.footer_win = curses.newwin(self.footer_h, self.W, self.grid_h, 0)
            self.footer_win.leaveok(True)
