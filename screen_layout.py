import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: grid (main), status bar (1 line)
        self.status_h = 1 if self.H > 1 else 0

        self.table_h = max(1, self.H - self.status_h)

        self.table_win = curses.newwin(self.table_h, self.W, 0, 0)
        # grid pane must never own cursor
        self.table_win.leaveok(True)

        self.status_win = None
        if self.status_h:
            self.status_win = curses.newwin(self.status_h, self.W, self.table_h, 0)
            self.status_win.leaveok(True)
