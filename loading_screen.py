# ~/Apps/tabpeek/loading_screen.py
import curses


class ProgressLine:
    """Reading progress drawn on the grid's first line while a window is rebuilt.

    Rebuilds block the event loop, so each update is painted and refreshed
    straight away instead of waiting for the next frame.
    """

    TEMPLATE = "Reading... {}%"

    def __init__(self, win=None):
        self.win = win
        self.last_percent = None

    def show(self, text):
        if self.win is None:
            return
        _, w = self.win.getmaxyx()
        try:
            self.win.addnstr(0, 0, text.ljust(w), max(0, w - 1), curses.A_BOLD)
        except curses.error:
            pass
        self.win.refresh()

    def update(self, percent):
        percent = max(0, min(100, int(percent)))
        self.last_percent = percent
        self.show(self.TEMPLATE.format(percent))

    __call__ = update
