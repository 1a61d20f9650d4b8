# ~/Apps/tabpeek/orchestrator.py
import curses
import logging

from config_paths import load_config
from grid_pane import GridPane
from loading_screen import ProgressLine
from navigation import Command, NavigationController
from palette import Palette
from screen_layout import ScreenLayout
from status_bar import render_status
from window_builder import build_window
from window_cache import WindowCache


logger = logging.getLogger(__name__)

KEY_ESC = 27
KEY_CTRL_C = 3

KEY_COMMANDS = {
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_UP: Command.UP,
    curses.KEY_NPAGE: Command.PAGE_DOWN,
    curses.KEY_PPAGE: Command.PAGE_UP,
    curses.KEY_HOME: Command.HOME,
    curses.KEY_RIGHT: Command.RIGHT,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RESIZE: Command.RESIZE,
    KEY_ESC: Command.QUIT,
    KEY_CTRL_C: Command.QUIT,
}


def command_for_key(ch):
    return KEY_COMMANDS.get(ch)


class Orchestrator:
    def __init__(self, stdscr, path, delimiter=",", start_row=0, config=None):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.nodelay(False)

        self.config = config if config is not None else load_config()
        self.path = path
        self.delimiter = delimiter

        self.palette = Palette.from_names(self.config.get("PALETTE"))
        self.palette.init_pairs()

        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane(self.palette)
        self.progress = ProgressLine(self.layout.table_win)

        self.cache = WindowCache(self._build_window, capacity=self.config["BUFFER_SIZE"])
        # the first build already draws progress on the fresh screen
        self.stdscr.clear()
        self.stdscr.refresh()
        self.nav = NavigationController(
            self.cache, start_row=start_row, page_step=self.config["PAGE_STEP"]
        )

    # ---------------- helpers ----------------

    def _build_window(self, target_row, capacity):
        logger.info("rebuilding window for row %d of %s", target_row, self.path)
        return build_window(
            self.path,
            target_row,
            capacity,
            delimiter=self.delimiter,
            on_progress=self.progress,
            progress_every=self.config["PROGRESS_EVERY"],
        )

    def _resize(self):
        try:
            curses.update_lines_cols()
        except (AttributeError, curses.error):
            pass
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)
        self.progress.win = self.layout.table_win

    def status_context(self):
        window = self.nav.window
        col = self.nav.target_column
        name = ""
        if window is not None and col < window.column_count:
            name = window.headers[col]
        return {
            "file_path": self.path,
            "target_row": self.nav.target_row,
            "target_column": col,
            "column_name": name,
            "column_count": self.nav.column_count,
            "first_row": self.cache.first_row,
            "last_row": self.cache.last_row,
            "reached_end": self.cache.reached_end,
        }

    # ---------------- UI ----------------

    def redraw(self):
        self.grid.draw(
            self.layout.table_win,
            self.nav.window,
            self.nav.target_row,
            self.nav.target_column,
        )

        sw = self.layout.status_win
        if sw is None:
            return
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(self.status_context(), w)
        try:
            sw.addnstr(0, 0, text, max(0, w - 1), curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

    # ---------------- main loop ----------------

    def handle_key(self, ch):
        """Apply one key; returns False when the viewer should stop."""
        command = command_for_key(ch)
        if command is None:
            return True
        if command is Command.RESIZE:
            self._resize()
        return self.nav.handle(command)

    def run(self):
        while True:
            self.redraw()
            ch = self.stdscr.getch()
            if ch == -1:
                continue
            if not self.handle_key(ch):
                break
