#!/usr/bin/env python3
"""
DAYBOOK - curses front end

  - Calendar view: several months side by side, hjkl/arrows move the
    selected day, H/L page the visible months, t jumps to today.
  - Editor view: Enter opens the selected day's entry, Ctrl+S or Tab saves it
    and returns, Esc discards the edit.
  - Entries live in one JSON file in the user data directory.
"""
import calendar
import curses
import logging
import os
import sys
import unicodedata
from datetime import date
from pathlib import Path

from . import config as cfg
from .app import App, CALENDAR_MODE
from .navigator import CalendarNavigator
from .storage import EntryStore, StorageError

MONTH_WIDTH = 20
MONTH_HEIGHT = 8
MONTH_GAP_X = 3
MONTH_GAP_Y = 1
MONTH_COLUMNS = 3


def display_width(text: str) -> int:
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


class DaybookTUI:
    def __init__(self, stdscr, app: App):
        self.stdscr = stdscr
        self.app = app
        curses.raw()
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_CYAN, -1)
        curses.init_pair(2, curses.COLOR_BLACK, curses.COLOR_CYAN)    # selected day
        curses.init_pair(3, curses.COLOR_YELLOW, -1)                  # today / status
        curses.init_pair(4, curses.COLOR_GREEN, -1)                   # editor frame
        self.stdscr.keypad(True)

    def editor_height(self) -> int:
        height, _ = self.stdscr.getmaxyx()
        return max(1, height - 3)

    def run(self):
        while not self.app.should_quit:
            self.draw()
            try:
                key = self.stdscr.get_wch()
            except curses.error:
                continue
            if key == curses.KEY_RESIZE:
                continue
            self.app.handle_key(key, self.editor_height())

    # -----------------------------------------------------------------
    # DRAWING
    # -----------------------------------------------------------------
    def draw(self):
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        if self.app.mode == CALENDAR_MODE:
            curses.curs_set(0)
            self.draw_calendar(height, width)
        else:
            self.draw_editor(height, width)
        self.draw_status_bar(height, width)
        if self.app.mode != CALENDAR_MODE:
            self.place_cursor(height, width)
        self.stdscr.refresh()

    def draw_calendar(self, height, width):
        months = self.app.calendar.get_display_months()
        columns = max(1, min(MONTH_COLUMNS, width // (MONTH_WIDTH + MONTH_GAP_X)))
        for idx, (year, month) in enumerate(months):
            if year > date.max.year:
                break
            row, col = divmod(idx, columns)
            y = 1 + row * (MONTH_HEIGHT + MONTH_GAP_Y)
            x = 2 + col * (MONTH_WIDTH + MONTH_GAP_X)
            if y + MONTH_HEIGHT > height - 1:
                break
            self.draw_month(year, month, y, x)

    def draw_month(self, year, month, start_y, start_x):
        nav = self.app.calendar
        title = f"{calendar.month_name[month]} {year}"
        try:
            self.stdscr.addnstr(start_y, start_x, title.center(MONTH_WIDTH), MONTH_WIDTH, curses.A_BOLD)
            self.stdscr.addnstr(start_y + 1, start_x, " ".join(nav.weekday_headers()), MONTH_WIDTH, curses.A_BOLD)
        except curses.error:
            pass
        today = date.today()
        for i, day in enumerate(nav.get_month_days(year, month)):
            if day is None:
                continue
            week, weekday = divmod(i, 7)
            attr = curses.A_NORMAL
            if self.app.has_entry(day):
                attr = curses.color_pair(1) | curses.A_UNDERLINE
            if day == today:
                attr |= curses.color_pair(3) | curses.A_BOLD
            if day == nav.selected_date:
                attr = curses.color_pair(2) | curses.A_BOLD
            try:
                self.stdscr.addnstr(start_y + 2 + week, start_x + weekday * 3, f"{day.day:2}", 2, attr)
            except curses.error:
                pass

    def draw_editor(self, height, width):
        selected = self.app.calendar.selected_date
        title = f" Diary - {selected.isoformat()} ({selected.strftime('%A')}) "
        try:
            self.stdscr.addnstr(0, 0, title.ljust(width), width, curses.color_pair(4) | curses.A_BOLD)
        except curses.error:
            pass
        lines = self.app.editor.get_display_lines(self.editor_height())
        for idx, line in enumerate(lines):
            try:
                self.stdscr.addnstr(1 + idx, 1, line, max(1, width - 2))
            except curses.error:
                pass

    def draw_status_bar(self, height, width):
        try:
            self.stdscr.addnstr(height - 1, 0, f" {self.app.status_message}".ljust(width), width - 1,
                                curses.A_REVERSE | curses.color_pair(3))
        except curses.error:
            pass

    def place_cursor(self, height, width):
        editor = self.app.editor
        line, col = editor.cursor_line_col()
        row = line - editor.scroll_offset
        x = 1 + display_width(editor.lines()[line][:col])
        try:
            curses.curs_set(1)
            self.stdscr.move(1 + row, min(x, width - 1))
        except curses.error:
            pass


# ---------------------------------------------------------------------
# MAIN FUNCTION
# ---------------------------------------------------------------------
def build_app(config: dict) -> App:
    data_file = Path(config["data_file"]).expanduser()
    storage = EntryStore.load(data_file)
    navigator = CalendarNavigator(display_months=cfg.display_months(config),
                                  first_weekday=cfg.first_weekday(config))
    return App(storage, navigator)


def main():
    config = cfg.load_config()
    cfg.setup_logging(config)
    try:
        app = build_app(config)
    except StorageError as e:
        logging.critical(f"Cannot load diary entries: {e}")
        print(f"daybook: {e}", file=sys.stderr)
        sys.exit(1)
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(lambda stdscr: DaybookTUI(stdscr, app).run())
    except Exception as e:
        logging.critical(f"Unhandled exception: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
