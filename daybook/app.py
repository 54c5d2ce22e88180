"""
Application state: which mode is active and how keys drive the core objects.
"""
import curses
import logging
from datetime import date

from .editor import TextBuffer
from .navigator import CalendarNavigator
from .storage import EntryStore, StorageError

CALENDAR_MODE = "calendar"
EDITOR_MODE = "editor"

CALENDAR_HELP = "q: quit | hjkl/arrows: move | H/L: month | t: today | Enter: edit"
EDITOR_HELP = "Editing - Ctrl+S/Tab: save and return | Esc: cancel"

CTRL_S = "\x13"
ESC = "\x1b"
ENTER_KEYS = ("\n", "\r", curses.KEY_ENTER)
BACKSPACE_KEYS = ("\x7f", "\b", curses.KEY_BACKSPACE)


class App:
    def __init__(self, storage: EntryStore, navigator: CalendarNavigator = None,
                 editor: TextBuffer = None):
        self.storage = storage
        self.calendar = navigator or CalendarNavigator()
        self.editor = editor or TextBuffer()
        self.mode = CALENDAR_MODE
        self.should_quit = False
        self.status_message = CALENDAR_HELP

    def switch_to_editor(self):
        content = self.storage.get_entry(self.calendar.selected_date) or ""
        self.editor.set_content(content)
        self.mode = EDITOR_MODE
        self.status_message = EDITOR_HELP

    def save_and_return_to_calendar(self):
        self.storage.set_entry(self.calendar.selected_date, self.editor.content)
        try:
            self.storage.save()
            self.status_message = "Saved successfully! Press 'q' to quit"
        except StorageError as e:
            logging.error(f"Save failed: {e}")
            self.status_message = f"Error saving: {e}"
        self.mode = CALENDAR_MODE

    def cancel_edit(self):
        self.mode = CALENDAR_MODE
        self.status_message = "Edit cancelled"

    def has_entry(self, d: date) -> bool:
        return self.storage.has_entry(d)

    # -----------------------------------------------------------------
    # KEY DISPATCH
    # -----------------------------------------------------------------
    def handle_key(self, key, viewport_height: int = 1):
        """Handle one key as returned by ``get_wch`` (str or int keycode)."""
        if self.mode == CALENDAR_MODE:
            self._handle_calendar_key(key)
        else:
            self._handle_editor_key(key)
        if self.mode == EDITOR_MODE:
            self.editor.adjust_scroll(viewport_height)

    def _handle_calendar_key(self, key):
        if key == "q":
            self.should_quit = True
        elif key in ("h", curses.KEY_LEFT):
            self.calendar.move_selection(-1)
        elif key in ("l", curses.KEY_RIGHT):
            self.calendar.move_selection(1)
        elif key in ("k", curses.KEY_UP):
            self.calendar.move_selection(-7)
        elif key in ("j", curses.KEY_DOWN):
            self.calendar.move_selection(7)
        elif key == "H":
            self.calendar.prev_month()
        elif key == "L":
            self.calendar.next_month()
        elif key == "t":
            self.calendar.select_date(date.today())
        elif key in ENTER_KEYS:
            self.switch_to_editor()

    def _handle_editor_key(self, key):
        if key in (CTRL_S, "\t"):
            self.save_and_return_to_calendar()
            return
        if key == ESC:
            self.cancel_edit()
            return
        if key in ENTER_KEYS:
            self.editor.insert_newline()
        elif key in BACKSPACE_KEYS:
            self.editor.delete_char()
        elif key == curses.KEY_LEFT:
            self.editor.move_cursor_left()
        elif key == curses.KEY_RIGHT:
            self.editor.move_cursor_right()
        elif key == curses.KEY_UP:
            self.editor.move_cursor_up()
        elif key == curses.KEY_DOWN:
            self.editor.move_cursor_down()
        elif isinstance(key, str) and key.isprintable():
            self.editor.insert_char(key)
