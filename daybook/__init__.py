"""
Daybook: terminal-based personal diary.

A calendar view for picking a date and a text editor for writing a freeform
entry per date. Entries are kept in a single JSON file:

- Multi-month calendar with the selected day, today and days with entries marked
- Built-in editor with line-aware cursor motion and scrolling
- YAML configuration in ~/.config/daybook/config.yaml
"""

from .tui import main

__version__ = "0.1.0"
__license__ = "MIT"
__all__ = ['main']
