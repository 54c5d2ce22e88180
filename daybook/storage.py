"""
Date-keyed diary entries persisted as a single JSON document.

The document is a flat object mapping ``YYYY-MM-DD`` strings to entry text.
A date with empty text is never stored: absence and "" both mean no entry.
"""
import json
import logging
from pathlib import Path

from .config import default_data_file
from .datekey import DateKey


class StorageError(Exception):
    pass


class StorageIOError(StorageError):
    """Reading or writing the entries file failed."""


class ParseError(StorageError):
    """The entries file exists but is not a valid entries document."""


class EntryStore:
    def __init__(self, path: Path = None, entries: dict = None):
        self.path = Path(path) if path else default_data_file()
        self.entries = {}
        for key, text in (entries or {}).items():
            self.set_entry(key, text)

    @classmethod
    def load(cls, path: Path = None) -> "EntryStore":
        path = Path(path) if path else default_data_file()
        if not path.exists():
            logging.info(f"No entries file at {path}, starting empty")
            return cls(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            logging.error(f"Error reading entries file {path}: {e}")
            raise StorageIOError(f"Could not read {path}: {e}") from e
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logging.error(f"Error parsing entries file {path}: {e}")
            raise ParseError(f"{path} is not valid UTF-8 JSON: {e}") from e
        if not isinstance(data, dict):
            raise ParseError(f"{path} must contain a JSON object")
        entries = {}
        for key, text in data.items():
            if not isinstance(text, str):
                raise ParseError(f"Entry {key!r} in {path} is not a string")
            try:
                entries[DateKey.parse(key)] = text
            except ValueError as e:
                raise ParseError(f"Invalid date key in {path}: {e}") from e
        store = cls(path, entries)
        logging.info(f"Loaded {len(store)} entries from {path}")
        return store

    def save(self):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.entries, f, indent=2, sort_keys=True, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            logging.error(f"Error saving entries to {self.path}: {e}")
            raise StorageIOError(f"Could not write {self.path}: {e}") from e
        logging.info(f"Saved {len(self.entries)} entries to {self.path}")

    def get_entry(self, date):
        return self.entries.get(str(DateKey.of(date)))

    def has_entry(self, date) -> bool:
        return str(DateKey.of(date)) in self.entries

    def set_entry(self, date, text: str):
        key = str(DateKey.of(date))
        if text:
            self.entries[key] = text
        else:
            self.entries.pop(key, None)

    def dates(self):
        return sorted(DateKey.parse(key) for key in self.entries)

    def __len__(self):
        return len(self.entries)
