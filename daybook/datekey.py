"""
Canonical YYYY-MM-DD keys for calendar dates.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime

KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)


@dataclass(frozen=True, order=True)
class DateKey:
    year: int
    month: int
    day: int

    def __post_init__(self):
        # Raises ValueError for out-of-range components.
        date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "DateKey":
        return cls(d.year, d.month, d.day)

    @classmethod
    def parse(cls, text: str) -> "DateKey":
        m = KEY_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if not m:
            raise ValueError(f"Not a YYYY-MM-DD date: {text!r}")
        return cls(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    @classmethod
    def of(cls, value) -> "DateKey":
        """Accept a DateKey, a date/datetime or a YYYY-MM-DD string."""
        if isinstance(value, DateKey):
            return value
        if isinstance(value, datetime):
            return cls.from_date(value.date())
        if isinstance(value, date):
            return cls.from_date(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"Cannot build a DateKey from {type(value).__name__}")

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
