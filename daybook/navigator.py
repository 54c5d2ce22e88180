"""
Calendar navigation: the selected date and the window of months on screen.
"""
import calendar
from datetime import date, timedelta

DEFAULT_DISPLAY_MONTHS = 9
WEEKDAY_ABBR = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


def shift_month(year: int, month: int, delta: int):
    """Return (year, month) moved by delta months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


class CalendarNavigator:
    def __init__(self, today: date = None, display_months: int = DEFAULT_DISPLAY_MONTHS,
                 first_weekday: int = calendar.SUNDAY):
        today = today or date.today()
        self.display_months = max(1, display_months)
        self.first_weekday = first_weekday
        self.cal = calendar.Calendar(first_weekday)
        self._selected_date = today
        self._current_date = today.replace(day=1)

    # Both dates are only changed through the methods below so the
    # selected month always stays inside the window.
    @property
    def selected_date(self) -> date:
        return self._selected_date

    @property
    def current_date(self) -> date:
        return self._current_date

    def move_selection(self, days: int):
        try:
            new_date = self._selected_date + timedelta(days=days)
        except OverflowError:
            return
        self._selected_date = new_date
        self._adjust_current_month()

    def select_date(self, d: date):
        self._selected_date = d
        self._adjust_current_month()

    def next_month(self):
        year, month = shift_month(self._current_date.year, self._current_date.month, 1)
        if date.min.year <= year <= date.max.year:
            self._current_date = date(year, month, 1)

    def prev_month(self):
        year, month = shift_month(self._current_date.year, self._current_date.month, -1)
        if date.min.year <= year <= date.max.year:
            self._current_date = date(year, month, 1)

    def in_window(self, d: date) -> bool:
        diff = (d.year - self._current_date.year) * 12 + d.month - self._current_date.month
        return 0 <= diff < self.display_months

    def _adjust_current_month(self):
        if not self.in_window(self._selected_date):
            self._current_date = self._selected_date.replace(day=1)

    # -----------------------------------------------------------------
    # GRID HELPERS
    # -----------------------------------------------------------------
    def get_month_days(self, year: int, month: int):
        """Flatten the month into week rows of dates, None for padding slots."""
        days = []
        for week in self.cal.monthdayscalendar(year, month):
            days.extend(date(year, month, day) if day else None for day in week)
        return days

    def get_display_months(self):
        year, month = self._current_date.year, self._current_date.month
        return [shift_month(year, month, i) for i in range(self.display_months)]

    def weekday_headers(self):
        return [WEEKDAY_ABBR[d] for d in self.cal.iterweekdays()]
