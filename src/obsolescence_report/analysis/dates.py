from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DateLike = Union[date, str]


class MalformedDateError(ValueError):
    """A calendar date could not be parsed as YYYY-MM-DD."""

    def __init__(self, value: object, field: str = "date"):
        self.value = value
        self.field = field
        super().__init__(f"Malformed {field}: {value!r} (expected YYYY-MM-DD)")


class InvalidDateWindowError(ValueError):
    """The window starts after it ends."""

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"Start date {format_date(start_date)} is after end date {format_date(end_date)}"
        )


def parse_date(value: DateLike, field: str = "date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # strptime alone accepts unpadded fields such as 2024-3-5
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise MalformedDateError(value, field)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise MalformedDateError(value, field) from None


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def end_of_next_month(today: date) -> date:
    year, month = (today.year + 1, 1) if today.month == 12 else (today.year, today.month + 1)
    return date(year, month, calendar.monthrange(year, month)[1])


@dataclass(frozen=True)
class DateWindow:
    """Report period; obsolescence dates must fall strictly inside it."""

    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date > self.end_date:
            raise InvalidDateWindowError(self.start_date, self.end_date)

    @classmethod
    def parse(
        cls,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        today: Optional[date] = None,
    ) -> "DateWindow":
        default = cls.default(today)
        start = default.start_date if start_date in (None, "") else parse_date(start_date, "start date")
        end = default.end_date if end_date in (None, "") else parse_date(end_date, "end date")
        return cls(start, end)

    @classmethod
    def default(cls, today: Optional[date] = None) -> "DateWindow":
        today = today or date.today()
        return cls(today, end_of_next_month(today))

    def contains(self, value: date) -> bool:
        return self.start_date < value < self.end_date

    def as_strings(self):
        return format_date(self.start_date), format_date(self.end_date)


__all__ = [
    "DATE_FORMAT",
    "DateWindow",
    "InvalidDateWindowError",
    "MalformedDateError",
    "end_of_next_month",
    "format_date",
    "parse_date",
]
