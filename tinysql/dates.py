"""Calendar dates stored alongside a day count starting at 0001-01-01."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field

DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MIN_YEAR = 0
MAX_YEAR = 9999


class DateError(ValueError):
    """Raised when a date is malformed or outside the supported range."""


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date; ``epoch`` counts days with 0001-01-01 as day 1."""

    year: int
    month: int
    day: int
    epoch: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        self._enforce_invariants()
        object.__setattr__(self, "epoch", self._to_epoch())

    @classmethod
    def from_epoch(cls, epoch: int) -> Date:
        """Build the date that lies ``epoch`` days into the calendar."""
        try:
            calendar_day = datetime.date.fromordinal(epoch)
        except (ValueError, OverflowError) as exc:
            raise DateError(f"epoch {epoch} is not in the supported range") from exc
        return cls(calendar_day.year, calendar_day.month, calendar_day.day)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse a date written as YYYY-MM-DD."""
        if len(text) != 10:
            raise DateError(f"incorrect date format {text!r} (should be YYYY-MM-DD)")
        try:
            year = int(text[0:4])
            month = int(text[5:7])
            day = int(text[8:10])
        except ValueError as exc:
            raise DateError(
                f"incorrect date format {text!r} (should be YYYY-MM-DD)"
            ) from exc
        return cls(year, month, day)

    def is_leap_year(self) -> bool:
        """Every fourth year, except centuries not divisible by 400."""
        year = self.year
        return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)

    def leap_days_before(self) -> int:
        """Leap days in the years before this one, not counting this year."""
        previous = self.year - 1
        return (
            _truncating_div(previous, 4)
            - _truncating_div(previous, 100)
            + _truncating_div(previous, 400)
        )

    def _days_in_month(self) -> int:
        extra = 1 if self.month == 2 and self.is_leap_year() else 0
        return DAYS_PER_MONTH[self.month - 1] + extra

    def _enforce_invariants(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise DateError(f"the year {self.year} is not in the supported range")
        if not 1 <= self.month <= 12:
            raise DateError(f"the month {self.month} is not in the supported range")
        if self.day > self._days_in_month():
            raise DateError(f"the day {self.day} is too large for the specified month")
        if self.day < 0:
            raise DateError("the day cannot be negative")

    def _to_epoch(self) -> int:
        epoch = (self.year - 1) * 365 + self.leap_days_before()
        if self.is_leap_year() and self.month > 2:
            epoch += 1
        epoch += sum(DAYS_PER_MONTH[: self.month - 1])
        return epoch + self.day

    def __int__(self) -> int:
        return self.epoch

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"