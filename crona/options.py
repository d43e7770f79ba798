"""Schedule fields: validation and matching against a moment in time."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Sequence

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    """Strict decimal integer: optional sign, ASCII digits, nothing else."""
    if _INTEGER.fullmatch(text):
        return int(text)
    return None


@dataclass(frozen=True)
class Flag:
    """A labelled option attached to a schedule."""

    label: str
    value: Any = ""


def compare_flags(first: Sequence[Flag], second: Sequence[Flag]) -> bool:
    """Compare flags position by position over the first sequence."""
    if len(second) < len(first):
        raise IndexError("second flag list is shorter than the first")
    return all(
        a.label == b.label and a.value == b.value for a, b in zip(first, second)
    )


@dataclass(frozen=True)
class Bound:
    """The allowed numeric range of one schedule field."""

    min: int
    max: int
    labels: Mapping[str, int] = field(default_factory=dict, compare=False, hash=False)

    def contains(self, number: int) -> bool:
        return self.min <= number <= self.max

    def validate(self, value: str) -> bool:
        """Return True if the field is acceptable; raise ValueError otherwise."""
        if (
            _is_all_unit(value)
            or _is_multiple_values(value, self)
            or _is_range(value, self)
            or _is_step_range(value, self)
        ):
            return True
        number = _parse_int(value)
        if number is None:
            raise ValueError(f"invalid number: {value!r}")
        if not self.contains(number):
            raise ValueError("value out of range")
        return True


SECOND_BOUND = Bound(0, 59)
MINUTE_BOUND = Bound(0, 59)
HOUR_BOUND = Bound(0, 23)
DOM_BOUND = Bound(1, 31)
MONTH_BOUND = Bound(
    1,
    12,
    {
        "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
        "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
    },
)
DOW_BOUND = Bound(
    0,
    6,
    {"sun": 0, "mon": 1, "tue": 2, "wed": 3, "thu": 4, "fri": 5, "sat": 6},
)


def _is_all_unit(text: str) -> bool:
    return text == "*"


def _is_multiple_values(text: str, bound: Bound) -> bool:
    items = text.split(",")
    if len(items) <= 1:
        return False
    for item in items:
        number = _parse_int(item)
        if number is None or not bound.contains(number):
            return False
    return True


def _split_range(text: str) -> tuple[int, int] | None:
    parts = text.split("-")
    if len(parts) != 2:
        return None
    start, end = (_parse_int(part) for part in parts)
    if start is None or end is None:
        return None
    return start, end


def _is_range(text: str, bound: Bound) -> bool:
    if "-" not in text:
        return False
    limits = _split_range(text)
    if limits is None:
        return False
    start, end = limits
    return start >= bound.min and end <= bound.max and start <= end


def _step_of(text: str) -> int | None:
    if not text.startswith("*/"):
        return None
    return _parse_int(text[2:])


def _is_step_range(text: str, bound: Bound) -> bool:
    step = _step_of(text)
    return step is not None and bound.contains(step)


def _match_value(value: int, text: str, bound: Bound) -> bool:
    if _is_all_unit(text):
        return True
    if _is_multiple_values(text, bound):
        return str(value) in text.split(",")
    if _is_range(text, bound):
        start, end = _split_range(text)  # type: ignore[misc]
        return start <= value <= end
    if _is_step_range(text, bound):
        step = _step_of(text)
        # A zero step would never advance; it selects nothing.
        if not step or step < 0:
            return False
        return value in range(bound.min, bound.max + 1, step)
    number = _parse_int(text)
    return number is not None and number == value


@dataclass
class ParseOptions:
    """The six schedule fields of a task, plus optional flags."""

    second: str
    minute: str
    hour: str
    dom: str
    month: str
    dow: str
    flags: list[Flag] = field(default_factory=list)

    def match_second(self, moment: datetime) -> bool:
        return _match_value(moment.second, self.second, SECOND_BOUND)

    def match_minute(self, moment: datetime) -> bool:
        return _match_value(moment.minute, self.minute, MINUTE_BOUND)

    def match_hour(self, moment: datetime) -> bool:
        return _match_value(moment.hour, self.hour, HOUR_BOUND)

    def match_day(self, moment: datetime) -> bool:
        return _match_value(moment.day, self.dom, DOM_BOUND)

    def match_month(self, moment: datetime) -> bool:
        return _match_value(moment.month, self.month, MONTH_BOUND)

    def match_week(self, moment: datetime) -> bool:
        """Match the weekday, counting Sunday as 0."""
        return _match_value(moment.isoweekday() % 7, self.dow, DOW_BOUND)

    def match_time(self, moment: datetime) -> bool:
        """Whether every field matches the given moment."""
        return (
            self.match_second(moment)
            and self.match_minute(moment)
            and self.match_hour(moment)
            and self.match_day(moment)
            and self.match_month(moment)
            and self.match_week(moment)
        )

    def compare(self, other: ParseOptions) -> bool:
        """Whether both schedules have identical fields and flags."""
        return (
            self.second == other.second
            and self.minute == other.minute
            and self.hour == other.hour
            and self.dom == other.dom
            and self.month == other.month
            and self.dow == other.dow
            and len(self.flags) == len(other.flags)
            and (not self.flags or compare_flags(self.flags, other.flags))
        )