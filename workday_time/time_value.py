from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional


MINUTES_PER_HOUR = 60

_DIGITS = re.compile(r"[0-9]+")

# H:M, H:M:S, optionally followed by a meridiem marker; or a bare hour with one.
_LOOSE_CLOCK = re.compile(
    r"(?P<hour>[0-9]+):(?P<minute>[0-9]+)(?::(?P<second>[0-9]+))?"
    r"(?:\s*(?P<meridiem>[ap]\.?m\.?))?",
    re.IGNORECASE,
)
_LOOSE_MERIDIEM = re.compile(r"(?P<hour>[0-9]+)\s*(?P<meridiem>[ap]\.?m\.?)", re.IGNORECASE)


class InvalidInput(ValueError):
    """Raised when a Time cannot be built from the given input."""


def _to_int(token: str, field: str) -> int:
    if token is None or not _DIGITS.fullmatch(token):
        raise InvalidInput(f"{field} must be numeric")
    try:
        return int(token)
    except ValueError as exc:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise InvalidInput(f"{field} is too large") from exc


def _max_str_digits() -> int:
    # 0 means unlimited, as on interpreters before 3.11
    return getattr(sys, "get_int_max_str_digits", lambda: 0)()


@dataclass(frozen=True, order=True)
class Time:
    """
    Time of day as hours and minutes past an arbitrary zero point.

    Minutes are always folded into 0..59; hours are not wrapped at 24, so
    Time(23, 120) is 25:00.
    """

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        for field, value in (("hours", self.hours), ("minutes", self.minutes)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"{field} must be an integer")
            if value < 0:
                raise InvalidInput(f"{field} must be >= 0")

        extra_hours, minutes = divmod(self.minutes, MINUTES_PER_HOUR)
        hours = self.hours + extra_hours

        # to_string() must not fail, so hours has to fit in a decimal string
        limit = _max_str_digits()
        if limit and hours.bit_length() > limit * 3 and hours >= 10**limit:
            raise InvalidInput(f"hours must have at most {limit} digits")

        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)

    @classmethod
    def create(cls, hours: int, minutes: int) -> "Time":
        return cls(hours, minutes)

    @classmethod
    def now(cls, clock: Optional[Callable[[], Any]] = None) -> "Time":
        """
        Current local wall-clock time.

        `clock` is any zero-argument callable returning a value with `hour`
        and `minute` attributes; defaults to datetime.now.
        """
        current = (clock or datetime.now)()
        return cls.from_datetime(current)

    @classmethod
    def from_datetime(cls, value: Any) -> "Time":
        """Build from anything exposing `hour` and `minute` (datetime, time, ...)."""
        try:
            hour = value.hour
            minute = value.minute
        except AttributeError as exc:
            raise InvalidInput("value has no hour/minute") from exc
        return cls(hour, minute)

    @classmethod
    def from_integer(cls, total_minutes: int) -> "Time":
        if isinstance(total_minutes, bool) or not isinstance(total_minutes, int):
            raise InvalidInput("total minutes must be an integer")
        if total_minutes < 0:
            raise InvalidInput("total minutes must be >= 0")
        hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)
        return cls(hours, minutes)

    @classmethod
    def from_loose_string(cls, value: str) -> "Time":
        return parse_loose(value)

    @classmethod
    def from_string(cls, value: str) -> "Time":
        return parse_hhmm(value)

    def to_integer(self) -> int:
        return self.hours * MINUTES_PER_HOUR + self.minutes

    def to_string(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"

    def __int__(self) -> int:
        return self.to_integer()

    def __str__(self) -> str:
        return self.to_string()


def _require_text(value: Any) -> str:
    if value is None:
        raise InvalidInput("time is required")
    if not isinstance(value, str):
        raise InvalidInput("time must be a string")
    text = value.strip()
    if not text:
        raise InvalidInput("time is required")
    return text


def parse_hhmm(value: str) -> Time:
    """
    Parse "HH:MM" (or "H:M") to Time.

    Minutes past 59 roll over into the hour ("10:65" -> 11:05); no seconds,
    no AM/PM.
    """
    text = _require_text(value)

    parts = text.split(":")
    if len(parts) != 2:
        raise InvalidInput("time must be in HH:MM format")

    hour = _to_int(parts[0], "hour")
    minute = _to_int(parts[1], "minute")
    return Time(hour, minute)


def parse_loose(value: str) -> Time:
    """
    Parse common human notations: "18:00", "13:25:59", "9 AM", "7:30 pm".

    Seconds are dropped, not rounded. The AM/PM marker is accepted but does
    not shift the hour: "9 PM" parses to 09:00.
    """
    text = _require_text(value)

    m = _LOOSE_CLOCK.fullmatch(text)
    if m:
        # seconds only have to be digits; the regex already checked that
        return Time(_to_int(m.group("hour"), "hour"), _to_int(m.group("minute"), "minute"))

    m = _LOOSE_MERIDIEM.fullmatch(text)
    if m:
        return Time(_to_int(m.group("hour"), "hour"), 0)

    raise InvalidInput(f"unrecognized time: {text!r}")
