"""
Datetime values and ``~D[...]`` literal parsing.

Literal text follows the language's ``date_format`` (``YYYY-MM-DD`` or
``DD/MM/YYYY``) optionally followed by a time written with ``hour_format``
(``hh:mm:ss.SSS``, where any trailing part may be left out).
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Tuple
from zoneinfo import ZoneInfo

from ..context import FlowContext
from .objects import FlowBoolean, FlowInteger, FlowObject

_FORMAT_TOKENS = (("YYYY", "%Y"), ("MM", "%m"), ("DD", "%d"))
_TIME_PATTERN = re.compile(r"^(\d{1,2})(?::(\d{1,2}))?(?::(\d{1,2}))?(?:[.,](\d{1,6}))?$")


def context_timezone(context: FlowContext) -> tzinfo:
    if context.timezone.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(context.timezone)


def _strptime_format(date_format: str) -> str:
    result = date_format
    for token, directive in _FORMAT_TOKENS:
        result = result.replace(token, directive)
    return result


def parse_datetime_literal(text: str, context: FlowContext) -> datetime:
    """Raises ``ValueError`` when the text does not match the language formats."""
    parts = text.strip().split(None, 1)
    if not parts:
        raise ValueError("empty datetime literal")
    day = datetime.strptime(parts[0], _strptime_format(context.date_format))
    hour = minute = second = microsecond = 0
    if len(parts) == 2:
        match = _TIME_PATTERN.match(parts[1].strip())
        if match is None:
            raise ValueError(f"invalid time {parts[1]!r}")
        hour = int(match.group(1))
        minute = int(match.group(2) or 0)
        second = int(match.group(3) or 0)
        fraction = match.group(4) or ""
        # .SSS is milliseconds; pad to microseconds
        microsecond = int(fraction.ljust(6, "0")) if fraction else 0
    return day.replace(
        hour=hour,
        minute=minute,
        second=second,
        microsecond=microsecond,
        tzinfo=context_timezone(context),
    )


def format_datetime(value: datetime, context: FlowContext) -> str:
    date_text = context.date_format
    for token, directive in _FORMAT_TOKENS:
        date_text = date_text.replace(token, value.strftime(directive))
    if (value.hour, value.minute, value.second, value.microsecond) == (0, 0, 0, 0):
        return date_text
    time_text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}.{value.microsecond // 1000:03d}"
    return f"{date_text} {time_text}"


def add_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    for day in range(value.day, 27, -1):
        try:
            return value.replace(year=year, month=month, day=day)
        except ValueError:
            continue
    return value.replace(year=year, month=month, day=min(value.day, 28))


class FlowDatetime(FlowObject):
    type_name = "datetime"

    def __init__(self, context: FlowContext, value: datetime) -> None:
        super().__init__(context)
        if value.tzinfo is None:
            value = value.replace(tzinfo=context_timezone(context))
        self.moment = value

    def render(self) -> str:
        return f"~{self.context.date_character}[{format_datetime(self.moment, self.context)}]"

    def _representation_(self) -> Any:
        return self.moment

    def to_json(self) -> Any:
        return self.moment.isoformat()

    def hash_key(self) -> Tuple[str, Any]:
        return ("datetime", self.moment)

    def equals(self, other: FlowObject) -> FlowBoolean:
        return FlowBoolean(self.context, isinstance(other, FlowDatetime) and other.moment == self.moment)

    def less_than(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowDatetime):
            return FlowBoolean(self.context, self.moment < other.moment)
        return super().less_than(other)

    def less_than_equal(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowDatetime):
            return FlowBoolean(self.context, self.moment <= other.moment)
        return super().less_than_equal(other)

    def greater_than(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowDatetime):
            return FlowBoolean(self.context, self.moment > other.moment)
        return super().greater_than(other)

    def greater_than_equal(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowDatetime):
            return FlowBoolean(self.context, self.moment >= other.moment)
        return super().greater_than_equal(other)

    def get_attribute(self, name: str) -> FlowObject:
        if name in {"year", "month", "day", "hour", "minute", "second", "microsecond"}:
            return FlowInteger(self.context, getattr(self.moment, name))
        return super().get_attribute(name)

    def shifted(self, delta: timedelta) -> "FlowDatetime":
        return FlowDatetime(self.context, self.moment + delta)
