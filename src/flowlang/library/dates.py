"""
The ``Datetime`` module.

Datetimes are always timezone aware; naive values get the language's
timezone. ``difference`` reports the distance between two datetimes in
every unit at once, so ``difference.minutes`` is the total number of
minutes and not the remainder after the hours.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from ..runtime.datetimes import FlowDatetime, add_months, context_timezone
from ..runtime.objects import VALUE_ERROR, FlowInteger, FlowObject, FlowString, FlowStruct
from .base import LibraryModule, method

_UNITS = ("year", "month", "day", "hour", "minute", "second", "microsecond")


class Datetime(LibraryModule):
    module_name = "Datetime"
    doc_prefix = "datetime"

    @method(element="any")
    def is_datetime(self, element):
        return isinstance(element, FlowDatetime)

    @method()
    def now(self):
        return FlowDatetime(self.context, datetime.now(context_timezone(self.context)))

    @method(
        year="integer",
        month="integer",
        day="integer",
        hour="integer",
        minute="integer",
        second="integer",
        microsecond="integer",
    )
    def new(self, year, month=None, day=None, hour=None, minute=None, second=None, microsecond=None):
        given = dict(zip(_UNITS, (year, month, day, hour, minute, second, microsecond)))
        parts = {}
        for unit, value in given.items():
            if value is not None:
                self.expect(value, FlowInteger, unit, "integer")
            parts[unit] = self.raw(value, 1 if unit in ("month", "day") else 0)
        try:
            moment = datetime(tzinfo=context_timezone(self.context), **parts)
        except ValueError as exc:
            raise self.error(VALUE_ERROR, "runtime.invalid_datetime", text=str(exc)) from None
        return FlowDatetime(self.context, moment)

    def _part(self, value: FlowObject, unit: str) -> int:
        self.expect(value, FlowDatetime, "datetime", "datetime")
        return getattr(value.moment, unit)

    @method(datetime="datetime")
    def year(self, datetime):
        return self._part(datetime, "year")

    @method(datetime="datetime")
    def month(self, datetime):
        return self._part(datetime, "month")

    @method(datetime="datetime")
    def day(self, datetime):
        return self._part(datetime, "day")

    @method(datetime="datetime")
    def hour(self, datetime):
        return self._part(datetime, "hour")

    @method(datetime="datetime")
    def minute(self, datetime):
        return self._part(datetime, "minute")

    @method(datetime="datetime")
    def second(self, datetime):
        return self._part(datetime, "second")

    @method(datetime="datetime")
    def microsecond(self, datetime):
        return self._part(datetime, "microsecond")

    @method(datetime="datetime")
    def to_iso_string(self, datetime):
        self.expect(datetime, FlowDatetime, "datetime", "datetime")
        return datetime.moment.isoformat()

    @method(string="string")
    def from_iso_string(self, string):
        self.expect(string, FlowString, "string", "string")
        try:
            moment = datetime.fromisoformat(string.text.strip().replace("Z", "+00:00"))
        except ValueError:
            raise self.error(VALUE_ERROR, "runtime.invalid_datetime", text=string.text) from None
        return FlowDatetime(self.context, moment)

    @method(
        datetime="datetime",
        years="integer",
        months="integer",
        days="integer",
        hours="integer",
        minutes="integer",
        seconds="integer",
    )
    def add(self, datetime, years=None, months=None, days=None, hours=None, minutes=None, seconds=None):
        self.expect(datetime, FlowDatetime, "datetime", "datetime")
        amounts = dict(years=years, months=months, days=days, hours=hours, minutes=minutes, seconds=seconds)
        for name, value in amounts.items():
            if value is not None:
                self.expect(value, FlowInteger, name, "integer")
        moment = add_months(datetime.moment, 12 * self.raw(years, 0) + self.raw(months, 0))
        moment += timedelta(
            days=self.raw(days, 0),
            hours=self.raw(hours, 0),
            minutes=self.raw(minutes, 0),
            seconds=self.raw(seconds, 0),
        )
        return FlowDatetime(self.context, moment)

    @method(bigger_date="datetime", smaller_date="datetime")
    def difference(self, bigger_date, smaller_date):
        self.expect(bigger_date, FlowDatetime, "bigger_date", "datetime")
        self.expect(smaller_date, FlowDatetime, "smaller_date", "datetime")
        bigger, smaller = bigger_date.moment, smaller_date.moment
        delta = bigger - smaller
        microseconds = delta // timedelta(microseconds=1)
        months = (bigger.year - smaller.year) * 12 + bigger.month - smaller.month
        if months > 0 and (bigger.day, bigger.time()) < (smaller.day, smaller.time()):
            months -= 1
        totals = {
            "years": int(months / 12),
            "months": months,
            "days": delta // timedelta(days=1),
            "hours": delta // timedelta(hours=1),
            "minutes": delta // timedelta(minutes=1),
            "seconds": delta // timedelta(seconds=1),
            "microseconds": microseconds,
        }
        return FlowStruct(
            self.context,
            "DatetimeDifference",
            {name: FlowInteger(self.context, value) for name, value in totals.items()},
        )
