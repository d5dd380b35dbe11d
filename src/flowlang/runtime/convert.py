"""Conversion between host values and FlowObjects."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..context import FlowContext
from .datetimes import FlowDatetime
from .objects import FlowBoolean, FlowDict, FlowFloat, FlowInteger, FlowList, FlowNull, FlowObject, FlowString


def to_flow(value: Any, context: FlowContext) -> FlowObject:
    if isinstance(value, FlowObject):
        return value
    if value is None:
        return FlowNull(context)
    if isinstance(value, bool):
        return FlowBoolean(context, value)
    if isinstance(value, int):
        return FlowInteger(context, value)
    if isinstance(value, float):
        return FlowFloat(context, value)
    if isinstance(value, str):
        return FlowString(context, value)
    if isinstance(value, datetime):
        return FlowDatetime(context, value)
    if isinstance(value, date):
        return FlowDatetime(context, datetime(value.year, value.month, value.day))
    if isinstance(value, dict):
        return FlowDict(context, ((to_flow(key, context), to_flow(item, context)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return FlowList(context, (to_flow(item, context) for item in value))
    return FlowString(context, str(value))


def from_flow(obj: FlowObject) -> Any:
    """JSON friendly host value."""
    return obj.to_json()
