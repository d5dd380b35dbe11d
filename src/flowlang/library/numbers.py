"""Boolean, Integer, Float and Number modules."""

from __future__ import annotations

import math

from ..runtime.objects import (
    VALUE_ERROR,
    FlowBoolean,
    FlowFloat,
    FlowInteger,
    FlowNumber,
    FlowObject,
    FlowString,
)
from .base import LibraryModule, method


class Boolean(LibraryModule):
    module_name = "Boolean"
    doc_prefix = "boolean"

    @method(element="any")
    def is_boolean(self, element):
        return isinstance(element, FlowBoolean)


class _NumericModule(LibraryModule):
    """Shared parsing and rounding for the numeric modules."""

    def _parse(self, string: FlowObject) -> float:
        self.expect(string, FlowString, "string", "string")
        text = string.text.strip().replace(self.context.decimal_point_separator, ".")
        try:
            return float(text)
        except ValueError:
            raise self.error(VALUE_ERROR, "runtime.invalid_number", text=string.text) from None

    def _round(self, number: FlowObject, decimal_places: FlowObject | None) -> FlowObject:
        self.expect(number, FlowNumber, "number", "number")
        places = 0
        if decimal_places is not None:
            self.expect(decimal_places, FlowInteger, "decimal_places", "integer")
            places = decimal_places.number
        if isinstance(number, FlowInteger):
            return FlowInteger(self.context, round(number.number, places))
        return FlowFloat(self.context, float(round(number.number, places)))

    def _to_string(self, number: FlowObject) -> str:
        self.expect(number, FlowNumber, "number", "number")
        return number.render()


class Integer(_NumericModule):
    module_name = "Integer"
    doc_prefix = "integer"

    @method(element="any")
    def is_integer(self, element):
        return isinstance(element, FlowInteger) and not isinstance(element, FlowBoolean)

    @method(string="string")
    def from_string(self, string):
        value = self._parse(string)
        if not value.is_integer():
            raise self.error(VALUE_ERROR, "runtime.invalid_number", text=string.text)
        return int(value)

    @method(number="number")
    def to_string(self, number):
        return self._to_string(number)


class Float(_NumericModule):
    module_name = "Float"
    doc_prefix = "float"

    @method(element="any")
    def is_float(self, element):
        return isinstance(element, FlowFloat)

    @method(string="string")
    def from_string(self, string):
        return self._parse(string)

    @method(number="number")
    def to_string(self, number):
        return self._to_string(number)

    @method(number="number")
    def ceil(self, number):
        self.expect(number, FlowNumber, "number", "number")
        return math.ceil(number.number)

    @method(number="number")
    def floor(self, number):
        self.expect(number, FlowNumber, "number", "number")
        return math.floor(number.number)

    @method(number="number", decimal_places="integer")
    def round(self, number, decimal_places=None):
        return self._round(number, decimal_places)


class Number(_NumericModule):
    module_name = "Number"
    doc_prefix = "number"

    @method(element="any")
    def is_number(self, element):
        return isinstance(element, FlowNumber) and not isinstance(element, FlowBoolean)

    @method(number="number", decimal_places="integer")
    def round(self, number, decimal_places=None):
        return self._round(number, decimal_places)

    @method(number="number")
    def to_string(self, number):
        return self._to_string(number)
