"""
Runtime values of the Flow language.

Every evaluation produces a :class:`FlowObject`. Consumers render a result
with the two step protocol ``obj._string_()._representation_()``: the first
call builds the language level text (a :class:`FlowString`), the second
unwraps it into a host ``str``. ``_representation_()`` on any other object
returns the closest host value (``int``, ``list``, ``dict``...).

Operators dispatch to methods named in :data:`BINARY_OPERATORS`; the base
class raises a ``TypeError`` flow error for every combination a subclass
does not handle.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..context import FlowContext
from ..errors import FlowException
from ..strings import strings

SYNTAX_ERROR = "SyntaxError"
TYPE_ERROR = "TypeError"
ATTRIBUTE_ERROR = "AttributeError"
KEY_ERROR = "KeyError"
INDEX_ERROR = "IndexError"
NAME_ERROR = "NameError"
VALUE_ERROR = "ValueError"
ZERO_DIVISION_ERROR = "ZeroDivisionError"
MEMORY_OVERFLOW_ERROR = "MemoryOverflowError"
BUILTIN_ERROR = "BuiltinError"
HTTP_ERROR = "HTTPError"
GENERIC_ERROR = "Error"

BINARY_OPERATORS = {
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    "%": "remainder",
    "^": "power",
    "==": "equals",
    "!=": "not_equals",
    "<": "less_than",
    "<=": "less_than_equal",
    ">": "greater_than",
    ">=": "greater_than_equal",
}


def make_error(context: FlowContext, error_type: str, key: str, /, **values: Any) -> FlowException:
    """Build a catchable language error from a catalog message."""
    return FlowException(FlowError(context, error_type, strings(key, context.language, **values)))


class FlowObject:
    type_name = "object"

    def __init__(self, context: FlowContext) -> None:
        self.context = context

    @property
    def type(self) -> str:
        return self.type_name

    @property
    def value(self) -> Any:
        return self._representation_()

    # Rendering
    def render(self) -> str:
        return f"<{self.type_name}>"

    def _string_(self) -> "FlowString":
        return FlowString(self.context, self.render())

    def _representation_(self) -> Any:
        return self.render()

    def to_json(self) -> Any:
        return self._representation_()

    def hash_key(self) -> Tuple[str, Any]:
        raise make_error(self.context, TYPE_ERROR, "runtime.unhashable", type=self.type_name)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{type(self).__name__}({self.render()})"

    # Truth
    def is_truthy(self) -> bool:
        return True

    def boolean(self) -> "FlowBoolean":
        return FlowBoolean(self.context, self.is_truthy())

    # Operators
    def _unsupported(self, op: str, other: "FlowObject") -> FlowException:
        return make_error(
            self.context,
            TYPE_ERROR,
            "runtime.unsupported_operation",
            op=op,
            left=self.type_name,
            right=other.type_name,
        )

    def add(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("+", other)

    def subtract(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("-", other)

    def multiply(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("*", other)

    def divide(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("/", other)

    def remainder(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("%", other)

    def power(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("^", other)

    def less_than(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("<", other)

    def less_than_equal(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported("<=", other)

    def greater_than(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported(">", other)

    def greater_than_equal(self, other: "FlowObject") -> "FlowObject":
        raise self._unsupported(">=", other)

    def equals(self, other: "FlowObject") -> "FlowBoolean":
        return FlowBoolean(self.context, self is other)

    def not_equals(self, other: "FlowObject") -> "FlowBoolean":
        return FlowBoolean(self.context, not self.equals(other).value)

    def contains(self, item: "FlowObject") -> "FlowBoolean":
        raise make_error(
            self.context,
            TYPE_ERROR,
            "runtime.unsupported_operation",
            op=self.context.keyword("in"),
            left=item.type_name,
            right=self.type_name,
        )

    def unary_plus(self) -> "FlowObject":
        raise make_error(self.context, TYPE_ERROR, "runtime.unsupported_unary", op="+", type=self.type_name)

    def unary_minus(self) -> "FlowObject":
        raise make_error(self.context, TYPE_ERROR, "runtime.unsupported_unary", op="-", type=self.type_name)

    # Containers and attributes
    def length(self) -> "FlowInteger":
        raise make_error(self.context, TYPE_ERROR, "runtime.unsupported_unary", op="length", type=self.type_name)

    def get_attribute(self, name: str) -> "FlowObject":
        raise make_error(self.context, ATTRIBUTE_ERROR, "runtime.no_attribute", type=self.type_name, name=name)

    def set_attribute(self, name: str, value: "FlowObject") -> None:
        raise make_error(self.context, ATTRIBUTE_ERROR, "runtime.no_attribute", type=self.type_name, name=name)

    def get_item(self, index: "FlowObject") -> "FlowObject":
        raise make_error(self.context, TYPE_ERROR, "runtime.not_subscriptable", type=self.type_name)

    def set_item(self, index: "FlowObject", value: "FlowObject") -> None:
        raise make_error(self.context, TYPE_ERROR, "runtime.not_subscriptable", type=self.type_name)

    def call(self, interpreter: Any, args: List["FlowObject"], kwargs: Dict[str, "FlowObject"]) -> "FlowObject":
        raise make_error(self.context, TYPE_ERROR, "runtime.not_callable", type=self.type_name)


class FlowNull(FlowObject):
    type_name = "null"

    def render(self) -> str:
        return self.context.keyword("None")

    def _representation_(self) -> Any:
        return None

    def is_truthy(self) -> bool:
        return False

    def equals(self, other: FlowObject) -> "FlowBoolean":
        return FlowBoolean(self.context, isinstance(other, FlowNull))

    def hash_key(self) -> Tuple[str, Any]:
        return ("null", None)


def _number_result(context: FlowContext, value: float | int, integral: bool) -> "FlowObject":
    if integral and isinstance(value, float) and value.is_integer():
        return FlowInteger(context, int(value))
    if isinstance(value, int) and integral:
        return FlowInteger(context, value)
    return FlowFloat(context, float(value))


class FlowNumber(FlowObject):
    """Shared arithmetic for integers, floats and booleans."""

    def __init__(self, context: FlowContext, value: int | float) -> None:
        super().__init__(context)
        self.number = value

    def _representation_(self) -> Any:
        return self.number

    def hash_key(self) -> Tuple[str, Any]:
        return ("number", self.number)

    def is_truthy(self) -> bool:
        return bool(self.number)

    def _both_integral(self, other: FlowObject) -> bool:
        return isinstance(self, FlowInteger) and isinstance(other, FlowInteger)

    def _arithmetic(self, other: "FlowNumber", symbol: str, operation: Callable[[Any, Any], Any]) -> FlowObject:
        try:
            return _number_result(self.context, operation(self.number, other.number), self._both_integral(other))
        except OverflowError:
            raise make_error(
                self.context, VALUE_ERROR, "runtime.number_overflow", text=f"{self.type} {symbol} {other.type}"
            ) from None

    def add(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowNumber):
            return self._arithmetic(other, "+", operator.add)
        return super().add(other)

    def subtract(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowNumber):
            return self._arithmetic(other, "-", operator.sub)
        return super().subtract(other)

    def multiply(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowNumber):
            return self._arithmetic(other, "*", operator.mul)
        if isinstance(self, FlowInteger) and isinstance(other, (FlowString, FlowList)):
            return other.multiply(self)
        return super().multiply(other)

    def _check_divisor(self, other: "FlowNumber") -> None:
        if other.number == 0:
            raise make_error(self.context, ZERO_DIVISION_ERROR, "runtime.division_by_zero")

    def divide(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowNumber):
            self._check_divisor(other)
            return self._arithmetic(other, "/", operator.truediv)
        return super().divide(other)

    def remainder(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowNumber):
            self._check_divisor(other)
            return self._arithmetic(other, "%", operator.mod)
        return super().remainder(other)

    def power(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowNumber):
            if self.number == 0 and other.number < 0:
                raise make_error(self.context, ZERO_DIVISION_ERROR, "runtime.division_by_zero")

            def real_power(base: Any, exponent: Any) -> Any:
                result = base ** exponent
                if isinstance(result, complex):
                    raise make_error(self.context, VALUE_ERROR, "runtime.invalid_number", text=f"{self.render()} ^ {other.render()}")
                return result

            return self._arithmetic(other, "^", real_power)
        return super().power(other)

    def _compare(self, other: FlowObject, op: str) -> Optional[bool]:
        if not isinstance(other, FlowNumber):
            return None
        left, right = self.number, other.number
        return {
            "<": left < right,
            "<=": left <= right,
            ">": left > right,
            ">=": left >= right,
        }[op]

    def less_than(self, other: FlowObject) -> FlowObject:
        result = self._compare(other, "<")
        return FlowBoolean(self.context, result) if result is not None else super().less_than(other)

    def less_than_equal(self, other: FlowObject) -> FlowObject:
        result = self._compare(other, "<=")
        return FlowBoolean(self.context, result) if result is not None else super().less_than_equal(other)

    def greater_than(self, other: FlowObject) -> FlowObject:
        result = self._compare(other, ">")
        return FlowBoolean(self.context, result) if result is not None else super().greater_than(other)

    def greater_than_equal(self, other: FlowObject) -> FlowObject:
        result = self._compare(other, ">=")
        return FlowBoolean(self.context, result) if result is not None else super().greater_than_equal(other)

    def equals(self, other: FlowObject) -> "FlowBoolean":
        return FlowBoolean(self.context, isinstance(other, FlowNumber) and self.number == other.number)

    def unary_plus(self) -> FlowObject:
        return _number_result(self.context, +self.number, isinstance(self, FlowInteger))

    def unary_minus(self) -> FlowObject:
        return _number_result(self.context, -self.number, isinstance(self, FlowInteger))


class FlowInteger(FlowNumber):
    type_name = "integer"

    def __init__(self, context: FlowContext, value: int) -> None:
        super().__init__(context, int(value))

    def render(self) -> str:
        return str(self.number)


class FlowBoolean(FlowInteger):
    type_name = "boolean"

    def __init__(self, context: FlowContext, value: bool) -> None:
        FlowNumber.__init__(self, context, bool(value))

    def render(self) -> str:
        return self.context.keyword("True" if self.number else "False")

    def _representation_(self) -> Any:
        return bool(self.number)


class FlowFloat(FlowNumber):
    type_name = "float"

    def __init__(self, context: FlowContext, value: float) -> None:
        super().__init__(context, float(value))

    def render(self) -> str:
        if math.isinf(self.number) or math.isnan(self.number):
            return str(self.number)
        return repr(self.number).replace(".", self.context.decimal_point_separator)


class FlowString(FlowObject):
    type_name = "string"

    def __init__(self, context: FlowContext, value: str) -> None:
        super().__init__(context)
        self.text = value

    def render(self) -> str:
        return f'"{self.text}"'

    def _representation_(self) -> Any:
        return self.text

    def hash_key(self) -> Tuple[str, Any]:
        return ("string", self.text)

    def is_truthy(self) -> bool:
        return bool(self.text)

    def add(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowString):
            return FlowString(self.context, self.text + other.text)
        return super().add(other)

    def multiply(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowInteger) and not isinstance(other, FlowBoolean):
            return FlowString(self.context, self.text * other.number)
        return super().multiply(other)

    def equals(self, other: FlowObject) -> "FlowBoolean":
        return FlowBoolean(self.context, isinstance(other, FlowString) and self.text == other.text)

    def less_than(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowString):
            return FlowBoolean(self.context, self.text < other.text)
        return super().less_than(other)

    def less_than_equal(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowString):
            return FlowBoolean(self.context, self.text <= other.text)
        return super().less_than_equal(other)

    def greater_than(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowString):
            return FlowBoolean(self.context, self.text > other.text)
        return super().greater_than(other)

    def greater_than_equal(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowString):
            return FlowBoolean(self.context, self.text >= other.text)
        return super().greater_than_equal(other)

    def contains(self, item: FlowObject) -> "FlowBoolean":
        if isinstance(item, FlowString):
            return FlowBoolean(self.context, item.text in self.text)
        return super().contains(item)

    def length(self) -> FlowInteger:
        return FlowInteger(self.context, len(self.text))

    def get_item(self, index: FlowObject) -> FlowObject:
        position = _normalize_index(self.context, index, len(self.text))
        return FlowString(self.context, self.text[position])


def _normalize_index(context: FlowContext, index: FlowObject, size: int) -> int:
    if not isinstance(index, FlowInteger) or isinstance(index, FlowBoolean):
        raise make_error(context, TYPE_ERROR, "runtime.invalid_index", type=index.type_name)
    position = index.number
    if position < 0:
        position += size
    if position < 0 or position >= size:
        raise make_error(context, INDEX_ERROR, "runtime.index_out_of_range", index=index.number)
    return position


def _separator(context: FlowContext) -> str:
    return f"{context.positional_argument_separator} "


class FlowList(FlowObject):
    type_name = "list"

    def __init__(self, context: FlowContext, items: Optional[Iterable[FlowObject]] = None) -> None:
        super().__init__(context)
        self.items: List[FlowObject] = list(items or [])

    def render(self) -> str:
        return "[" + _separator(self.context).join(item.render() for item in self.items) + "]"

    def _representation_(self) -> Any:
        return [item._representation_() for item in self.items]

    def to_json(self) -> Any:
        return [item.to_json() for item in self.items]

    def is_truthy(self) -> bool:
        return bool(self.items)

    def add(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowList):
            return FlowList(self.context, self.items + other.items)
        return super().add(other)

    def multiply(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowInteger) and not isinstance(other, FlowBoolean):
            return FlowList(self.context, self.items * other.number)
        return super().multiply(other)

    def equals(self, other: FlowObject) -> "FlowBoolean":
        if not isinstance(other, FlowList) or len(other.items) != len(self.items):
            return FlowBoolean(self.context, False)
        return FlowBoolean(
            self.context,
            all(left.equals(right).is_truthy() for left, right in zip(self.items, other.items)),
        )

    def contains(self, item: FlowObject) -> "FlowBoolean":
        return FlowBoolean(self.context, any(element.equals(item).is_truthy() for element in self.items))

    def length(self) -> FlowInteger:
        return FlowInteger(self.context, len(self.items))

    def get_item(self, index: FlowObject) -> FlowObject:
        return self.items[_normalize_index(self.context, index, len(self.items))]

    def set_item(self, index: FlowObject, value: FlowObject) -> None:
        self.items[_normalize_index(self.context, index, len(self.items))] = value

    def append(self, value: FlowObject) -> None:
        self.items.append(value)


class FlowDict(FlowObject):
    type_name = "dict"

    def __init__(self, context: FlowContext, entries: Optional[Iterable[Tuple[FlowObject, FlowObject]]] = None) -> None:
        super().__init__(context)
        self.entries: Dict[Tuple[str, Any], Tuple[FlowObject, FlowObject]] = {}
        for key, value in entries or []:
            self.set_item(key, value)

    def render(self) -> str:
        parts = (f"{key.render()}: {value.render()}" for key, value in self.entries.values())
        return "{" + _separator(self.context).join(parts) + "}"

    def _representation_(self) -> Any:
        return {key._representation_(): value._representation_() for key, value in self.entries.values()}

    def to_json(self) -> Any:
        result = {}
        for key, value in self.entries.values():
            raw = key._representation_()
            result[raw if isinstance(raw, str) else key.render()] = value.to_json()
        return result

    def is_truthy(self) -> bool:
        return bool(self.entries)

    def keys(self) -> List[FlowObject]:
        return [key for key, _ in self.entries.values()]

    def values(self) -> List[FlowObject]:
        return [value for _, value in self.entries.values()]

    def add(self, other: FlowObject) -> FlowObject:
        if isinstance(other, FlowDict):
            merged = FlowDict(self.context, self.entries.values())
            merged.entries.update(other.entries)
            return merged
        return super().add(other)

    def equals(self, other: FlowObject) -> "FlowBoolean":
        if not isinstance(other, FlowDict) or other.entries.keys() != self.entries.keys():
            return FlowBoolean(self.context, False)
        return FlowBoolean(
            self.context,
            all(value.equals(other.entries[key][1]).is_truthy() for key, (_, value) in self.entries.items()),
        )

    def contains(self, item: FlowObject) -> "FlowBoolean":
        return FlowBoolean(self.context, item.hash_key() in self.entries)

    def length(self) -> FlowInteger:
        return FlowInteger(self.context, len(self.entries))

    def get_item(self, index: FlowObject) -> FlowObject:
        entry = self.entries.get(index.hash_key())
        if entry is None:
            raise make_error(self.context, KEY_ERROR, "runtime.key_not_found", key=index.render())
        return entry[1]

    def set_item(self, index: FlowObject, value: FlowObject) -> None:
        self.entries[index.hash_key()] = (index, value)

    def delete(self, index: FlowObject) -> None:
        if self.entries.pop(index.hash_key(), None) is None:
            raise make_error(self.context, KEY_ERROR, "runtime.key_not_found", key=index.render())


class FlowError(FlowObject):
    type_name = "error"

    def __init__(self, context: FlowContext, error_type: str, message: str) -> None:
        super().__init__(context)
        self.error_type = error_type
        self.message = message

    def render(self) -> str:
        return f"({self.error_type}): {self.message}"

    def _representation_(self) -> Any:
        return {"type": self.error_type, "message": self.message}

    def equals(self, other: FlowObject) -> "FlowBoolean":
        return FlowBoolean(
            self.context,
            isinstance(other, FlowError)
            and other.error_type == self.error_type
            and other.message == self.message,
        )

    def get_attribute(self, name: str) -> FlowObject:
        if name == "type":
            return FlowString(self.context, self.error_type)
        if name == "message":
            return FlowString(self.context, self.message)
        return super().get_attribute(name)


class FlowStruct(FlowObject):
    """Named record with fixed attributes, e.g. ``HTTPResponse``."""

    type_name = "struct"

    def __init__(self, context: FlowContext, name: str, attributes: Dict[str, FlowObject]) -> None:
        super().__init__(context)
        self.name = name
        self.attributes = dict(attributes)

    def render(self) -> str:
        inner = _separator(self.context).join(f"{key}={value.render()}" for key, value in self.attributes.items())
        return f"{self.name}({inner})"

    def _representation_(self) -> Any:
        return {key: value._representation_() for key, value in self.attributes.items()}

    def to_json(self) -> Any:
        return {key: value.to_json() for key, value in self.attributes.items()}

    def equals(self, other: FlowObject) -> "FlowBoolean":
        if not isinstance(other, FlowStruct) or other.name != self.name or other.attributes.keys() != self.attributes.keys():
            return FlowBoolean(self.context, False)
        return FlowBoolean(
            self.context,
            all(value.equals(other.attributes[key]).is_truthy() for key, value in self.attributes.items()),
        )

    def get_attribute(self, name: str) -> FlowObject:
        if name in self.attributes:
            return self.attributes[name]
        return super().get_attribute(name)

    def set_attribute(self, name: str, value: FlowObject) -> None:
        if name not in self.attributes:
            super().set_attribute(name, value)
        self.attributes[name] = value
