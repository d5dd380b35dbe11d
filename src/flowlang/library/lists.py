from __future__ import annotations

from ..runtime.callables import FlowCallable
from ..runtime.objects import VALUE_ERROR, FlowInteger, FlowList, FlowObject, FlowString
from .base import LibraryModule, method


class List(LibraryModule):
    module_name = "List"
    doc_prefix = "list"

    @method(element="any")
    def is_list(self, element):
        return isinstance(element, FlowList)

    @method(start="integer", end="integer", steps="integer")
    def create_range(self, start, end, steps=None):
        for name, value in (("start", start), ("end", end)):
            self.expect(value, FlowInteger, name, "integer")
        step = 1
        if steps is not None:
            self.expect(steps, FlowInteger, "steps", "integer")
            step = steps.number
        if step == 0:
            raise self.error(VALUE_ERROR, "runtime.range_step", parameter=self.parameter_label("steps"))
        return FlowList(self.context, (FlowInteger(self.context, i) for i in range(start.number, end.number, step)))

    @method(list="list")
    def length(self, list_):
        self.expect(list_, FlowList, "list", "list")
        return list_.length()

    @method(list="list", value="any")
    def append(self, list_, value):
        self.expect(list_, FlowList, "list", "list")
        list_.append(value)
        return list_

    @method(list="list", function="function")
    def filter(self, list_, function):
        self._check(list_, function)
        return FlowList(self.context, [item for item in list_.items if self.call(function, item).is_truthy()])

    @method(list="list", function="function")
    def for_each(self, list_, function):
        self._check(list_, function)
        for item in list(list_.items):
            self.call(function, item)
        return list_

    @method(list="list", function="function")
    def map(self, list_, function):
        self._check(list_, function)
        return FlowList(self.context, [self.call(function, item) for item in list_.items])

    @method(list="list", separator="string")
    def join(self, list_, separator=None):
        self.expect(list_, FlowList, "list", "list")
        if separator is not None:
            self.expect(separator, FlowString, "separator", "string")
        glue = separator.text if separator is not None else ""
        return glue.join(self._text(item) for item in list_.items)

    def _check(self, list_: FlowObject, function: FlowObject) -> None:
        self.expect(list_, FlowList, "list", "list")
        self.expect(function, FlowCallable, "function", "function")

    @staticmethod
    def _text(item: FlowObject) -> str:
        if isinstance(item, FlowString):
            return item.text
        return item.render()


__all__ = ["List"]
