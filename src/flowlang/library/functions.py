from __future__ import annotations

from ..runtime.callables import FlowCallable
from ..runtime.objects import FlowString
from .base import LibraryModule, method


class Function(LibraryModule):
    module_name = "Function"
    doc_prefix = "function"

    @method(element="any")
    def is_function(self, element):
        return isinstance(element, FlowCallable)

    @method(function="function")
    def name(self, function):
        self.expect(function, FlowCallable, "function", "function")
        return function.name

    @method(function="function")
    def parameters(self, function):
        self.expect(function, FlowCallable, "function", "function")
        return function.parameter_names()

    @method(function="function", name="string")
    def rename(self, function, name):
        self.expect(function, FlowCallable, "function", "function")
        self.expect(name, FlowString, "name", "string")
        return function.renamed(name.text)
