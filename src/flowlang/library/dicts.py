from __future__ import annotations

from ..runtime.objects import FlowDict, FlowList
from .base import LibraryModule, method


class Dict(LibraryModule):
    module_name = "Dict"
    doc_prefix = "dict"

    @method(element="any")
    def is_dict(self, element):
        return isinstance(element, FlowDict)

    @method(dict="dict")
    def length(self, dict_):
        self.expect(dict_, FlowDict, "dict", "dict")
        return dict_.length()

    @method(dict="dict")
    def keys(self, dict_):
        self.expect(dict_, FlowDict, "dict", "dict")
        return FlowList(self.context, dict_.keys())

    @method(dict="dict")
    def values(self, dict_):
        self.expect(dict_, FlowDict, "dict", "dict")
        return FlowList(self.context, dict_.values())

    @method(dict="dict")
    def items(self, dict_):
        self.expect(dict_, FlowDict, "dict", "dict")
        return FlowList(
            self.context,
            (FlowList(self.context, [key, value]) for key, value in dict_.entries.values()),
        )

    @method(dict="dict", key="any")
    def delete(self, dict_, key):
        self.expect(dict_, FlowDict, "dict", "dict")
        dict_.delete(key)
        return dict_
