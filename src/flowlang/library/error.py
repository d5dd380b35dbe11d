from __future__ import annotations

from ..runtime.objects import GENERIC_ERROR, FlowError, FlowString
from .base import LibraryModule, method


class Error(LibraryModule):
    module_name = "Error"
    doc_prefix = "error"

    @method(element="any")
    def is_error(self, element):
        return isinstance(element, FlowError)

    @method(type="string", message="string")
    def new(self, type_, message=None):
        self.expect(type_, FlowString, "type", "string")
        text = ""
        if message is not None:
            self.expect(message, FlowString, "message", "string")
            text = message.text
        return FlowError(self.context, type_.text or GENERIC_ERROR, text)

    @method(error="error")
    def type(self, error):
        self.expect(error, FlowError, "error", "error")
        return error.error_type

    @method(error="error")
    def message(self, error):
        self.expect(error, FlowError, "error", "error")
        return error.message
