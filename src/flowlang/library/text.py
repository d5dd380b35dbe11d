from __future__ import annotations

import re

from ..runtime.objects import KEY_ERROR, FlowDict, FlowInteger, FlowList, FlowObject, FlowString
from .base import LibraryModule, method

_FORMAT_FIELD = re.compile(r"\{([^{}]*)\}")


class String(LibraryModule):
    module_name = "String"
    doc_prefix = "string"

    @method(element="any")
    def is_string(self, element):
        return isinstance(element, FlowString)

    @method(element="any")
    def to_string(self, element):
        if isinstance(element, FlowString):
            return element
        return element.render()

    @method(string="string")
    def length(self, string):
        self.expect(string, FlowString, "string", "string")
        return string.length()

    @method(string="string", first_character="integer", number_of_characters="integer")
    def extract(self, string, first_character, number_of_characters=None):
        self.expect(string, FlowString, "string", "string")
        self.expect(first_character, FlowInteger, "first_character", "integer")
        start = first_character.number
        if number_of_characters is None:
            return string.text[start:]
        self.expect(number_of_characters, FlowInteger, "number_of_characters", "integer")
        return string.text[start : start + number_of_characters.number]

    @method(string="string", start="integer", end="integer")
    def slice(self, string, start=None, end=None):
        self.expect(string, FlowString, "string", "string")
        for name, value in (("start", start), ("end", end)):
            if value is not None:
                self.expect(value, FlowInteger, name, "integer")
        return string.text[self.raw(start) : self.raw(end)]

    @method(string="string", variables="list")
    def format(self, string, variables):
        self.expect(string, FlowString, "string", "string")
        self.expect(variables, (FlowList, FlowDict), "variables", "list_or_dict")
        if isinstance(variables, FlowList):
            values = iter(variables.items)

            def positional(match: re.Match) -> str:
                if match.group(1).strip():
                    return match.group(0)
                item = next(values, None)
                return match.group(0) if item is None else self._plain(item)

            return _FORMAT_FIELD.sub(positional, string.text)

        named = {}
        for key, value in variables.entries.values():
            named[self._plain(key)] = value

        def by_key(match: re.Match) -> str:
            key = match.group(1).strip()
            if not key:
                return match.group(0)
            if key not in named:
                raise self.error(KEY_ERROR, "runtime.key_not_found", key=key)
            return self._plain(named[key])

        return _FORMAT_FIELD.sub(by_key, string.text)

    @method(string="string", separator="string")
    def split(self, string, separator=None):
        self.expect(string, FlowString, "string", "string")
        if separator is None:
            return string.text.split()
        self.expect(separator, FlowString, "separator", "string")
        if not separator.text:
            return list(string.text)
        return string.text.split(separator.text)

    @method(string="string")
    def upper(self, string):
        self.expect(string, FlowString, "string", "string")
        return string.text.upper()

    @method(string="string")
    def lower(self, string):
        self.expect(string, FlowString, "string", "string")
        return string.text.lower()

    @staticmethod
    def _plain(value: FlowObject) -> str:
        return value.text if isinstance(value, FlowString) else value.render()
