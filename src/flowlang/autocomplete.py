"""
Autocomplete projection over the module registry.

Option templates are built once per :class:`Autocompleter`; every call to
:meth:`Autocompleter.options` hands out fresh copies, because editors strip
the already typed prefix from ``autocomplete_text`` in place.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional

from .context import FlowContext
from .parser import CursorContext, parse_partial
from .registry import MethodDescriptor, ModuleDescriptor, ModuleRegistry, ParameterDescriptor, library_description
from .strings import strings

INDENT = "    "


@dataclass
class AutocompleteOption:
    label: str
    autocomplete_text: str
    description: str = ""
    type: str = "language"
    raw_name: str = ""
    examples: List[str] = field(default_factory=list)
    parameters: List[Dict[str, Any]] = field(default_factory=list)
    cursor_offset: int = 0
    is_snippet: bool = False
    to_substitute: Optional[Dict[str, int]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "label": self.label,
            "autocompleteText": self.autocomplete_text,
            "description": self.description,
            "type": self.type,
            "rawName": self.raw_name,
            "examples": list(self.examples),
            "parameters": [dict(parameter) for parameter in self.parameters],
            "cursorOffset": self.cursor_offset,
            "isSnippet": self.is_snippet,
        }
        if self.to_substitute is not None:
            data["toSubstitute"] = dict(self.to_substitute)
        return data


@dataclass
class CallDescription:
    """What the description panel shows while the cursor is inside a call."""

    module: ModuleDescriptor
    method: MethodDescriptor
    parameter_index: int
    parameter: Optional[ParameterDescriptor] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "module": self.module.name,
            "method": self.method.to_dict(),
            "parameterIndex": self.parameter_index,
            "parameter": self.parameter.to_dict() if self.parameter else None,
        }


@dataclass
class Completion:
    cursor: CursorContext
    status: str
    options: List[AutocompleteOption]
    call: Optional[CallDescription] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cursor": self.cursor.to_dict(),
            "status": self.status,
            "options": [option.to_dict() for option in self.options],
            "call": self.call.to_dict() if self.call else None,
        }


CustomOptions = Callable[[str, str, int], List[AutocompleteOption]]


def _snippet(label: str, text: str, description: str, cursor_offset: int = 0, raw_name: str = "") -> AutocompleteOption:
    return AutocompleteOption(
        label=label,
        autocomplete_text=text,
        description=description,
        type="language",
        raw_name=raw_name or label,
        cursor_offset=cursor_offset,
        is_snippet=True,
    )


def build_snippets(context: FlowContext) -> List[AutocompleteOption]:
    language = context.language
    kw = context.keyword

    def text(key: str) -> str:
        return strings(key, language)

    block_end = f"\n{kw('end')}"
    if_text = f"{kw('if')} {text('snippet.condition')} {kw('do')}\n{INDENT}{text('snippet.when_true')}{block_end}"
    if_else_text = (
        f"{kw('if')} {text('snippet.condition')} {kw('do')}\n{INDENT}{text('snippet.when_true')}\n"
        f"{kw('else')} {kw('do')}\n{INDENT}{text('snippet.when_false')}{block_end}"
    )
    signature = f"{kw('function')} {text('snippet.name')}({text('snippet.parameters')})"
    function_text = f"{signature} {kw('do')}\n{INDENT}{text('snippet.body')}{block_end}"
    lambda_text = f"{signature}: {text('snippet.body')}"
    try_text = (
        f"{kw('try')} {kw('do')}\n{INDENT}{text('snippet.body')}\n"
        f"{kw('otherwise')} ({text('snippet.error')}) {kw('do')}\n{INDENT}{block_end}"
    )
    return [
        _snippet(text("snippet.if.label"), if_text, text("snippet.if.description"), len(block_end), "if"),
        _snippet(text("snippet.if_else.label"), if_else_text, text("snippet.if_else.description"), len(block_end), "if_else"),
        _snippet(text("snippet.function.label"), function_text, text("snippet.function.description"), len(block_end), "function"),
        _snippet(text("snippet.lambda.label"), lambda_text, text("snippet.lambda.description"), 0, "lambda"),
        _snippet(text("snippet.try.label"), try_text, text("snippet.try.description"), len(block_end), "try"),
        _snippet(kw("return"), f"{kw('return')} ", text("snippet.return.description"), 0, "return"),
        _snippet(kw("raise"), f"{kw('raise')} ", text("snippet.raise.description"), 0, "raise"),
        _snippet(kw("True"), kw("True"), text("snippet.true.description"), 0, "True"),
        _snippet(kw("False"), kw("False"), text("snippet.false.description"), 0, "False"),
        _snippet(kw("None"), kw("None"), text("snippet.null.description"), 0, "None"),
    ]


class Autocompleter:
    def __init__(
        self,
        registry: ModuleRegistry,
        context: FlowContext,
        custom_options: Optional[CustomOptions] = None,
    ) -> None:
        self.registry = registry
        self.context = context
        self.custom_options = custom_options
        self._top_level: List[AutocompleteOption] = []
        self._methods: Dict[str, List[AutocompleteOption]] = {}
        for module in registry.documented():
            self._top_level.append(self._module_option(module))
            self._methods[module.name] = [self._method_option(method) for method in module.methods.values()]
        self._top_level.extend(build_snippets(context))

    def _module_option(self, module: ModuleDescriptor) -> AutocompleteOption:
        return AutocompleteOption(
            label=module.name,
            autocomplete_text=module.name,
            description=library_description(module.description, (), self.context.language),
            type="module",
            raw_name=module.canonical_name,
        )

    def _method_option(self, method: MethodDescriptor) -> AutocompleteOption:
        return AutocompleteOption(
            label=method.name,
            autocomplete_text=f"{method.name}()",
            description=library_description(method.description, method.examples, self.context.language),
            type="function",
            raw_name=method.canonical_name,
            examples=list(method.examples),
            parameters=[parameter.to_dict() for parameter in method.parameters],
            cursor_offset=1,
        )

    def options(self, name: str = "", attribute_name: str = "", element_at: int = 0) -> List[AutocompleteOption]:
        """Fresh options matching the word at the cursor."""
        if name in (".", self.context.positional_argument_separator):
            name = ""
        if attribute_name:
            templates = self._methods.get(attribute_name, [])
            custom: List[AutocompleteOption] = []
        else:
            templates = self._top_level
            custom = self.custom_options(name, attribute_name, element_at) if self.custom_options else []
        result = [self._fresh(option, name, element_at) for option in templates if option.label.startswith(name)]
        result.extend(custom)
        return result

    @staticmethod
    def _fresh(template: AutocompleteOption, name: str, element_at: int) -> AutocompleteOption:
        option = replace(
            template,
            examples=list(template.examples),
            parameters=copy.deepcopy(template.parameters),
        )
        if not name:
            return option
        if option.autocomplete_text.startswith(name):
            option.autocomplete_text = option.autocomplete_text[len(name):]
        else:
            option.to_substitute = {"from": element_at, "to": element_at + len(name)}
        return option

    def describe(self, cursor: CursorContext) -> Optional[CallDescription]:
        call = cursor.call
        if call is None or not call.attribute_name:
            return None
        module = self.registry.resolve(call.attribute_name)
        if module is None:
            return None
        method = module.find_method(call.method_name)
        if method is None:
            return None
        parameter = None
        if call.parameter_name:
            parameter = method.find_parameter(call.parameter_name)
        if parameter is None:
            parameter = method.parameter(call.parameter_index)
        return CallDescription(module=module, method=method, parameter_index=call.parameter_index, parameter=parameter)

    def complete(self, source: str, cursor: Optional[int] = None) -> Completion:
        partial = parse_partial(source, self.context, cursor)
        context = partial.cursor
        return Completion(
            cursor=context,
            status=partial.status,
            options=self.options(context.name, context.attribute_name, context.element_at),
            call=self.describe(context),
        )
