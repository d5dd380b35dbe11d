"""
Base class for builtin modules.

A builtin module is a class whose ``@method`` decorated functions become
callable from Flow code as ``Module.method(...)``. Parameter names, defaults
and required flags are read from the Python signature; a trailing
underscore (``list_``, ``type_``) is dropped from the name Flow code sees.
Descriptions, examples and translated names come from the string catalog,
under the module's ``doc_prefix``.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional, Tuple, Type

from ..errors import FlowException
from ..registry import MethodDescriptor, ModuleDescriptor, ParameterDescriptor
from ..runtime.objects import TYPE_ERROR, FlowObject, make_error
from ..strings import DEFAULT_LANGUAGE, has_string, strings

if TYPE_CHECKING:  # pragma: no cover
    from ..runtime.interpreter import Interpreter


def method(**types: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Expose a module function to Flow code; keyword arguments name parameter types."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func.__flow_method__ = True  # type: ignore[attr-defined]
        func.__flow_types__ = types  # type: ignore[attr-defined]
        return func

    return decorator


def _text(key: str, language: str, default: str = "") -> str:
    if has_string(key, language) or has_string(key, DEFAULT_LANGUAGE):
        return strings(key, language)
    return default


class LibraryModule:
    module_name = ""
    doc_prefix = ""

    def __init__(self, interpreter: "Interpreter") -> None:
        self.interpreter = interpreter
        self.context = interpreter.context

    # Introspection
    @classmethod
    def flow_methods(cls) -> Iterator[Tuple[str, Callable[..., Any]]]:
        seen: set[str] = set()
        for klass in reversed(cls.__mro__):
            for name, func in vars(klass).items():
                if getattr(func, "__flow_method__", False) and name not in seen:
                    seen.add(name)
                    yield name, func

    @staticmethod
    def signature(func: Callable[..., Any]) -> List[Tuple[str, str, bool, str]]:
        """``(keyword, flow_name, required, type)`` for every parameter after ``self``."""
        types: Dict[str, str] = getattr(func, "__flow_types__", {})
        params = []
        for parameter in list(inspect.signature(func).parameters.values())[1:]:
            flow_name = parameter.name.rstrip("_")
            required = parameter.default is inspect.Parameter.empty
            params.append((parameter.name, flow_name, required, types.get(flow_name, "any")))
        return params

    @classmethod
    def documentation(cls, language: str) -> Optional[Dict[str, Any]]:
        """Localized documentation, or ``None`` when the module has none for ``language``."""
        prefix = cls.doc_prefix
        if not prefix or not has_string(f"{prefix}.description", language):
            return None
        methods: Dict[str, Any] = {}
        for name, func in cls.flow_methods():
            parameters = {}
            for _, flow_name, required, type_name in cls.signature(func):
                parameters[flow_name] = {
                    "name": _text(f"{prefix}.param.{flow_name}.name", language, flow_name),
                    "description": _text(f"{prefix}.param.{flow_name}.description", language),
                    "type": type_name,
                    "required": required,
                }
            example = _text(f"{prefix}.{name}.example", language)
            methods[name] = {
                "name": _text(f"{prefix}.{name}.name", language, name),
                "description": _text(f"{prefix}.{name}.description", language),
                "examples": [example] if example else [],
                "parameters": parameters,
            }
        return {
            "name": _text(f"{prefix}.name", language, cls.module_name),
            "description": strings(f"{prefix}.description", language),
            "methods": methods,
        }

    @classmethod
    def describe(cls, language: str) -> ModuleDescriptor:
        docs = cls.documentation(language)
        method_docs: Dict[str, Any] = (docs or {}).get("methods", {})
        methods: Dict[str, MethodDescriptor] = {}
        for name, func in cls.flow_methods():
            doc = method_docs.get(name, {})
            param_docs = doc.get("parameters", {})
            parameters = []
            for keyword, flow_name, required, type_name in cls.signature(func):
                param_doc = param_docs.get(flow_name, {})
                parameters.append(
                    ParameterDescriptor(
                        name=param_doc.get("name", flow_name),
                        canonical_name=flow_name,
                        type=param_doc.get("type", type_name),
                        required=param_doc.get("required", required),
                        description=param_doc.get("description", ""),
                        keyword=keyword,
                    )
                )
            descriptor = MethodDescriptor(
                name=doc.get("name", name),
                canonical_name=name,
                description=doc.get("description", ""),
                parameters=tuple(parameters),
                examples=tuple(doc.get("examples", ())),
            )
            methods[descriptor.name] = descriptor
        return ModuleDescriptor(
            name=(docs or {}).get("name", cls.module_name),
            canonical_name=cls.module_name,
            description=(docs or {}).get("description", ""),
            methods=methods,
            documented=docs is not None,
            module_class=cls,
        )

    # Helpers for implementations
    def error(self, error_type: str, key: str, /, **values: Any) -> FlowException:
        return make_error(self.context, error_type, key, **values)

    def parameter_label(self, flow_name: str) -> str:
        return _text(f"{self.doc_prefix}.param.{flow_name}.name", self.context.language, flow_name)

    def expect(self, value: Any, kinds: Type | Tuple[Type, ...], parameter: str, expected: str) -> None:
        if not isinstance(value, kinds):
            raise self.error(
                TYPE_ERROR,
                "runtime.invalid_argument",
                parameter=self.parameter_label(parameter),
                expected=strings(f"type.{expected}", self.context.language),
            )

    def call(self, function: FlowObject, *args: FlowObject) -> FlowObject:
        return self.interpreter.call(function, list(args))

    @staticmethod
    def raw(value: Any, default: Any = None) -> Any:
        """Host value of an optional argument."""
        if value is None:
            return default
        if isinstance(value, FlowObject):
            return value._representation_()
        return value
