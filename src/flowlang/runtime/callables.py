"""
Functions and modules as runtime values.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence

from .. import ast_nodes
from ..context import FlowContext
from ..errors import FlowException
from .convert import to_flow
from .objects import BUILTIN_ERROR, TYPE_ERROR, ATTRIBUTE_ERROR, FlowObject, make_error
from .scope import Scope

if TYPE_CHECKING:  # pragma: no cover
    from ..registry import MethodDescriptor, ModuleDescriptor

log = logging.getLogger(__name__)

LAMBDA_NAME = "<lambda>"


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    required: bool = True
    keyword: str = ""
    aliases: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return self.aliases[0] if self.aliases else self.name


def bind_arguments(
    context: FlowContext,
    function_name: str,
    parameters: Sequence[ParameterSpec],
    args: List[FlowObject],
    kwargs: Dict[str, FlowObject],
) -> Dict[str, FlowObject]:
    """Match call arguments to parameters; keys of the result are ``keyword`` names."""
    if len(args) > len(parameters):
        raise make_error(
            context,
            TYPE_ERROR,
            "runtime.too_many_arguments",
            expected=len(parameters),
            got=len(args) + len(kwargs),
        )
    bound: Dict[str, FlowObject] = {}
    for spec, value in zip(parameters, args):
        bound[spec.name] = value
    lookup = {}
    for spec in parameters:
        lookup[spec.name] = spec
        for alias in spec.aliases:
            lookup[alias] = spec
    for key, value in kwargs.items():
        spec = lookup.get(key)
        if spec is None:
            raise make_error(context, TYPE_ERROR, "runtime.unknown_parameter", name=key, function=function_name)
        if spec.name in bound:
            raise make_error(context, TYPE_ERROR, "runtime.repeated_parameter", name=key, function=function_name)
        bound[spec.name] = value
    missing = [spec.display_name for spec in parameters if spec.required and spec.name not in bound]
    if missing:
        key = "runtime.missing_parameter" if len(missing) == 1 else "runtime.missing_parameters"
        raise make_error(context, TYPE_ERROR, key, names=", ".join(missing))
    by_name = {spec.name: spec for spec in parameters}
    return {(by_name[name].keyword or name): value for name, value in bound.items()}


class FlowCallable(FlowObject, ABC):
    type_name = "function"

    def __init__(self, context: FlowContext, name: str) -> None:
        super().__init__(context)
        self.name = name

    def parameter_names(self) -> List[str]:
        return []

    def render(self) -> str:
        return f"<function {self.name}({', '.join(self.parameter_names())})>"

    def _representation_(self) -> Any:
        return self.render()

    @abstractmethod
    def renamed(self, name: str) -> "FlowCallable":
        """Copy of this callable under another name."""


class FlowFunction(FlowCallable):
    """User defined function closing over the scope it was defined in."""

    def __init__(
        self,
        context: FlowContext,
        name: Optional[str],
        parameters: List[tuple[str, Optional[FlowObject]]],
        body: ast_nodes.Block,
        closure: Scope,
    ) -> None:
        super().__init__(context, name or LAMBDA_NAME)
        self.parameters = parameters
        self.body = body
        self.closure = closure

    @property
    def is_anonymous(self) -> bool:
        return self.name == LAMBDA_NAME

    def parameter_names(self) -> List[str]:
        return [name for name, _ in self.parameters]

    def specs(self) -> List[ParameterSpec]:
        return [ParameterSpec(name=name, required=default is None) for name, default in self.parameters]

    def renamed(self, name: str) -> "FlowFunction":
        return FlowFunction(self.context, name, self.parameters, self.body, self.closure)

    def call(self, interpreter: Any, args: List[FlowObject], kwargs: Dict[str, FlowObject]) -> FlowObject:
        bound = bind_arguments(self.context, self.name, self.specs(), args, kwargs)
        for name, default in self.parameters:
            if name not in bound and default is not None:
                bound[name] = default
        return interpreter.run_function(self, bound)


class FlowBuiltinFunction(FlowCallable):
    """A library method bound to its module instance."""

    def __init__(
        self,
        context: FlowContext,
        module_name: str,
        descriptor: "MethodDescriptor",
        callback: Callable[..., Any],
        name: Optional[str] = None,
    ) -> None:
        super().__init__(context, name or f"{module_name}.{descriptor.name}")
        self.module_name = module_name
        self.descriptor = descriptor
        self.callback = callback

    def parameter_names(self) -> List[str]:
        return [parameter.name for parameter in self.descriptor.parameters]

    def specs(self) -> List[ParameterSpec]:
        specs = []
        for parameter in self.descriptor.parameters:
            aliases = (parameter.name,) if parameter.name != parameter.canonical_name else ()
            specs.append(
                ParameterSpec(
                    name=parameter.canonical_name,
                    required=parameter.required,
                    keyword=parameter.keyword,
                    aliases=aliases,
                )
            )
        return specs

    def renamed(self, name: str) -> "FlowBuiltinFunction":
        return FlowBuiltinFunction(self.context, self.module_name, self.descriptor, self.callback, name)

    def call(self, interpreter: Any, args: List[FlowObject], kwargs: Dict[str, FlowObject]) -> FlowObject:
        bound = bind_arguments(self.context, self.name, self.specs(), args, kwargs)
        try:
            result = self.callback(**bound)
        except (FlowException, RecursionError):
            raise
        except Exception as exc:
            log.debug("Builtin %s failed", self.name, exc_info=True)
            raise make_error(
                self.context,
                BUILTIN_ERROR,
                "runtime.builtin_failure",
                module=self.module_name,
                method=self.descriptor.name,
                reason=str(exc) or type(exc).__name__,
            ) from exc
        return to_flow(result, self.context)


class FlowModule(FlowObject):
    type_name = "module"

    def __init__(self, context: FlowContext, descriptor: "ModuleDescriptor", instance: Any) -> None:
        super().__init__(context)
        self.descriptor = descriptor
        self.instance = instance

    @property
    def name(self) -> str:
        return self.descriptor.name

    def render(self) -> str:
        return f"<module {self.descriptor.name}>"

    def get_attribute(self, name: str) -> FlowObject:
        method = self.descriptor.find_method(name)
        if method is None:
            raise make_error(self.context, ATTRIBUTE_ERROR, "runtime.no_method", module=self.descriptor.name, name=name)
        callback = getattr(self.instance, method.canonical_name)
        return FlowBuiltinFunction(self.context, self.descriptor.name, method, callback)
