"""
Registry of builtin modules and their descriptors.

Descriptors are built once, when a service is initialized, by combining the
Python signature of every library method with the module's localized
documentation. They are frozen and shared by every evaluation and by the
autocomplete layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .context import FlowContext
from .strings import strings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    canonical_name: str
    type: str = "any"
    required: bool = True
    description: str = ""
    keyword: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "required": self.required,
            "description": self.description,
        }


@dataclass(frozen=True)
class MethodDescriptor:
    name: str
    canonical_name: str
    description: str = ""
    parameters: tuple[ParameterDescriptor, ...] = ()
    examples: tuple[str, ...] = ()

    def parameter(self, index: int) -> Optional[ParameterDescriptor]:
        if 0 <= index < len(self.parameters):
            return self.parameters[index]
        return None

    def find_parameter(self, name: str) -> Optional[ParameterDescriptor]:
        for parameter in self.parameters:
            if name in (parameter.name, parameter.canonical_name):
                return parameter
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [parameter.to_dict() for parameter in self.parameters],
            "examples": list(self.examples),
        }


@dataclass(frozen=True)
class ModuleDescriptor:
    name: str
    canonical_name: str
    description: str = ""
    methods: Mapping[str, MethodDescriptor] = field(default_factory=lambda: MappingProxyType({}))
    documented: bool = True
    module_class: Optional[type] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.methods, MappingProxyType):
            object.__setattr__(self, "methods", MappingProxyType(dict(self.methods)))

    def find_method(self, name: str) -> Optional[MethodDescriptor]:
        method = self.methods.get(name)
        if method is not None:
            return method
        for candidate in self.methods.values():
            if candidate.canonical_name == name:
                return candidate
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "methods": {name: method.to_dict() for name, method in self.methods.items()},
        }


class RegistryFrozenError(RuntimeError):
    """Raised when registering a module after initialization finished."""


class ModuleRegistry:
    def __init__(self, language: str = "en-US") -> None:
        self.language = language
        self._modules: Dict[str, ModuleDescriptor] = {}
        self._frozen = False

    def register(self, descriptor: ModuleDescriptor) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register module '{descriptor.name}' after initialization")
        if descriptor.name in self._modules:
            raise ValueError(f"Module '{descriptor.name}' is already registered")
        self._modules[descriptor.name] = descriptor

    def freeze(self) -> "ModuleRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, module_name: str) -> Optional[ModuleDescriptor]:
        return self._modules.get(module_name)

    def resolve_method(self, module_name: str, method_name: str) -> Optional[MethodDescriptor]:
        descriptor = self.resolve(module_name)
        if descriptor is None:
            return None
        return descriptor.methods.get(method_name)

    def modules(self) -> List[ModuleDescriptor]:
        return list(self._modules.values())

    def documented(self) -> List[ModuleDescriptor]:
        return [descriptor for descriptor in self._modules.values() if descriptor.documented]

    def list_names(self) -> List[str]:
        return list(self._modules.keys())


def library_description(description: str, examples: Sequence[str], language: str) -> str:
    """Markdown shown in the editor's description panel."""
    text = f"# {strings('documentation.header', language)}\n\n{description}"
    if examples:
        joined = "\n\n".join(examples)
        text += f"\n\n\n# {strings('documentation.examples_header', language)}\n\n{joined}"
    return text


def build_registry(context: FlowContext) -> ModuleRegistry:
    """Harvest documentation for every runtime module and freeze the result."""
    registry = ModuleRegistry(context.language)
    for module_class in context.modules_to_runtime:
        descriptor = module_class.describe(context.language)
        registry.register(descriptor)
        if not descriptor.documented:
            log.debug("Module %s has no %s documentation", descriptor.name, context.language)
    return registry.freeze()
