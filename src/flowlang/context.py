"""
Per-language settings shared by the lexer, parser, interpreter and the
autocomplete layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple, Type

from .config import DEFAULT_MAX_CALL_STACK
from .strings import DEFAULT_LANGUAGE, normalize_language

log = logging.getLogger(__name__)

# Keyword concepts, named after their en-US spelling.
KEYWORD_CONCEPTS = (
    "in",
    "and",
    "or",
    "not",
    "is",
    "is not",
    "do",
    "end",
    "None",
    "True",
    "False",
    "if",
    "else",
    "function",
    "return",
    "raise",
    "try",
    "otherwise",
)

_LANGUAGE_SETTINGS = {
    "en-US": {
        "keywords": {concept: concept for concept in KEYWORD_CONCEPTS},
        "decimal_point_separator": ".",
        "positional_argument_separator": ",",
        "date_format": "YYYY-MM-DD",
    },
    "pt-BR": {
        "keywords": {
            "in": "em",
            "and": "e",
            "or": "ou",
            "not": "não",
            "is": "é",
            "is not": "não é",
            "do": "faça",
            "end": "fim",
            "None": "Vazio",
            "True": "Verdadeiro",
            "False": "Falso",
            "if": "se",
            "else": "senão",
            "function": "função",
            "return": "retornar",
            "raise": "lançar",
            "try": "tentar",
            "otherwise": "caso contrário",
        },
        "decimal_point_separator": ",",
        "positional_argument_separator": ";",
        "date_format": "DD/MM/YYYY",
    },
}


def _default_modules() -> Tuple[type, ...]:
    from .library import BUILTIN_MODULES

    return tuple(BUILTIN_MODULES)


@dataclass(frozen=True)
class FlowContext:
    language: str
    keywords: Mapping[str, str]
    decimal_point_separator: str = "."
    positional_argument_separator: str = ","
    timezone: str = "UTC"
    date_character: str = "D"
    date_format: str = "YYYY-MM-DD"
    hour_format: str = "hh:mm:ss.SSS"
    max_call_stack_size: int = DEFAULT_MAX_CALL_STACK
    modules_to_runtime: Tuple[Type, ...] = field(default_factory=tuple)

    @classmethod
    def for_language(
        cls,
        language: Optional[str] = None,
        *,
        max_call_stack_size: int = DEFAULT_MAX_CALL_STACK,
        modules: Optional[Sequence[type]] = None,
    ) -> "FlowContext":
        name = normalize_language(language)
        if name not in _LANGUAGE_SETTINGS:
            log.warning("Language %r is not supported, falling back to %s", language, DEFAULT_LANGUAGE)
            name = DEFAULT_LANGUAGE
        settings = _LANGUAGE_SETTINGS[name]
        return cls(
            language=name,
            keywords=MappingProxyType(dict(settings["keywords"])),
            decimal_point_separator=settings["decimal_point_separator"],
            positional_argument_separator=settings["positional_argument_separator"],
            date_format=settings["date_format"],
            max_call_stack_size=max_call_stack_size,
            modules_to_runtime=tuple(modules) if modules is not None else _default_modules(),
        )

    def keyword(self, concept: str) -> str:
        return self.keywords[concept]

    def with_modules(self, modules: Sequence[type]) -> "FlowContext":
        return replace(self, modules_to_runtime=tuple(modules))

    @property
    def keyword_lookup(self) -> Mapping[str, str]:
        """Localized spelling -> concept."""
        return {word: concept for concept, word in self.keywords.items()}
