"""
Host-side error types for the Flow toolchain.

Lexing and parsing problems are ordinary Python exceptions. Errors that
belong to the language itself (the ones user code can catch with
``try ... otherwise``) travel as :class:`FlowException`, which wraps a
``FlowError`` runtime object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .runtime.objects import FlowError, FlowObject


@dataclass
class FlowLangError(Exception):
    """Base error with optional location metadata."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    offset: Optional[int] = None

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" (line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"
            location += ")"
        return f"{self.message}{location}"


@dataclass
class LexError(FlowLangError):
    """Unrecognized character in the source text."""

    unexpected_char: str = ""


@dataclass
class ParseError(FlowLangError):
    """Structurally invalid token sequence."""

    expected: str = ""
    found: str = ""


class EvaluationError(FlowLangError):
    """Internal evaluator fault (never raised for user mistakes)."""


class FlowException(Exception):
    """Carries a language level error object through Python frames."""

    def __init__(self, error: "FlowError") -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def error_type(self) -> str:
        return self.error.error_type


class ReturnSignal(Exception):
    """Unwinds a function body when ``return`` is evaluated."""

    def __init__(self, value: "FlowObject") -> None:
        super().__init__("return")
        self.value = value
