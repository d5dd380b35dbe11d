"""
AST node definitions for the Flow language.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass
class Span:
    """Location span for diagnostics."""

    line: int
    column: int
    offset: int = 0


@dataclass
class Literal:
    """kind is one of integer, float, string, boolean, null or datetime."""

    kind: str
    value: Any
    span: Optional[Span] = None


@dataclass
class Identifier:
    name: str
    span: Optional[Span] = None


@dataclass
class VariableInterpolation:
    """``{{ label }}``; substituted by the embedding application before evaluation."""

    raw_name: str
    span: Optional[Span] = None


@dataclass
class ListLiteral:
    items: List["Expr"] = field(default_factory=list)
    span: Optional[Span] = None


@dataclass
class DictLiteral:
    entries: List[tuple["Expr", "Expr"]] = field(default_factory=list)
    span: Optional[Span] = None


@dataclass
class BinaryOp:
    left: "Expr"
    op: str
    right: "Expr"
    span: Optional[Span] = None


@dataclass
class BooleanOp:
    """Short-circuit ``and`` / ``or``."""

    left: "Expr"
    op: str
    right: "Expr"
    span: Optional[Span] = None


@dataclass
class UnaryOp:
    op: str
    operand: "Expr"
    span: Optional[Span] = None


@dataclass
class Attribute:
    value: "Expr"
    name: str
    span: Optional[Span] = None


@dataclass
class Subscript:
    value: "Expr"
    index: "Expr"
    span: Optional[Span] = None


@dataclass
class Call:
    callee: "Expr"
    args: List["Expr"] = field(default_factory=list)
    kwargs: dict[str, "Expr"] = field(default_factory=dict)
    span: Optional[Span] = None

    @property
    def module_name(self) -> Optional[str]:
        if isinstance(self.callee, Attribute) and isinstance(self.callee.value, Identifier):
            return self.callee.value.name
        return None

    @property
    def method_name(self) -> Optional[str]:
        if isinstance(self.callee, Attribute):
            return self.callee.name
        if isinstance(self.callee, Identifier):
            return self.callee.name
        return None


@dataclass
class Assign:
    target: "Expr"
    value: "Expr"
    span: Optional[Span] = None


@dataclass
class Block:
    statements: List["Expr"] = field(default_factory=list)
    span: Optional[Span] = None


@dataclass
class If:
    condition: "Expr"
    then_branch: Block
    else_branch: Optional[Union[Block, "If"]] = None
    span: Optional[Span] = None


@dataclass
class Parameter:
    name: str
    default: Optional["Expr"] = None
    span: Optional[Span] = None


@dataclass
class FunctionDef:
    name: Optional[str]
    params: List[Parameter] = field(default_factory=list)
    body: Block = field(default_factory=Block)
    is_lambda: bool = False
    span: Optional[Span] = None


@dataclass
class Return:
    value: Optional["Expr"] = None
    span: Optional[Span] = None


@dataclass
class Raise:
    message: "Expr"
    error_type: Optional["Expr"] = None
    span: Optional[Span] = None


@dataclass
class TryCatch:
    body: Block
    error_name: Optional[str] = None
    handler: Optional[Block] = None
    span: Optional[Span] = None


@dataclass
class Missing:
    """Placeholder produced by the recovering parser where input ran out."""

    expected: str
    span: Optional[Span] = None


@dataclass
class Program:
    body: Block = field(default_factory=Block)


Expr = Union[
    Literal,
    Identifier,
    VariableInterpolation,
    ListLiteral,
    DictLiteral,
    BinaryOp,
    BooleanOp,
    UnaryOp,
    Attribute,
    Subscript,
    Call,
    Assign,
    If,
    FunctionDef,
    Return,
    Raise,
    TryCatch,
    Missing,
]
