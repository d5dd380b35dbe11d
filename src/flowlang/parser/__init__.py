"""
Recursive descent parser for the Flow language.

Public API: :func:`parse_source` (strict, raises :class:`ParseError`) and
:func:`parse_partial` (never raises, used while the user is typing).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .. import ast_nodes
from ..context import FlowContext
from ..errors import LexError, ParseError
from ..lexer import Lexer, Token
from . import expressions, statements
from .cursor import CallContext, CursorContext, classify_cursor

__all__ = [
    "CallContext",
    "CursorContext",
    "ParseDiagnostic",
    "ParseError",
    "Parser",
    "PartialParse",
    "classify_cursor",
    "parse_partial",
    "parse_source",
]


@dataclass
class ParseDiagnostic:
    message: str
    line: int
    column: int
    offset: int
    expected: str = ""
    found: str = ""
    at_end: bool = False


def describe_token(token: Token) -> str:
    if token.type == "EOF":
        return "end of input"
    if token.type == "NEWLINE":
        return "new line"
    return repr(token.lexeme or token.value)


class Parser:
    def __init__(self, tokens: List[Token], context: Optional[FlowContext] = None, *, recover: bool = False) -> None:
        self.tokens = tokens
        self.context = context
        self.position = 0
        self.recover = recover
        self.diagnostics: List[ParseDiagnostic] = []

    @classmethod
    def from_source(cls, source: str, context: Optional[FlowContext] = None) -> "Parser":
        return cls(Lexer(source, context).tokenize(), context)

    parse_program = statements.parse_program
    parse_block = statements.parse_block
    parse_statement = statements.parse_statement
    parse_if = statements.parse_if
    parse_try = statements.parse_try
    parse_function = statements.parse_function
    parse_parameters = statements.parse_parameters
    parse_raise = statements.parse_raise
    parse_return = statements.parse_return

    parse_expression = expressions.parse_expression
    parse_or = expressions.parse_or
    parse_and = expressions.parse_and
    parse_not = expressions.parse_not
    parse_equality = expressions.parse_equality
    parse_comparison = expressions.parse_comparison
    parse_additive = expressions.parse_additive
    parse_multiplicative = expressions.parse_multiplicative
    parse_power = expressions.parse_power
    parse_unary = expressions.parse_unary
    parse_postfix = expressions.parse_postfix
    parse_primary = expressions.parse_primary
    parse_arguments = expressions.parse_arguments
    parse_list_literal = expressions.parse_list_literal
    parse_dict_literal = expressions.parse_dict_literal

    def consume(self, token_type: str, value: str | None = None, *, expected: str | None = None) -> Token:
        token = self.peek()
        if token.type == token_type and (value is None or token.value == value):
            self.advance()
            return token
        description = expected or (f"'{self.spelling(value)}'" if value else token_type.lower())
        if self.recover and token.type == "EOF":
            self.note_missing(description)
            return Token(token_type, value, token.line, token.column, token.offset, "", incomplete=True)
        raise self.error(f"Expected {description} but found {describe_token(token)}", token, expected=description)

    def match(self, token_type: str) -> bool:
        if self.check(token_type):
            self.advance()
            return True
        return False

    def match_keyword(self, concept: str) -> bool:
        if self.check_keyword(concept):
            self.advance()
            return True
        return False

    def check(self, token_type: str) -> bool:
        return self.peek().type == token_type

    def check_keyword(self, *concepts: str) -> bool:
        token = self.peek()
        return token.type == "KEYWORD" and token.value in concepts

    def check_op(self, *ops: str) -> bool:
        token = self.peek()
        return token.type == "OP" and token.value in ops

    def peek(self) -> Token:
        return self.tokens[self.position]

    def peek_offset(self, offset: int) -> Token:
        idx = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[idx]

    def advance(self) -> Token:
        token = self.tokens[self.position]
        self.position = min(self.position + 1, len(self.tokens) - 1)
        return token

    def skip_newlines(self) -> None:
        while self.check("NEWLINE"):
            self.advance()

    def at_end(self) -> bool:
        return self.check("EOF")

    def spelling(self, concept: str | None) -> str:
        if concept and self.context is not None and concept in self.context.keywords:
            return self.context.keyword(concept)
        return concept or ""

    def note_missing(self, expected: str) -> None:
        token = self.peek()
        self.diagnostics.append(
            ParseDiagnostic(
                f"Expected {expected} but found end of input",
                token.line,
                token.column,
                token.offset,
                expected=expected,
                found="end of input",
                at_end=True,
            )
        )

    def error(self, message: str, token: Token, *, expected: str = "") -> ParseError:
        return ParseError(
            message,
            token.line,
            token.column,
            token.offset,
            expected=expected,
            found=describe_token(token),
        )

    def _span(self, token: Token) -> ast_nodes.Span:
        return ast_nodes.Span(line=token.line, column=token.column, offset=token.offset)


@dataclass
class PartialParse:
    """Best-effort parse of text that is still being typed."""

    program: Optional[ast_nodes.Program]
    cursor: CursorContext
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)

    @property
    def status(self) -> str:
        if not self.diagnostics:
            return "complete"
        if all(diagnostic.at_end for diagnostic in self.diagnostics):
            return "incomplete"
        return "malformed"


def parse_source(source: str, context: Optional[FlowContext] = None) -> ast_nodes.Program:
    """Parse helper for the interpreter, tests and tooling."""
    return Parser.from_source(source, context).parse_program()


def parse_partial(source: str, context: Optional[FlowContext] = None, cursor: Optional[int] = None) -> PartialParse:
    if cursor is None or cursor > len(source):
        cursor = len(source)
    cursor = max(cursor, 0)
    cursor_context = classify_cursor(Lexer(source[:cursor], context, tolerant=True).tokenize(), cursor)

    tokens = Lexer(source, context, tolerant=True).tokenize()
    parser = Parser(tokens, context, recover=True)
    for token in tokens:
        if token.incomplete:
            parser.diagnostics.append(
                ParseDiagnostic(
                    f"Unterminated {token.type.lower()}",
                    token.line,
                    token.column,
                    token.offset,
                    expected="closing delimiter",
                    found="end of input",
                    at_end=True,
                )
            )
    program: Optional[ast_nodes.Program] = None
    try:
        program = parser.parse_program()
    except (ParseError, LexError) as exc:
        parser.diagnostics.append(
            ParseDiagnostic(
                exc.message,
                exc.line or 0,
                exc.column or 0,
                exc.offset or 0,
                expected=getattr(exc, "expected", ""),
                found=getattr(exc, "found", ""),
            )
        )
    return PartialParse(program=program, cursor=cursor_context, diagnostics=parser.diagnostics)
