"""
Cursor classification for autocomplete.

Works on the tolerant token stream of the text *before* the cursor, so it
can describe input that does not parse yet: the word being typed, the
module it is attached to and, when the cursor sits inside a call, which
argument is being written.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..lexer import Token

OPENERS = {"LPAREN": "RPAREN", "LBRACKET": "RBRACKET", "LBRACE": "RBRACE"}
CLOSERS = {closer: opener for opener, closer in OPENERS.items()}
WORD_TOKENS = {"IDENT", "KEYWORD", "INTERPOLATION"}


@dataclass
class CallContext:
    attribute_name: str
    method_name: str
    parameter_index: int = 0
    parameter_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributeName": self.attribute_name,
            "methodName": self.method_name,
            "parameterIndex": self.parameter_index,
            "parameterName": self.parameter_name,
        }


@dataclass
class CursorContext:
    name: str = ""
    attribute_name: str = ""
    element_at: int = 0
    call: Optional[CallContext] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "attributeName": self.attribute_name,
            "elementAt": self.element_at,
            "call": self.call.to_dict() if self.call else None,
        }


@dataclass
class _Frame:
    opener: str
    callee: Optional[Tuple[str, str]]
    argument_start: int
    index: int = 0
    parameter_name: Optional[str] = None


def _callee_before(tokens: List[Token], position: int) -> Optional[Tuple[str, str]]:
    if position < 1 or tokens[position - 1].type != "IDENT":
        return None
    method = tokens[position - 1].value or ""
    module = ""
    if position >= 3 and tokens[position - 2].type == "DOT" and tokens[position - 3].type == "IDENT":
        module = tokens[position - 3].value or ""
    return module, method


def _first_meaningful(tokens: List[Token], start: int, stop: int) -> int:
    index = start
    while index < stop and tokens[index].type == "NEWLINE":
        index += 1
    return index


def classify_cursor(tokens: List[Token], cursor: int) -> CursorContext:
    """Classify the cursor position from the tokens that precede it."""
    tokens = [token for token in tokens if token.type != "EOF"]
    stack: List[_Frame] = []
    for position, token in enumerate(tokens):
        if token.type in OPENERS:
            callee = _callee_before(tokens, position) if token.type == "LPAREN" else None
            stack.append(_Frame(opener=token.type, callee=callee, argument_start=position + 1))
        elif token.type in CLOSERS:
            while stack:
                frame = stack.pop()
                if frame.opener == CLOSERS[token.type]:
                    break
        elif token.type == "SEPARATOR" and stack:
            frame = stack[-1]
            frame.index += 1
            frame.parameter_name = None
            frame.argument_start = position + 1
        elif token.type == "ASSIGN" and stack and stack[-1].opener == "LPAREN":
            frame = stack[-1]
            first = _first_meaningful(tokens, frame.argument_start, position)
            if first == position - 1 and tokens[first].type == "IDENT":
                frame.parameter_name = tokens[first].value

    context = CursorContext(element_at=cursor)
    for frame in reversed(stack):
        if frame.opener == "LPAREN" and frame.callee is not None:
            module, method = frame.callee
            context.call = CallContext(
                attribute_name=module,
                method_name=method,
                parameter_index=frame.index,
                parameter_name=frame.parameter_name,
            )
            break

    if not tokens:
        return context
    last = tokens[-1]
    if last.end != cursor:
        return context
    if last.type in WORD_TOKENS:
        context.name = last.lexeme
        context.element_at = last.offset
        if len(tokens) >= 3 and tokens[-2].type == "DOT" and tokens[-3].type == "IDENT":
            context.attribute_name = tokens[-3].value or ""
    elif last.type == "DOT" and len(tokens) >= 2 and tokens[-2].type == "IDENT":
        context.attribute_name = tokens[-2].value or ""
        context.element_at = cursor
    return context
