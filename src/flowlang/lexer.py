"""
Character-level lexer for the Flow language.

Keywords, the decimal separator and the argument separator come from the
:class:`~flowlang.context.FlowContext`, so the same source can be written
in any supported language. ``{{ label }}`` is emitted as one
``INTERPOLATION`` token because the text between the braces is a field
label, not an expression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .context import FlowContext
from .errors import LexError

STRING_DELIMITERS = {'"', "'", "`"}
ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\"}
TWO_CHAR_OPERATORS = {"==", "!=", "<=", ">="}
SINGLE_CHAR_OPERATORS = {"<", ">", "+", "-", "*", "/", "%", "^"}
PUNCTUATION = {
    "(": "LPAREN",
    ")": "RPAREN",
    "[": "LBRACKET",
    "]": "RBRACKET",
    "{": "LBRACE",
    "}": "RBRACE",
    ":": "COLON",
}


def is_identifier_char(char: str) -> bool:
    if char.isascii():
        return char.isalnum() or char == "_"
    # Latin-1 letters, without the multiplication and division signs.
    return "À" <= char <= "ÿ" and char not in "×÷"


def is_identifier_start(char: str) -> bool:
    return is_identifier_char(char) and not char.isdigit()


@dataclass(frozen=True)
class Token:
    type: str
    value: Optional[str]
    line: int
    column: int
    offset: int = 0
    lexeme: str = ""
    incomplete: bool = False

    @property
    def end(self) -> int:
        return self.offset + len(self.lexeme)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Token({self.type}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Turns source text into a flat list of tokens ending with ``EOF``.

    With ``tolerant=True`` the lexer never raises: unknown characters become
    ``ERROR`` tokens and unterminated strings, datetimes and interpolations
    are emitted with ``incomplete=True``. The autocomplete path relies on
    this because the text being typed is rarely valid.
    """

    def __init__(self, source: str, context: Optional[FlowContext] = None, *, tolerant: bool = False) -> None:
        self.source = source
        self.context = context or FlowContext.for_language(None, modules=())
        self.tolerant = tolerant
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        lookup = self.context.keyword_lookup
        self._keywords = {word: concept for word, concept in lookup.items() if " " not in word}
        self._phrases: List[Tuple[str, str]] = sorted(
            ((word, concept) for word, concept in lookup.items() if " " in word),
            key=lambda item: len(item[0]),
            reverse=True,
        )

    def tokenize(self) -> List[Token]:
        separator = self.context.positional_argument_separator
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char in " \t\r":
                self._advance(1)
                continue
            if char == "\n":
                self._emit("NEWLINE", None, 1)
                continue
            if char == "#":
                while self.pos < len(self.source) and self.source[self.pos] != "\n":
                    self._advance(1)
                continue
            if char == separator:
                self._emit("SEPARATOR", char, 1)
                continue
            if char == ";":
                self._emit("NEWLINE", None, 1)
                continue
            if char in STRING_DELIMITERS:
                self._read_string(char)
                continue
            if char.isdigit():
                self._read_number()
                continue
            if char == "~" and self.source.startswith(f"~{self.context.date_character}[", self.pos):
                self._read_datetime()
                continue
            if self.source.startswith("{{", self.pos) and self._read_interpolation():
                continue
            if is_identifier_start(char):
                self._read_word()
                continue
            two = self.source[self.pos : self.pos + 2]
            if two == "<-":
                self._emit("ASSIGN", two, 2)
                continue
            if two in TWO_CHAR_OPERATORS:
                self._emit("OP", two, 2)
                continue
            if char == "=":
                self._emit("ASSIGN", char, 1)
                continue
            if char in SINGLE_CHAR_OPERATORS:
                self._emit("OP", char, 1)
                continue
            if char in PUNCTUATION:
                self._emit(PUNCTUATION[char], char, 1)
                continue
            if char == ".":
                self._emit("DOT", char, 1)
                continue
            if self.tolerant:
                self._emit("ERROR", char, 1)
                continue
            raise LexError(
                f"Unexpected character '{char}'",
                self.line,
                self.column,
                self.pos,
                unexpected_char=char,
            )
        self.tokens.append(Token("EOF", None, self.line, self.column, self.pos, ""))
        return self.tokens

    def _advance(self, count: int) -> None:
        for _ in range(count):
            if self.pos >= len(self.source):
                return
            if self.source[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _emit(self, token_type: str, value: Optional[str], length: int, *, incomplete: bool = False) -> Token:
        token = Token(
            token_type,
            value,
            self.line,
            self.column,
            self.pos,
            self.source[self.pos : self.pos + length],
            incomplete,
        )
        self.tokens.append(token)
        self._advance(length)
        return token

    def _fail(self, message: str, char: str = "") -> None:
        raise LexError(message, self.line, self.column, self.pos, unexpected_char=char)

    def _read_string(self, quote: str) -> None:
        index = self.pos + 1
        chars: List[str] = []
        while index < len(self.source) and self.source[index] != quote:
            char = self.source[index]
            if char == "\\" and index + 1 < len(self.source):
                following = self.source[index + 1]
                if following == quote:
                    chars.append(quote)
                else:
                    chars.append(ESCAPES.get(following, "\\" + following))
                index += 2
                continue
            chars.append(char)
            index += 1
        if index >= len(self.source):
            if not self.tolerant:
                self._fail("Unterminated string literal", quote)
            self._emit("STRING", "".join(chars), index - self.pos, incomplete=True)
            return
        self._emit("STRING", "".join(chars), index + 1 - self.pos)

    def _read_number(self) -> None:
        decimal = self.context.decimal_point_separator
        index = self.pos
        while index < len(self.source) and self.source[index].isdigit():
            index += 1
        is_float = (
            index + 1 < len(self.source)
            and self.source[index] == decimal
            and self.source[index + 1].isdigit()
        )
        if is_float:
            index += 1
            while index < len(self.source) and self.source[index].isdigit():
                index += 1
        text = self.source[self.pos : index]
        if is_float:
            self._emit("FLOAT", text.replace(decimal, "."), index - self.pos)
        else:
            self._emit("INTEGER", text, index - self.pos)

    def _read_datetime(self) -> None:
        start = self.pos + 3
        closing = self.source.find("]", start)
        if closing == -1:
            if not self.tolerant:
                self._fail("Unterminated datetime literal", "~")
            self._emit("DATETIME", self.source[start:].strip(), len(self.source) - self.pos, incomplete=True)
            return
        self._emit("DATETIME", self.source[start:closing].strip(), closing + 1 - self.pos)

    def _read_interpolation(self) -> bool:
        start = self.pos + 2
        closing = self.source.find("}}", start)
        if closing != -1:
            inner = self.source[start:closing]
            if "{" not in inner and "}" not in inner:
                self._emit("INTERPOLATION", inner.strip(), closing + 2 - self.pos)
                return True
            return False
        rest = self.source[start:]
        if self.tolerant and not any(char in rest for char in "{}\n"):
            self._emit("INTERPOLATION", rest.strip(), len(self.source) - self.pos, incomplete=True)
            return True
        return False

    def _read_word(self) -> None:
        for phrase, concept in self._phrases:
            end = self.pos + len(phrase)
            if self.source.startswith(phrase, self.pos) and (
                end >= len(self.source) or not is_identifier_char(self.source[end])
            ):
                self._emit("KEYWORD", concept, len(phrase))
                return
        index = self.pos
        while index < len(self.source) and is_identifier_char(self.source[index]):
            index += 1
        word = self.source[self.pos : index]
        concept = self._keywords.get(word)
        if concept is not None:
            self._emit("KEYWORD", concept, index - self.pos)
        else:
            self._emit("IDENT", word, index - self.pos)


def tokenize(source: str, context: Optional[FlowContext] = None, *, tolerant: bool = False) -> List[Token]:
    return Lexer(source, context, tolerant=tolerant).tokenize()
