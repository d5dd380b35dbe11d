"""Expression parsing, lowest precedence first.

These functions are attached to :class:`flowlang.parser.Parser` as methods
and rely on its token helpers (``consume``, ``match``, ``check_op``...).
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .. import ast_nodes

__all__ = [
    "parse_expression",
    "parse_or",
    "parse_and",
    "parse_not",
    "parse_equality",
    "parse_comparison",
    "parse_additive",
    "parse_multiplicative",
    "parse_power",
    "parse_unary",
    "parse_postfix",
    "parse_primary",
    "parse_arguments",
    "parse_list_literal",
    "parse_dict_literal",
]

LITERAL_KINDS = {"INTEGER": "integer", "FLOAT": "float", "STRING": "string", "DATETIME": "datetime"}
KEYWORD_LITERALS = {"True": ("boolean", True), "False": ("boolean", False), "None": ("null", None)}


def parse_expression(self) -> ast_nodes.Expr:
    return self.parse_or()


def parse_or(self) -> ast_nodes.Expr:
    expr = self.parse_and()
    while self.check_keyword("or"):
        token = self.advance()
        right = self.parse_and()
        expr = ast_nodes.BooleanOp(left=expr, op="or", right=right, span=self._span(token))
    return expr


def parse_and(self) -> ast_nodes.Expr:
    expr = self.parse_not()
    while self.check_keyword("and"):
        token = self.advance()
        right = self.parse_not()
        expr = ast_nodes.BooleanOp(left=expr, op="and", right=right, span=self._span(token))
    return expr


def parse_not(self) -> ast_nodes.Expr:
    if self.check_keyword("not"):
        token = self.advance()
        operand = self.parse_not()
        return ast_nodes.UnaryOp(op="not", operand=operand, span=self._span(token))
    return self.parse_equality()


def parse_equality(self) -> ast_nodes.Expr:
    expr = self.parse_comparison()
    while True:
        token = self.peek()
        if self.check_op("==", "!=", "<=", ">="):
            op = token.value
        elif self.check_keyword("is"):
            op = "=="
        elif self.check_keyword("is not"):
            op = "!="
        else:
            return expr
        self.advance()
        right = self.parse_comparison()
        expr = ast_nodes.BinaryOp(left=expr, op=op, right=right, span=self._span(token))


def parse_comparison(self) -> ast_nodes.Expr:
    expr = self.parse_additive()
    while self.check_op("<", ">") or self.check_keyword("in"):
        token = self.advance()
        op = "in" if token.type == "KEYWORD" else token.value
        right = self.parse_additive()
        expr = ast_nodes.BinaryOp(left=expr, op=op, right=right, span=self._span(token))
    return expr


def parse_additive(self) -> ast_nodes.Expr:
    expr = self.parse_multiplicative()
    while self.check_op("+", "-"):
        token = self.advance()
        right = self.parse_multiplicative()
        expr = ast_nodes.BinaryOp(left=expr, op=token.value, right=right, span=self._span(token))
    return expr


def parse_multiplicative(self) -> ast_nodes.Expr:
    expr = self.parse_power()
    while self.check_op("*", "/", "%"):
        token = self.advance()
        right = self.parse_power()
        expr = ast_nodes.BinaryOp(left=expr, op=token.value, right=right, span=self._span(token))
    return expr


def parse_power(self) -> ast_nodes.Expr:
    base = self.parse_unary()
    if self.check_op("^"):
        token = self.advance()
        exponent = self.parse_power()
        return ast_nodes.BinaryOp(left=base, op="^", right=exponent, span=self._span(token))
    return base


def parse_unary(self) -> ast_nodes.Expr:
    if self.check_op("+", "-"):
        token = self.advance()
        operand = self.parse_unary()
        return ast_nodes.UnaryOp(op=token.value, operand=operand, span=self._span(token))
    return self.parse_postfix()


def parse_postfix(self) -> ast_nodes.Expr:
    expr = self.parse_primary()
    while True:
        token = self.peek()
        if token.type == "DOT":
            self.advance()
            name = self.consume("IDENT", expected="attribute name").value or ""
            expr = ast_nodes.Attribute(value=expr, name=name, span=self._span(token))
        elif token.type == "LBRACKET":
            self.advance()
            self.skip_newlines()
            index = self.parse_expression()
            self.skip_newlines()
            self.consume("RBRACKET", expected="']'")
            expr = ast_nodes.Subscript(value=expr, index=index, span=self._span(token))
        elif token.type == "LPAREN":
            self.advance()
            args, kwargs = self.parse_arguments()
            self.consume("RPAREN", expected="')'")
            expr = ast_nodes.Call(callee=expr, args=args, kwargs=kwargs, span=self._span(token))
        else:
            return expr


def parse_arguments(self) -> Tuple[List[ast_nodes.Expr], Dict[str, ast_nodes.Expr]]:
    """Positional and ``name = value`` arguments up to the closing parenthesis."""
    args: List[ast_nodes.Expr] = []
    kwargs: Dict[str, ast_nodes.Expr] = {}
    self.skip_newlines()
    while not self.check("RPAREN") and not self.at_end():
        token = self.peek()
        argument = self.parse_statement()
        if isinstance(argument, ast_nodes.Assign):
            if not isinstance(argument.target, ast_nodes.Identifier):
                raise self.error("Named arguments must be plain names", token, expected="parameter name")
            name = argument.target.name
            if name in kwargs:
                raise self.error(f"Argument {name!r} repeated", token, expected="parameter name")
            kwargs[name] = argument.value
        else:
            args.append(argument)
        self.skip_newlines()
        if not self.match("SEPARATOR"):
            break
        self.skip_newlines()
    return args, kwargs


def parse_primary(self) -> ast_nodes.Expr:
    token = self.peek()
    if token.type in LITERAL_KINDS:
        self.advance()
        kind = LITERAL_KINDS[token.type]
        value: object = token.value
        if kind == "integer":
            value = int(token.value)
        elif kind == "float":
            value = float(token.value)
        return ast_nodes.Literal(kind=kind, value=value, span=self._span(token))
    if token.type == "INTERPOLATION":
        self.advance()
        return ast_nodes.VariableInterpolation(raw_name=token.value or "", span=self._span(token))
    if token.type == "IDENT":
        self.advance()
        return ast_nodes.Identifier(name=token.value, span=self._span(token))
    if token.type == "KEYWORD":
        if token.value in KEYWORD_LITERALS:
            self.advance()
            kind, value = KEYWORD_LITERALS[token.value]
            return ast_nodes.Literal(kind=kind, value=value, span=self._span(token))
        if token.value == "if":
            return self.parse_if()
        if token.value == "try":
            return self.parse_try()
        if token.value == "function":
            return self.parse_function()
        if token.value == "return":
            return self.parse_return()
        if token.value == "raise":
            return self.parse_raise()
    if token.type == "LPAREN":
        self.advance()
        self.skip_newlines()
        expr = self.parse_statement()
        self.skip_newlines()
        self.consume("RPAREN", expected="')'")
        return expr
    if token.type == "LBRACKET":
        return self.parse_list_literal()
    if token.type == "LBRACE":
        return self.parse_dict_literal()
    if self.recover and token.type == "EOF":
        self.note_missing("an expression")
        return ast_nodes.Missing(expected="expression", span=self._span(token))
    found = self.spelling(token.value) if token.type == "KEYWORD" else (token.lexeme or token.value)
    raise self.error(f"Expected an expression but found {found!r}", token, expected="an expression")


def parse_list_literal(self) -> ast_nodes.ListLiteral:
    start = self.consume("LBRACKET")
    items: List[ast_nodes.Expr] = []
    self.skip_newlines()
    while not self.check("RBRACKET") and not self.at_end():
        items.append(self.parse_expression())
        self.skip_newlines()
        if not self.match("SEPARATOR"):
            break
        self.skip_newlines()
    self.consume("RBRACKET", expected="']'")
    return ast_nodes.ListLiteral(items=items, span=self._span(start))


def parse_dict_literal(self) -> ast_nodes.DictLiteral:
    start = self.consume("LBRACE")
    entries: List[tuple[ast_nodes.Expr, ast_nodes.Expr]] = []
    self.skip_newlines()
    while not self.check("RBRACE") and not self.at_end():
        key = self.parse_expression()
        self.consume("COLON", expected="':'")
        value = self.parse_expression()
        entries.append((key, value))
        self.skip_newlines()
        if not self.match("SEPARATOR"):
            break
        self.skip_newlines()
    self.consume("RBRACE", expected="'}'")
    return ast_nodes.DictLiteral(entries=entries, span=self._span(start))
