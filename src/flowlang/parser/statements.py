"""Statement and block level parsing.

These functions are attached to :class:`flowlang.parser.Parser` as methods.
"""

from __future__ import annotations

from typing import List, Optional

from .. import ast_nodes

__all__ = [
    "parse_program",
    "parse_block",
    "parse_statement",
    "parse_if",
    "parse_try",
    "parse_function",
    "parse_parameters",
    "parse_raise",
    "parse_return",
]

ASSIGNABLE = (ast_nodes.Identifier, ast_nodes.Attribute, ast_nodes.Subscript)


def parse_program(self) -> ast_nodes.Program:
    first = self.peek()
    body = self.parse_block(())
    if not self.at_end():
        token = self.peek()
        raise self.error(f"Unexpected {self.spelling(token.value)!r}", token, expected="end of input")
    body.span = self._span(first)
    return ast_nodes.Program(body=body)


def parse_block(self, terminators: tuple[str, ...]) -> ast_nodes.Block:
    """Statements separated by new lines, up to one of the terminator keywords."""
    block = ast_nodes.Block(span=self._span(self.peek()))
    while True:
        self.skip_newlines()
        if self.at_end() or self.check_keyword(*terminators):
            return block
        block.statements.append(self.parse_statement())
        if self.at_end() or self.check_keyword(*terminators):
            return block
        if not self.check("NEWLINE"):
            token = self.peek()
            if self.check_keyword("end", "else", "otherwise"):
                raise self.error(f"Unexpected {self.spelling(token.value)!r}", token, expected="new line")
            raise self.error(
                f"Expected a new line between statements but found {token.lexeme or token.value!r}",
                token,
                expected="new line",
            )


def parse_statement(self) -> ast_nodes.Expr:
    start = self.peek()
    expr = self.parse_expression()
    if self.check("ASSIGN"):
        assign_token = self.advance()
        if not isinstance(expr, ASSIGNABLE):
            raise self.error("Cannot assign a value to this expression", assign_token, expected="variable")
        value = self.parse_statement()
        return ast_nodes.Assign(target=expr, value=value, span=self._span(start))
    return expr


def parse_if(self) -> ast_nodes.If:
    start = self.consume("KEYWORD", "if")
    condition = self.parse_expression()
    self.consume("KEYWORD", "do")
    then_branch = self.parse_block(("else", "end"))
    else_branch: Optional[ast_nodes.Block | ast_nodes.If] = None
    if self.match_keyword("else"):
        if self.check_keyword("if"):
            # ``else if`` chains share the closing ``end`` of the innermost if.
            else_branch = self.parse_if()
            return ast_nodes.If(condition, then_branch, else_branch, span=self._span(start))
        self.consume("KEYWORD", "do")
        else_branch = self.parse_block(("end",))
    self.consume("KEYWORD", "end")
    return ast_nodes.If(condition, then_branch, else_branch, span=self._span(start))


def parse_try(self) -> ast_nodes.TryCatch:
    start = self.consume("KEYWORD", "try")
    self.consume("KEYWORD", "do")
    body = self.parse_block(("otherwise", "end"))
    error_name: Optional[str] = None
    handler: Optional[ast_nodes.Block] = None
    if self.match_keyword("otherwise"):
        if self.match("LPAREN"):
            error_name = self.consume("IDENT", expected="error variable name").value
            self.consume("RPAREN")
        elif self.check("IDENT"):
            error_name = self.advance().value
        self.consume("KEYWORD", "do")
        handler = self.parse_block(("end",))
    self.consume("KEYWORD", "end")
    return ast_nodes.TryCatch(body=body, error_name=error_name, handler=handler, span=self._span(start))


def parse_function(self) -> ast_nodes.FunctionDef:
    start = self.consume("KEYWORD", "function")
    name: Optional[str] = None
    if self.check("IDENT"):
        name = self.advance().value
    self.consume("LPAREN")
    params = self.parse_parameters()
    self.consume("RPAREN")
    if self.match("COLON"):
        expr_start = self.peek()
        body = ast_nodes.Block(statements=[self.parse_expression()], span=self._span(expr_start))
        return ast_nodes.FunctionDef(name=name, params=params, body=body, is_lambda=True, span=self._span(start))
    self.consume("KEYWORD", "do")
    body = self.parse_block(("end",))
    self.consume("KEYWORD", "end")
    return ast_nodes.FunctionDef(name=name, params=params, body=body, span=self._span(start))


def parse_parameters(self) -> List[ast_nodes.Parameter]:
    params: List[ast_nodes.Parameter] = []
    seen: set[str] = set()
    self.skip_newlines()
    while not self.check("RPAREN") and not self.at_end():
        token = self.consume("IDENT", expected="parameter name")
        if token.value in seen:
            raise self.error(f"Duplicate parameter {token.value!r}", token, expected="parameter name")
        seen.add(token.value)
        default = None
        if self.match("ASSIGN"):
            default = self.parse_expression()
        elif params and params[-1].default is not None:
            raise self.error(
                f"Parameter {token.value!r} without a default follows a parameter with a default",
                token,
                expected="default value",
            )
        params.append(ast_nodes.Parameter(name=token.value, default=default, span=self._span(token)))
        self.skip_newlines()
        if not self.match("SEPARATOR"):
            break
        self.skip_newlines()
    return params


def parse_raise(self) -> ast_nodes.Raise:
    start = self.consume("KEYWORD", "raise")
    first = self.parse_expression()
    if self.match("COLON"):
        message = self.parse_expression()
        return ast_nodes.Raise(message=message, error_type=first, span=self._span(start))
    return ast_nodes.Raise(message=first, span=self._span(start))


def parse_return(self) -> ast_nodes.Return:
    start = self.consume("KEYWORD", "return")
    if self.check("NEWLINE") or self.at_end() or self.check_keyword("end", "else", "otherwise"):
        return ast_nodes.Return(span=self._span(start))
    return ast_nodes.Return(value=self.parse_expression(), span=self._span(start))
