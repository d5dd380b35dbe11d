"""
Tree walking evaluator for Flow programs.

One :class:`Interpreter` runs one program: it owns the global scope (with
every builtin module bound by name) and the call depth counter. The module
registry it reads from is shared and read-only.
"""

from __future__ import annotations

import difflib
import logging
import sys
import threading
from typing import Any, Callable, Dict, List, Optional

from .. import ast_nodes
from ..config import DEFAULT_HTTP_TIMEOUT
from ..context import FlowContext
from ..errors import EvaluationError, FlowException, ReturnSignal
from ..registry import ModuleRegistry, build_registry
from ..strings import strings
from .cache import ResponseCache
from .callables import FlowFunction, FlowModule
from .datetimes import FlowDatetime, parse_datetime_literal
from .objects import (
    BINARY_OPERATORS,
    GENERIC_ERROR,
    MEMORY_OVERFLOW_ERROR,
    NAME_ERROR,
    SYNTAX_ERROR,
    TYPE_ERROR,
    VALUE_ERROR,
    FlowBoolean,
    FlowDict,
    FlowError,
    FlowFloat,
    FlowInteger,
    FlowList,
    FlowNull,
    FlowObject,
    FlowString,
    make_error,
)
from .scope import Scope
from .transport import HTTPClient, http_request

log = logging.getLogger(__name__)

# Python frames a single Flow call may need: call dispatch, argument binding
# and the nested blocks and expressions of its body.
FRAMES_PER_CALL = 48
_BASE_FRAMES = 500
_BYTES_PER_FRAME = 2048
_MIN_STACK_BYTES = 16 * 1024 * 1024
_stack_lock = threading.Lock()


def run_with_call_stack(function: Callable[[], FlowObject], max_calls: int) -> FlowObject:
    """
    Run ``function`` on a dedicated thread sized for ``max_calls`` nested
    Flow calls.

    The recursion limit is raised (never lowered) to match, and the thread
    gets a C stack large enough to reach it. Whatever ``function`` raises is
    raised again in the calling thread.
    """
    frames = max_calls * FRAMES_PER_CALL + _BASE_FRAMES
    stack_bytes = max(_MIN_STACK_BYTES, frames * _BYTES_PER_FRAME)
    stack_bytes += -stack_bytes % 4096
    outcome: Dict[str, Any] = {}

    def target() -> None:
        try:
            outcome["result"] = function()
        except BaseException as exc:  # re-raised below
            outcome["error"] = exc

    with _stack_lock:
        if sys.getrecursionlimit() < frames:
            sys.setrecursionlimit(frames)
        previous = threading.stack_size(stack_bytes)
        try:
            worker = threading.Thread(target=target, name="flow-evaluation", daemon=True)
            worker.start()
        finally:
            threading.stack_size(previous)
    worker.join()
    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]


class Interpreter:
    def __init__(
        self,
        context: FlowContext,
        registry: Optional[ModuleRegistry] = None,
        *,
        http_client: HTTPClient = http_request,
        http_timeout: Optional[float] = DEFAULT_HTTP_TIMEOUT,
        response_cache: Optional[ResponseCache] = None,
    ) -> None:
        self.context = context
        self.registry = registry if registry is not None else build_registry(context)
        self.http_client = http_client
        self.http_timeout = http_timeout
        self.response_cache = response_cache
        self.depth = 0
        self.globals = Scope("<module>")
        for descriptor in self.registry.modules():
            module = FlowModule(context, descriptor, descriptor.module_class(self))
            self.globals.declare(descriptor.name, module)
            if descriptor.canonical_name != descriptor.name:
                self.globals.declare(descriptor.canonical_name, module)
        self._handlers: Dict[type, Callable[[Any, Scope], FlowObject]] = {
            ast_nodes.Literal: self._literal,
            ast_nodes.Identifier: self._identifier,
            ast_nodes.VariableInterpolation: self._interpolation,
            ast_nodes.ListLiteral: self._list,
            ast_nodes.DictLiteral: self._dict,
            ast_nodes.BinaryOp: self._binary,
            ast_nodes.BooleanOp: self._boolean,
            ast_nodes.UnaryOp: self._unary,
            ast_nodes.Attribute: self._attribute,
            ast_nodes.Subscript: self._subscript,
            ast_nodes.Call: self._call,
            ast_nodes.Assign: self._assign,
            ast_nodes.Block: self._block,
            ast_nodes.If: self._if,
            ast_nodes.FunctionDef: self._function,
            ast_nodes.Return: self._return,
            ast_nodes.Raise: self._raise,
            ast_nodes.TryCatch: self._try,
            ast_nodes.Missing: self._missing,
        }

    def run(self, program: ast_nodes.Program) -> FlowObject:
        """Evaluate a program; uncaught language errors propagate as ``FlowException``."""
        return run_with_call_stack(lambda: self._run_program(program), self.context.max_call_stack_size)

    def _run_program(self, program: ast_nodes.Program) -> FlowObject:
        try:
            return self._block(program.body, self.globals)
        except ReturnSignal as signal:
            return signal.value
        except RecursionError:
            self.depth = 0
            raise make_error(
                self.context,
                MEMORY_OVERFLOW_ERROR,
                "runtime.stack_overflow",
                size=self.context.max_call_stack_size,
            ) from None

    def evaluate(self, node: Any, scope: Scope) -> FlowObject:
        handler = self._handlers.get(type(node))
        if handler is None:
            raise EvaluationError(f"Cannot evaluate node {type(node).__name__}")
        return handler(node, scope)

    # Calls
    def call(self, function: FlowObject, args: List[FlowObject], kwargs: Optional[Dict[str, FlowObject]] = None) -> FlowObject:
        return function.call(self, list(args), dict(kwargs or {}))

    def run_function(self, function: FlowFunction, bound: Dict[str, FlowObject]) -> FlowObject:
        limit = self.context.max_call_stack_size
        if self.depth >= limit:
            raise make_error(self.context, MEMORY_OVERFLOW_ERROR, "runtime.stack_overflow", size=limit)
        self.depth += 1
        scope = function.closure.child(function.name)
        for name, value in bound.items():
            scope.declare(name, value)
        try:
            return self._block(function.body, scope)
        except ReturnSignal as signal:
            return signal.value
        finally:
            self.depth -= 1

    # Node handlers
    def _literal(self, node: ast_nodes.Literal, scope: Scope) -> FlowObject:
        kind = node.kind
        if kind == "integer":
            return FlowInteger(self.context, node.value)
        if kind == "float":
            return FlowFloat(self.context, node.value)
        if kind == "string":
            return FlowString(self.context, node.value)
        if kind == "boolean":
            return FlowBoolean(self.context, node.value)
        if kind == "null":
            return FlowNull(self.context)
        if kind == "datetime":
            try:
                moment = parse_datetime_literal(node.value, self.context)
            except ValueError:
                raise make_error(self.context, VALUE_ERROR, "runtime.invalid_datetime", text=node.value) from None
            return FlowDatetime(self.context, moment)
        raise EvaluationError(f"Unknown literal kind {kind!r}")

    def _identifier(self, node: ast_nodes.Identifier, scope: Scope) -> FlowObject:
        value = scope.resolve(node.name)
        if value is not None:
            return value
        message = strings("runtime.not_defined", self.context.language, name=node.name)
        matches = difflib.get_close_matches(node.name, list(scope.visible_names()), n=1, cutoff=0.6)
        if matches:
            message = f"{message} {strings('runtime.did_you_mean', self.context.language, suggestion=matches[0])}"
        raise FlowException(FlowError(self.context, NAME_ERROR, message))

    def _interpolation(self, node: ast_nodes.VariableInterpolation, scope: Scope) -> FlowObject:
        placeholder = "{{" + node.raw_name + "}}"
        raise make_error(self.context, NAME_ERROR, "runtime.interpolation", placeholder=placeholder)

    def _list(self, node: ast_nodes.ListLiteral, scope: Scope) -> FlowObject:
        return FlowList(self.context, [self.evaluate(item, scope) for item in node.items])

    def _dict(self, node: ast_nodes.DictLiteral, scope: Scope) -> FlowObject:
        entries = [(self.evaluate(key, scope), self.evaluate(value, scope)) for key, value in node.entries]
        return FlowDict(self.context, entries)

    def _binary(self, node: ast_nodes.BinaryOp, scope: Scope) -> FlowObject:
        left = self.evaluate(node.left, scope)
        right = self.evaluate(node.right, scope)
        if node.op == "in":
            return right.contains(left)
        operation = BINARY_OPERATORS.get(node.op)
        if operation is None:
            raise EvaluationError(f"Unknown operator {node.op!r}")
        return getattr(left, operation)(right)

    def _boolean(self, node: ast_nodes.BooleanOp, scope: Scope) -> FlowObject:
        left = self.evaluate(node.left, scope)
        if node.op == "and":
            return self.evaluate(node.right, scope) if left.is_truthy() else left
        return left if left.is_truthy() else self.evaluate(node.right, scope)

    def _unary(self, node: ast_nodes.UnaryOp, scope: Scope) -> FlowObject:
        operand = self.evaluate(node.operand, scope)
        if node.op == "not":
            return FlowBoolean(self.context, not operand.is_truthy())
        if node.op == "-":
            return operand.unary_minus()
        return operand.unary_plus()

    def _attribute(self, node: ast_nodes.Attribute, scope: Scope) -> FlowObject:
        return self.evaluate(node.value, scope).get_attribute(node.name)

    def _subscript(self, node: ast_nodes.Subscript, scope: Scope) -> FlowObject:
        value = self.evaluate(node.value, scope)
        return value.get_item(self.evaluate(node.index, scope))

    def _call(self, node: ast_nodes.Call, scope: Scope) -> FlowObject:
        function = self.evaluate(node.callee, scope)
        args = [self.evaluate(arg, scope) for arg in node.args]
        kwargs = {name: self.evaluate(value, scope) for name, value in node.kwargs.items()}
        return self.call(function, args, kwargs)

    def _assign(self, node: ast_nodes.Assign, scope: Scope) -> FlowObject:
        value = self.evaluate(node.value, scope)
        target = node.target
        if isinstance(target, ast_nodes.Identifier):
            if isinstance(value, FlowFunction) and value.is_anonymous:
                value = value.renamed(target.name)
            scope.assign(target.name, value)
        elif isinstance(target, ast_nodes.Attribute):
            self.evaluate(target.value, scope).set_attribute(target.name, value)
        elif isinstance(target, ast_nodes.Subscript):
            container = self.evaluate(target.value, scope)
            container.set_item(self.evaluate(target.index, scope), value)
        else:
            raise make_error(self.context, TYPE_ERROR, "runtime.invalid_assignment")
        return value

    def _block(self, node: ast_nodes.Block, scope: Scope) -> FlowObject:
        result: FlowObject = FlowNull(self.context)
        for statement in node.statements:
            result = self.evaluate(statement, scope)
        return result

    def _if(self, node: ast_nodes.If, scope: Scope) -> FlowObject:
        if self.evaluate(node.condition, scope).is_truthy():
            return self._block(node.then_branch, scope)
        if node.else_branch is None:
            return FlowNull(self.context)
        return self.evaluate(node.else_branch, scope)

    def _function(self, node: ast_nodes.FunctionDef, scope: Scope) -> FlowObject:
        parameters = []
        for parameter in node.params:
            default = self.evaluate(parameter.default, scope) if parameter.default is not None else None
            parameters.append((parameter.name, default))
        function = FlowFunction(self.context, node.name, parameters, node.body, scope)
        if node.name:
            scope.declare(node.name, function)
        return function

    def _return(self, node: ast_nodes.Return, scope: Scope) -> FlowObject:
        value = self.evaluate(node.value, scope) if node.value is not None else FlowNull(self.context)
        raise ReturnSignal(value)

    def _raise(self, node: ast_nodes.Raise, scope: Scope) -> FlowObject:
        message = self.evaluate(node.message, scope)
        if node.error_type is None and isinstance(message, FlowError):
            raise FlowException(message)
        error_type = GENERIC_ERROR
        if node.error_type is not None:
            error_type = self._plain_text(self.evaluate(node.error_type, scope)) or GENERIC_ERROR
        text = self._plain_text(message)
        if not text:
            text = strings("runtime.raised", self.context.language)
        raise FlowException(FlowError(self.context, error_type, text))

    def _try(self, node: ast_nodes.TryCatch, scope: Scope) -> FlowObject:
        try:
            return self._block(node.body, scope)
        except FlowException as exc:
            log.debug("Caught %s inside try block", exc.error_type)
            if node.handler is None:
                return FlowNull(self.context)
            if node.error_name:
                scope.assign(node.error_name, exc.error)
            return self._block(node.handler, scope)

    def _missing(self, node: ast_nodes.Missing, scope: Scope) -> FlowObject:
        raise make_error(self.context, SYNTAX_ERROR, "runtime.incomplete", expected=node.expected)

    @staticmethod
    def _plain_text(value: FlowObject) -> str:
        if isinstance(value, FlowString):
            return value.text
        if isinstance(value, FlowError):
            return value.message
        return value.render()
