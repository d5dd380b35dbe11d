"""
Runtime values and the evaluator.
"""

from .cache import ResponseCache
from .callables import FlowBuiltinFunction, FlowCallable, FlowFunction, FlowModule
from .convert import from_flow, to_flow
from .datetimes import FlowDatetime
from .interpreter import Interpreter
from .objects import (
    FlowBoolean,
    FlowDict,
    FlowError,
    FlowFloat,
    FlowInteger,
    FlowList,
    FlowNull,
    FlowNumber,
    FlowObject,
    FlowString,
    FlowStruct,
)
from .scope import Scope

__all__ = [
    "FlowBoolean",
    "FlowBuiltinFunction",
    "FlowCallable",
    "FlowDatetime",
    "FlowDict",
    "FlowError",
    "FlowFloat",
    "FlowFunction",
    "FlowInteger",
    "FlowList",
    "FlowModule",
    "FlowNull",
    "FlowNumber",
    "FlowObject",
    "FlowString",
    "FlowStruct",
    "Interpreter",
    "ResponseCache",
    "Scope",
    "from_flow",
    "to_flow",
]
