"""Builtin modules available to every Flow program."""

from __future__ import annotations

from .base import LibraryModule, method
from .dates import Datetime
from .dicts import Dict
from .error import Error
from .functions import Function
from .http import HTTP
from .lists import List
from .numbers import Boolean, Float, Integer, Number
from .text import String

BUILTIN_MODULES = (HTTP, List, Dict, String, Boolean, Integer, Float, Number, Error, Function, Datetime)

__all__ = [
    "BUILTIN_MODULES",
    "Boolean",
    "Datetime",
    "Dict",
    "Error",
    "Float",
    "Function",
    "HTTP",
    "Integer",
    "LibraryModule",
    "List",
    "Number",
    "String",
    "method",
]
