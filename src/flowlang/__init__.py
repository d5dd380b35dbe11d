"""
Flow expression language: lexer, parser, interpreter and editor services.
"""

from .version import __version__  # noqa: F401
from .config import FlowConfig, load_config  # noqa: F401
from .context import FlowContext  # noqa: F401
from .lexer import tokenize  # noqa: F401
from .parser import parse_partial, parse_source  # noqa: F401
from .service import EvaluationSequencer, FlowService, FlowServiceCache  # noqa: F401

__all__ = [
    "lexer",
    "parser",
    "ast_nodes",
    "runtime",
    "library",
    "errors",
    "EvaluationSequencer",
    "FlowConfig",
    "FlowContext",
    "FlowService",
    "FlowServiceCache",
    "load_config",
    "parse_partial",
    "parse_source",
    "tokenize",
    "__version__",
]
