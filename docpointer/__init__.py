"""
docpointer: RFC 6901 pointer resolution over in-memory documents.

Provides tokenizing, escaping and evaluation of pointers with a configurable
delimiter, strict or default-value miss handling and pluggable per-token
evaluators.
"""

from .lib.cache import CompileCache
from .lib.exceptions import (
    MissingReferenceError,
    PointerError,
    PointerSyntaxError,
    UnsupportedOperationError,
)
from .lib.resolver import Resolver, evaluate_token, resolve_tokens
from .lib.tokenizer import escape, unescape
from .models.dataModel import MISSING, DelimiterToken, PointerConfig, TokenEvaluator
from .pointer import (
    Factory,
    JSONPointer,
    Pointer,
    __version__,
    compile,
    evaluate,
    tokenize,
)

__all__ = [
    "CompileCache",
    "DelimiterToken",
    "Factory",
    "JSONPointer",
    "MISSING",
    "MissingReferenceError",
    "Pointer",
    "PointerConfig",
    "PointerError",
    "PointerSyntaxError",
    "Resolver",
    "TokenEvaluator",
    "UnsupportedOperationError",
    "__version__",
    "compile",
    "escape",
    "evaluate",
    "evaluate_token",
    "resolve_tokens",
    "tokenize",
    "unescape",
]
