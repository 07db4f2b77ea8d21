"""
Resolver package for docpointer.

Provides the walking loop over reference tokens and the built-in per-token
evaluation strategy.
"""

from .base import Resolver, resolve_tokens
from .evaluators import evaluate_token

__all__ = ["Resolver", "resolve_tokens", "evaluate_token"]
