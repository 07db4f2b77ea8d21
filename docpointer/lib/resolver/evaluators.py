"""
Token evaluators for docpointer.

Implements the built-in per-token evaluation strategy:
- Sequences: RFC 6901 array-index tokens
- Mappings: exact key lookup
- Anything else: only the empty token resolves (to the node itself)

Every evaluator satisfies the TokenEvaluator protocol and reports a token
that does not resolve by returning MISSING.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Final
import re

from docpointer.lib.exceptions import UnsupportedOperationError
from docpointer.lib.log import LOG
from docpointer.models.dataModel import MISSING, DelimiterToken, PointerConfig

# RFC 6901 array-index: "0" or a digit sequence without leading zero
ARRAY_INDEX: Final[re.Pattern[str]] = re.compile(r"0|[1-9][0-9]*", re.ASCII)

APPEND_TOKEN: Final[str] = "-"


def is_sequence(node: Any) -> bool:
    """True for list-like nodes addressed by integer index."""
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def is_mapping(node: Any) -> bool:
    """True for map-like nodes addressed by string key."""
    return isinstance(node, Mapping)


def sequence_lookup(token: str, node: Sequence[Any]) -> Any:
    """Resolve an array-index token against a sequence."""
    if isinstance(token, DelimiterToken):
        return MISSING
    if token == APPEND_TOKEN:
        LOG(f"Pointer token '{APPEND_TOKEN}' addresses past the end of a sequence")
        raise UnsupportedOperationError(
            token, "the append position cannot be evaluated"
        )
    if not ARRAY_INDEX.fullmatch(token):
        return MISSING

    index: int = int(token)
    if index >= len(node):
        return MISSING
    return node[index]


def mapping_lookup(token: str, node: Mapping[str, Any]) -> Any:
    """Resolve a key token against a mapping."""
    if isinstance(token, DelimiterToken):
        token = ""
    elif token == "":
        return node
    if token in node:
        return node[token]
    return MISSING


def evaluate_token(token: str, config: PointerConfig, node: Any) -> Any:
    """Built-in TokenEvaluator.

    The shape of `node` is inspected once and dispatched to a sequence or
    mapping lookup. Scalars (and None) cannot be traversed: an empty token
    leaves them unchanged, any other token misses.

    Args:
        token: Decoded reference token
        config: Configuration of the resolver in use
        node: Current document node

    Returns:
        The next node, or MISSING

    Raises:
        UnsupportedOperationError: For the '-' token against a sequence
    """
    if is_sequence(node):
        return sequence_lookup(token, node)
    if is_mapping(node):
        return mapping_lookup(token, node)
    if token == "":
        return node
    return MISSING
