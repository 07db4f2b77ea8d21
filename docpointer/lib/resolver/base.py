r"""
Base resolver implementation for pointer evaluation.

Provides the walking loop that folds a token evaluator over a sequence of
reference tokens, starting from the document root, and the Resolver that
binds a configuration and a compile cache together.

The walker handles:
- Left-to-right traversal, one token per step
- Short-circuit on the first token that does not resolve
- Strict mode (raise) versus default-value substitution
- Pluggable per-token evaluation strategy

Example:
    resolver = Resolver(PointerConfig(delimiter="."))
    value = resolver.evaluate("asdf.qwer", {"asdf": {"qwer": "poiu"}})
"""

from functools import partial
from typing import Any, Callable, Mapping, Optional, Self, Sequence, Union

from docpointer.config.settings import appsettings
from docpointer.lib.cache import CompileCache
from docpointer.lib.exceptions import MissingReferenceError, PointerSyntaxError
from docpointer.lib.log import LOG
from docpointer.lib.resolver.evaluators import evaluate_token
from docpointer.lib.tokenizer import tokenize
from docpointer.models.dataModel import MISSING, PointerConfig, TokenEvaluator

ConfigLike = Union[PointerConfig, Mapping[str, Any], None]
CompiledPointer = Callable[[Any], Any]


def resolve_tokens(tokens: Sequence[str], doc: Any, config: PointerConfig) -> Any:
    """Walk `doc` following `tokens` and return the value reached.

    Args:
        tokens: Decoded reference tokens, in traversal order
        doc: Root document
        config: Configuration supplying the evaluator and the miss policy

    Returns:
        The referenced value, `doc` itself for zero tokens, or
        `config.default_value` at the first miss in non-strict mode

    Raises:
        MissingReferenceError: At the first miss in strict mode
    """
    evaluator: TokenEvaluator = config.evaluate_token or evaluate_token
    node: Any = doc

    for depth, token in enumerate(tokens):
        node = evaluator(token, config, node)
        if node is MISSING:
            error = MissingReferenceError(token, tokens[:depth], config.delimiter)
            LOG(str(error))
            if config.strict:
                raise error
            return config.default_value

    return node


class Resolver:
    """Pointer resolver bound to a configuration.

    Calling the resolver with a pointer string constructs a Pointer bound to
    the resolver's configuration, so a resolver acts as the pointer
    constructor of its configuration. Every method also accepts a per-call
    configuration that is merged over the bound one.

    Attributes:
        config: Configuration applied by default
        cache: Memoized tokens, keyed by (pointer, delimiter)
    """

    def __init__(
        self: Self, config: ConfigLike = None, cache: Optional[CompileCache] = None
    ) -> None:
        """Initialize resolver with its configuration and compile cache.

        Args:
            config: PointerConfig or mapping of its fields
            cache: Cache to use; a new one is created when omitted
        """
        self.config: PointerConfig = PointerConfig.coerce(config)
        self.cache: CompileCache = cache if cache is not None else CompileCache()

    def __repr__(self: Self) -> str:
        return (
            f"Resolver(delimiter={self.config.delimiter!r}, "
            f"strict={self.config.strict!r})"
        )

    def __call__(self: Self, pointer: str, config: ConfigLike = None) -> "Pointer":
        from docpointer.pointer import Pointer

        return Pointer(pointer, config, resolver=self)

    def configure(self: Self, config: ConfigLike = None) -> PointerConfig:
        """Return the bound configuration merged with a per-call one."""
        return self.config.merge(config)

    def tokens(self: Self, pointer: str, config: ConfigLike = None) -> tuple[str, ...]:
        """Return the memoized token tuple of a pointer.

        Raises:
            PointerSyntaxError: If the pointer cannot be tokenized, or has
                more tokens than `appsettings.maxTokens` allows
        """
        delimiter: str = self.configure(config).delimiter
        tokens = self.cache.get_or_tokenize(pointer, delimiter, tokenize)

        limit: int = appsettings.maxTokens
        if limit and len(tokens) > limit:
            msg: str = f"Pointer has {len(tokens)} tokens, limit is {limit}"
            LOG(msg)
            raise PointerSyntaxError(msg)
        return tokens

    def tokenize(self: Self, pointer: str, config: ConfigLike = None) -> list[str]:
        """Return the decoded reference tokens of a pointer without evaluating."""
        return list(self.tokens(pointer, config))

    def compile(self: Self, pointer: str, config: ConfigLike = None) -> CompiledPointer:
        """Bind a pointer's tokens and configuration into `fn(doc) -> value`."""
        merged: PointerConfig = self.configure(config)
        return partial(resolve_tokens, self.tokens(pointer, merged), config=merged)

    def evaluate(self: Self, pointer: str, doc: Any, config: ConfigLike = None) -> Any:
        """Resolve `pointer` against `doc`.

        Args:
            pointer: Pointer string
            doc: Root document
            config: Per-call configuration merged over the bound one

        Returns:
            The referenced value, or the configured default on a non-strict miss

        Raises:
            MissingReferenceError: On a miss in strict mode
            UnsupportedOperationError: For the '-' token against a sequence
        """
        return self.compile(pointer, config)(doc)
