"""
docpointer main module.

Resolves RFC 6901 style pointers, generalized to a configurable delimiter,
against in-memory documents built from mappings, sequences and scalars.

Features:
- Pointer values bound to a configuration, evaluated against any document
- Factory for resolvers with a preset delimiter, strictness, default value
  or custom token evaluator
- A default resolver (delimiter "/", strict) behind module-level helpers

Examples:
    Evaluate against a document:
        >>> evaluate("/foo/0", {"foo": ["bar", "baz"]})
        'bar'

    Non-strict, with a default:
        >>> evaluate("/nope", {}, {"strict": False, "defaultValue": "x"})
        'x'

    Dot-delimited resolver:
        >>> DotPointer = Factory(delimiter=".")
        >>> DotPointer.evaluate("asdf.qwer", {"asdf": {"qwer": "poiu"}})
        'poiu'

    Reusable pointer value:
        >>> ptr = Pointer("/asdf/qwer")
        >>> ptr.evaluate({"asdf": {"qwer": "poiu"}})
        'poiu'
"""

from typing import Any, Final, Optional, Self

from docpointer.lib.cache import CompileCache
from docpointer.lib.resolver.base import CompiledPointer, ConfigLike, Resolver
from docpointer.models.dataModel import PointerConfig

__version__: Final[str] = "0.1.0"


def Factory(
    config: ConfigLike = None, cache: Optional[CompileCache] = None, **options: Any
) -> Resolver:
    """
    Build a resolver with the given configuration pre-applied.

    Args:
        config: PointerConfig or mapping of its fields (aliases accepted)
        cache: Compile cache owned by the new resolver; a fresh one by default
        options: Individual configuration fields, applied over `config`

    Returns:
        Resolver: callable as a Pointer constructor, exposing
        `evaluate`, `compile` and `tokenize`
    """
    resolved: PointerConfig = PointerConfig.coerce(config).merge(options or None)
    return Resolver(resolved, cache)


class Pointer:
    """
    Immutable pointer string with an optional bound configuration.

    Attributes:
        pointer: The pointer string as given
        config: Effective configuration (resolver's, merged with the pointer's)
        resolver: Resolver used for tokenizing and evaluation
    """

    __slots__ = ("_pointer", "_config", "_resolver")

    def __init__(
        self: Self,
        pointer: str,
        config: ConfigLike = None,
        resolver: Optional[Resolver] = None,
    ) -> None:
        """
        Initialize the pointer, tokenizing it eagerly.

        Raises:
            PointerSyntaxError: If `pointer` cannot be tokenized
        """
        owner: Resolver = resolver if resolver is not None else JSONPointer
        self._pointer: str = pointer
        self._config: PointerConfig = owner.configure(config)
        self._resolver: Resolver = owner
        owner.tokens(pointer, self._config)

    @property
    def pointer(self: Self) -> str:
        return self._pointer

    @property
    def config(self: Self) -> PointerConfig:
        return self._config

    @property
    def resolver(self: Self) -> Resolver:
        return self._resolver

    @property
    def tokens(self: Self) -> list[str]:
        """Decoded reference tokens of this pointer."""
        return self._resolver.tokenize(self._pointer, self._config)

    def compile(self: Self) -> CompiledPointer:
        return self._resolver.compile(self._pointer, self._config)

    def evaluate(self: Self, doc: Any) -> Any:
        """Resolve this pointer against `doc`."""
        return self._resolver.evaluate(self._pointer, doc, self._config)

    def __str__(self: Self) -> str:
        return self._pointer

    def __repr__(self: Self) -> str:
        return f"Pointer({self._pointer!r}, delimiter={self._config.delimiter!r})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Pointer):
            return NotImplemented
        return (self._pointer, self._config.delimiter) == (
            other._pointer,
            other._config.delimiter,
        )

    def __hash__(self: Self) -> int:
        return hash((self._pointer, self._config.delimiter))


# Default resolver: delimiter "/", strict mode
JSONPointer: Final[Resolver] = Factory()


def evaluate(pointer: str, doc: Any, config: ConfigLike = None) -> Any:
    """Resolve `pointer` against `doc` with the default resolver."""
    return JSONPointer.evaluate(pointer, doc, config)


def tokenize(pointer: str, config: ConfigLike = None) -> list[str]:
    """Return the decoded reference tokens of `pointer`."""
    return JSONPointer.tokenize(pointer, config)


def compile(pointer: str, config: ConfigLike = None) -> CompiledPointer:
    """Bind `pointer` into a reusable `fn(doc) -> value`."""
    return JSONPointer.compile(pointer, config)
