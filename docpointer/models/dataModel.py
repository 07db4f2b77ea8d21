"""
dataModel.py

This module defines the data models used throughout docpointer.
The models leverage Pydantic for validation and type safety.

Features:
- PointerConfig: per-resolver configuration (delimiter, strictness,
  default value, custom token evaluator)
- MISSING: sentinel an evaluator returns when a token does not resolve
- UNSET: sentinel for an argument the caller did not pass
- DelimiterToken: marker token for the pointer made of the delimiter alone
- TokenEvaluator: protocol every per-token evaluation strategy satisfies

Usage:
Import these models to configure resolvers or to write custom evaluators.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Callable, Mapping, Optional, Protocol, Self, Union
from enum import Enum


class Sentinel(Enum):
    """
    Enum for marker values that can never occur in a document.
    """

    MISSING = 1
    UNSET = 2

    def __repr__(self: Self) -> str:
        return self.name


MISSING = Sentinel.MISSING
UNSET = Sentinel.UNSET


class DelimiterToken(str):
    """
    Token produced for a pointer consisting of the delimiter alone.

    It compares equal to the delimiter string, but evaluators recognise its
    type and resolve it to the member whose key is the empty string. A plain
    str token with the same text (e.g. "/~1" decoded to "/") stays an
    ordinary key.
    """

    def __repr__(self: Self) -> str:
        return f"DelimiterToken({str.__repr__(self)})"


class PointerConfig(BaseModel):
    """
    Configuration applied uniformly to every token evaluated by a resolver.

    Fields accept their snake_case name or the camelCase alias
    (`defaultValue`, `evaluateToken`).

    Attributes:
        delimiter (str): Separator between reference tokens.
        strict (bool): Raise MissingReferenceError on a miss instead of
            returning `default_value`.
        default_value (Any): Value returned on a miss in non-strict mode.
        evaluate_token (Optional[Callable]): Custom TokenEvaluator. None
            selects the built-in evaluator.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    delimiter: str = Field(default="/", min_length=1, description="Token separator.")
    strict: bool = Field(default=True, description="Raise on a missing reference.")
    default_value: Any = Field(
        default=None,
        alias="defaultValue",
        description="Value returned for a miss in non-strict mode.",
    )
    evaluate_token: Optional[Callable[..., Any]] = Field(
        default=None,
        alias="evaluateToken",
        description="Custom per-token evaluator.",
    )

    @classmethod
    def coerce(
        cls, config: Union["PointerConfig", Mapping[str, Any], None]
    ) -> "PointerConfig":
        """Build a configuration from a PointerConfig, a mapping or None."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        return cls.model_validate(dict(config))

    def merge(
        self: Self, overrides: Union["PointerConfig", Mapping[str, Any], None]
    ) -> "PointerConfig":
        """
        Return a configuration with the explicitly set fields of `overrides`
        applied on top of this one.

        Args:
            overrides: Per-call configuration; fields it leaves unset keep
                their value from this configuration.

        Returns:
            PointerConfig: self when there is nothing to override, otherwise
            a new configuration.
        """
        if overrides is None:
            return self
        override = type(self).coerce(overrides)
        if not override.model_fields_set:
            return self
        values: dict[str, Any] = {
            name: getattr(self, name) for name in type(self).model_fields
        }
        values.update(
            {name: getattr(override, name) for name in override.model_fields_set}
        )
        return type(self).model_validate(values)


class TokenEvaluator(Protocol):
    """
    Protocol defining a per-token evaluation strategy.

    An evaluator receives one reference token, the resolver configuration and
    the current node, and returns the next node. A token that does not
    resolve returns MISSING; the walking loop then applies the strict /
    default-value policy of the configuration.
    """

    def __call__(self, token: str, config: PointerConfig, node: Any) -> Any: ...
