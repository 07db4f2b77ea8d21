"""
settings.py

This module provides process-wide configuration for the docpointer package.

Features:
- Centralized configuration using Pydantic settings
- Environment overrides with the DOCPTR_ prefix
- Limits that bound the work a single pointer may cause

Per-resolver behavior (delimiter, strictness, default value, custom token
evaluator) is NOT configured here: that lives in PointerConfig, which is
bound to each Resolver instance. The settings below only govern ambient
concerns shared by every resolver in the process.

Usage:
Import appsettings and read values at call time, so that tests and hosts
can adjust them after import.

Environment:
- Set `DOCPTR_BEQUIET=false` to enable debug logging to stderr.
- Set `DOCPTR_MAXTOKENS=64` to reject pointers deeper than 64 tokens.
"""

from typing import Final, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with DOCPTR_ prefix.

    Attributes:
        beQuiet: Suppress debug logging output
        logLevel: Level at which the stderr sink is attached
        cacheSize: Maximum number of tokenized pointers memoized per resolver.
            None means unbounded, 0 disables memoization.
        maxTokens: Reject pointers with more tokens than this. 0 means no cap.
    """

    beQuiet: bool = True
    logLevel: str = "DEBUG"

    cacheSize: Optional[int] = Field(default=4096, ge=0)
    maxTokens: int = Field(default=0, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="DOCPTR_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        validate_assignment=True,
    )


# Create the application settings instance
appsettings: Final[App] = App()
