"""ContextVar-based configuration for Frontlet.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Lexers and parsers read the active config when they are constructed, so
a config set around a block of work applies to everything created inside it.

Usage:
    from frontlet.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(strict_comments=True)):
        tokens = tokenize("a /* never closed")  # raises UnterminatedCommentError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable scan/parse configuration.

    Attributes:
        strict_comments: Raise UnterminatedCommentError for a ``/*`` comment
            that reaches end of input instead of silently consuming it.
        max_depth: Maximum recursion depth of a recursive-descent parser
            before NestingTooDeepError is raised.

    """

    strict_comments: bool = False
    max_depth: int = 200

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({"max_depth": 64, "other": 1})
            >>> config.max_depth
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "frontlet_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_depth=10)):
        ...     get_parse_config().max_depth
        10

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
