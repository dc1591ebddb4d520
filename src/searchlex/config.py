"""ContextVar-based tokenizer configuration for searchlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Set once by the surrounding request handling, read by every Tokenizer created
in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Default behavior
    tokens = tokenize('foo AND "bar baz"')

    # Explicit config for one call
    tokens = tokenize("( foo )", config=TokenizerConfig(allow_whitespace_after_open=True))

    # Or use the context manager
    with tokenizer_config_context(TokenizerConfig(drop_fallback_char=True)):
        tokens = tokenize("NOx")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        drop_fallback_char: When a partial keyword ("N", "NO", " O", " AN", ...)
            turns out to be the start of an ordinary word, consume the
            character that broke the match instead of adding it to the word.
            Reproduces the token stream of older tokenizers ("NOx" -> WORD "NO").
        allow_whitespace_after_open: Accept optional whitespace directly after
            "(" as the BWS grammar rule permits. Off by default, where "( foo"
            is rejected.

    """

    drop_fallback_char: bool = False
    allow_whitespace_after_open: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TokenizerConfig":
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TokenizerConfig attribute names.

        Returns:
            New TokenizerConfig instance with values from dict.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "allow_whitespace_after_open": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.allow_whitespace_after_open
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get current tokenizer configuration (thread-local).

    Returns:
        The active TokenizerConfig for this thread/context.

    """
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for current context.

    Args:
        config: TokenizerConfig instance to use for this context.

    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TokenizerConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
