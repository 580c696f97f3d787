"""ContextVar-based header configuration for bash-strict.

Holds the canonical declaration lines a normalized header is rebuilt from,
and the set of interpreters the linter accepts.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from bash_strict import normalize, parse
    from bash_strict.config import HeaderConfig, header_config_context

    with header_config_context(HeaderConfig(strict="set -euo pipefail")):
        text = normalize(parse(source))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from bash_strict.declarations import (
    EXT_DEBUG,
    IFS,
    LANGUAGES_SUPPORTED,
    SHEBANG,
    STRICT_SET,
)


@dataclass(frozen=True, slots=True)
class HeaderConfig:
    """Immutable header configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        shebang: Interpreter line emitted first
        strict: Strict-mode declaration line
        ifs: Field-separator assignment line
        shopt: Extended-debug declaration line
        supported_languages: Interpreter names the linter handles

    """

    shebang: str = SHEBANG
    strict: str = STRICT_SET
    ifs: str = IFS
    shopt: str = EXT_DEBUG
    supported_languages: frozenset[str] = LANGUAGES_SUPPORTED

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HeaderConfig":
        """Create HeaderConfig from dictionary.

        Only includes keys that are valid HeaderConfig fields; unknown keys
        are silently ignored. ``supported_languages`` may be any iterable of
        names.

        Example:
            >>> config = HeaderConfig.from_dict({"strict": "set -eu", "color": 1})
            >>> config.strict
            'set -eu'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "supported_languages" in filtered:
            filtered["supported_languages"] = frozenset(filtered["supported_languages"])
        return cls(**filtered)

    def header_lines(self, comments: tuple[str, ...] = ()) -> list[str]:
        """Canonical header lines with comments after the shebang."""
        return [self.shebang, *comments, "", self.strict, self.ifs, self.shopt, ""]


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HeaderConfig = HeaderConfig()

_header_config: ContextVar[HeaderConfig] = ContextVar(
    "header_config",
    default=_DEFAULT_CONFIG,
)


def get_header_config() -> HeaderConfig:
    """Get current header configuration (thread-local)."""
    return _header_config.get()


def set_header_config(config: HeaderConfig) -> None:
    """Set header configuration for current context.

    Args:
        config: HeaderConfig instance to use for this context.

    """
    _header_config.set(config)


def reset_header_config() -> None:
    """Reset to the default configuration."""
    _header_config.set(_DEFAULT_CONFIG)


@contextmanager
def header_config_context(config: HeaderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with header_config_context(HeaderConfig(shebang="#!/bin/bash")):
        ...     get_header_config().shebang
        '#!/bin/bash'

    """
    previous = _header_config.get()
    _header_config.set(config)
    try:
        yield
    finally:
        _header_config.set(previous)


__all__ = [
    "HeaderConfig",
    "get_header_config",
    "set_header_config",
    "reset_header_config",
    "header_config_context",
]
