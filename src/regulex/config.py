"""ContextVar-based scan configuration for regulex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A MatchEngine built without an explicit config reads the active one on every
call, so one registry can be scanned under different settings per context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    set_scan_config(ScanConfig(ignore_empty_matches=True))
    try:
        tokens = list(engine.tokenize(source))
    finally:
        reset_scan_config()

    # Or use the context manager
    with scan_config_context(ScanConfig(collect_skipped=False)):
        tokens = list(engine.tokenize(source))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        ignore_empty_matches: Treat a zero-width match as "no match" for that
            definition instead of raising EmptyMatchError
        collect_skipped: Attach consumed skip tokens to the next significant
            token. When False they are consumed and dropped.

    """

    ignore_empty_matches: bool = False
    collect_skipped: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "collect_skipped": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.collect_skipped
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(ignore_empty_matches=True)):
        ...     tokens = list(engine.tokenize("a b"))
        >>> # Previous config is active again

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
