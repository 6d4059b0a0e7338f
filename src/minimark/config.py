"""ContextVar-based scan configuration for minimark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from minimark.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(header_sigil="=")):
        tokens = minimark.scan("== Title")

    # Or pass it explicitly
    scanner = Scanner("notes", source, config=ScanConfig(max_header_level=3))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from minimark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scanner configuration.

    Attributes:
        header_sigil: Marker that starts a header when found at a paragraph
            boundary; repeated to form the marker run
        paragraph_separator: Text that ends a paragraph
        header_whitespace: Characters skipped between marker and header text
        max_header_level: Longest accepted marker run (in sigils); longer runs
            produce an ERROR token. None accepts any length.

    """

    header_sigil: str = "#"
    paragraph_separator: str = "\n\n"
    header_whitespace: str = " \t"
    max_header_level: int | None = None

    def __post_init__(self) -> None:
        if not self.header_sigil:
            raise ConfigError("header_sigil", "must not be empty")
        if self.header_sigil[0] in "\n" + self.header_whitespace:
            raise ConfigError(
                "header_sigil", "must not start with a newline or header whitespace"
            )
        if not self.paragraph_separator:
            raise ConfigError("paragraph_separator", "must not be empty")
        if "\n" in self.header_whitespace:
            raise ConfigError("header_whitespace", "must not contain a newline")
        if self.max_header_level is not None and self.max_header_level < 1:
            raise ConfigError(
                "max_header_level", f"must be positive, got {self.max_header_level}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"max_header_level": 6, "extra": 1}).max_header_level
            6

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
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.
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
