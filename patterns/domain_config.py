"""Dataclass-based lending configuration.

The library's behaviour switches and logging settings live in a single
frozen dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values (sensible out-of-the-box)
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides (from env vars)
"""

import os
from dataclasses import dataclass

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class LendingConfig:
    """Complete configuration for the lending library.

    Usage::

        config = LendingConfig.from_env()
        library = LibraryAccess(config=config)
    """

    library_name: str = "Library"

    # Access control
    enforce_premium_access: bool = True

    # Notification stream
    event_log_level: str = "INFO"
    event_logger_name: str = "lending.events"

    @classmethod
    def default(cls) -> "LendingConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "LENDING_") -> "LendingConfig":
        """Create config from environment variables.

        Example: LENDING_ENFORCE_PREMIUM_ACCESS=false
        """
        overrides = {}

        name = os.getenv(f"{prefix}LIBRARY_NAME")
        if name:
            overrides["library_name"] = name

        enforce = os.getenv(f"{prefix}ENFORCE_PREMIUM_ACCESS")
        if enforce:
            overrides["enforce_premium_access"] = enforce.lower() in _TRUTHY

        level = os.getenv(f"{prefix}EVENT_LOG_LEVEL")
        if level:
            overrides["event_log_level"] = level.upper()

        logger_name = os.getenv(f"{prefix}EVENT_LOGGER_NAME")
        if logger_name:
            overrides["event_logger_name"] = logger_name

        return cls(**overrides)
