# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for DDL generation and logging
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Generator and logging settings. Each group is a frozen dataclass whose
from_env() reads PGSCHEMA_* overrides; get_defaults() builds them once per
process and reset_defaults() forces a re-read.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class GeneratorDefaults:
    """
    Defaults for DDL generation.

    index_suffix is appended to derived index names:
        <table>_<columns...>_<index_suffix>
    """
    index_suffix: str = "idx"

    # Run model validation before generate_all() emits anything
    validate_before_generate: bool = True

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Create from environment variables."""
        return cls(
            index_suffix=os.getenv("PGSCHEMA_INDEX_SUFFIX", "idx"),
            validate_before_generate=_env_bool("PGSCHEMA_VALIDATE", True),
        )


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log output."""
    level: str = "INFO"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("PGSCHEMA_LOG_LEVEL", "INFO"),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json",
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    generator: GeneratorDefaults = field(default_factory=GeneratorDefaults)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            generator=GeneratorDefaults.from_env(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "GeneratorDefaults",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
