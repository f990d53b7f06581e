"""Immutable naming configuration passed into the Name Bridge core."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .env_config import setting, setting_bool, setting_int
from .identifier import DEFAULT_SEPARATOR
from .sanitize import FALLBACK_NAME, INVALID_NAME_CHARACTERS, RESERVED_EMPTY_NAME, is_reserved_empty


DEFAULT_MAX_COMMIT_ATTEMPTS = 3


@dataclass(frozen=True)
class NamingConfig:
    """Character rules and retry policy for one naming session."""

    illegal_characters: str = INVALID_NAME_CHARACTERS
    fallback_name: str = FALLBACK_NAME
    reserved_empty_name: str = RESERVED_EMPTY_NAME
    suffix_separator: str = DEFAULT_SEPARATOR
    max_commit_attempts: int = DEFAULT_MAX_COMMIT_ATTEMPTS
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.fallback_name:
            raise ValueError("fallback_name must not be empty")
        if any(ch in self.illegal_characters for ch in self.fallback_name):
            raise ValueError("fallback_name contains illegal characters")
        if is_reserved_empty(self.fallback_name, self.reserved_empty_name):
            raise ValueError(f"fallback_name must differ from the reserved name '{self.reserved_empty_name}'")
        if any(ch in self.illegal_characters for ch in self.suffix_separator):
            raise ValueError("suffix_separator contains illegal characters")
        if self.max_commit_attempts < 1:
            raise ValueError("max_commit_attempts must be at least 1")

    def with_overrides(self, **changes) -> "NamingConfig":
        return replace(self, **changes)


def load_naming_config(base: NamingConfig | None = None) -> NamingConfig:
    """Build a NamingConfig from NAME_BRIDGE_* settings.

    Unset or invalid values keep the defaults from `base`.
    """
    cfg = base or NamingConfig()
    attempts = setting_int("MAX_COMMIT_ATTEMPTS", cfg.max_commit_attempts)
    changes = {
        "illegal_characters": setting("ILLEGAL_CHARS", cfg.illegal_characters),
        "fallback_name": setting("FALLBACK_NAME", cfg.fallback_name).strip() or cfg.fallback_name,
        "suffix_separator": setting("SUFFIX_SEPARATOR", cfg.suffix_separator),
        "max_commit_attempts": attempts if attempts >= 1 else cfg.max_commit_attempts,
        "debug": setting_bool("DEBUG", cfg.debug),
    }
    try:
        return cfg.with_overrides(**changes)
    except ValueError:
        # An override broke the name rules; keep the defaults for them.
        changes["fallback_name"] = cfg.fallback_name
        changes["illegal_characters"] = cfg.illegal_characters
        changes["suffix_separator"] = cfg.suffix_separator
        return cfg.with_overrides(**changes)


__all__ = [
    "DEFAULT_MAX_COMMIT_ATTEMPTS",
    "NamingConfig",
    "load_naming_config",
]
