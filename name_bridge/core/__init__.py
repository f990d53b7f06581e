"""Core utilities for Name Bridge.

This package holds the Blender-agnostic naming logic: sanitization, free-name
search and the identifier/label synchronizer, plus the small text parsers used
by command handlers.
"""

from .sanitize import (
    INVALID_NAME_CHARACTERS,
    RESERVED_EMPTY_NAME,
    FALLBACK_NAME,
    sanitize_name,
    prepare_candidate,
)
from .identifier import Identifier
from .resolver import ContainerLookup, find_free_identifier
from .config import NamingConfig, load_naming_config
from .synchronizer import IdentitySynchronizer, SyncedIdentity
from .list_parse import parse_list
from .transform_text import TransformText, parse_transform_text

__all__ = [
    "INVALID_NAME_CHARACTERS",
    "RESERVED_EMPTY_NAME",
    "FALLBACK_NAME",
    "sanitize_name",
    "prepare_candidate",
    "Identifier",
    "ContainerLookup",
    "find_free_identifier",
    "NamingConfig",
    "load_naming_config",
    "IdentitySynchronizer",
    "SyncedIdentity",
    "parse_list",
    "TransformText",
    "parse_transform_text",
]
