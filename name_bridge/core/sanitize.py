"""Identifier sanitization for Name Bridge.

Names arriving from other authoring applications may contain characters the
host refuses in object identifiers. This module strips them and maps names
that would read as "no name" to a fallback token. It is Blender-agnostic so it
can be unit-tested outside Blender.
"""

from __future__ import annotations

from typing import Iterable


# Characters the host never accepts in an object identifier.
INVALID_NAME_CHARACTERS = "\"' ,/.:|&!~\n\r\t@#(){}[]=;^%$`"

# Textual form the host uses for "no identifier".
RESERVED_EMPTY_NAME = "None"

FALLBACK_NAME = "GeneratedName"


def sanitize_name(raw: str, illegal: Iterable[str] = INVALID_NAME_CHARACTERS) -> str:
    """Remove every illegal character from raw, keeping the order of the rest."""
    banned = set(illegal)
    return "".join(ch for ch in str(raw or "") if ch not in banned)


def is_reserved_empty(name: str, reserved: str = RESERVED_EMPTY_NAME) -> bool:
    """Return True if name is the reserved "no identifier" token.

    The host compares this token case-insensitively, so "none" counts too.
    """
    if not name or not reserved:
        return False
    return name.casefold() == reserved.casefold()


def prepare_candidate(raw: str, config=None) -> str:
    """Sanitize raw and substitute the fallback for the reserved token.

    Returns an empty string when nothing survives sanitization; callers treat
    that as "nothing to do".
    """
    illegal = getattr(config, "illegal_characters", INVALID_NAME_CHARACTERS)
    reserved = getattr(config, "reserved_empty_name", RESERVED_EMPTY_NAME)
    fallback = getattr(config, "fallback_name", FALLBACK_NAME)

    name = sanitize_name(raw, illegal)
    if not name:
        return ""
    if is_reserved_empty(name, reserved):
        return fallback
    return name


__all__ = [
    "INVALID_NAME_CHARACTERS",
    "RESERVED_EMPTY_NAME",
    "FALLBACK_NAME",
    "sanitize_name",
    "is_reserved_empty",
    "prepare_candidate",
]
