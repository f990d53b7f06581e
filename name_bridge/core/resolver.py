"""Uniqueness resolver for Name Bridge identifiers.

Searches numeric-suffix variants of a base identifier until the registry
reports no collision. The search is a read-only query: the returned name is
not reserved, so callers commit it through the host's atomic rename and retry
the search if the commit is refused.
"""

from __future__ import annotations

from typing import Any, Protocol

from .identifier import DEFAULT_SEPARATOR, Identifier


class RegistryLookup(Protocol):
    """Membership test answering "is this identifier taken in scope?"."""

    def exists(self, identifier: str, scope: Any) -> bool:
        ...


class ContainerLookup:
    """RegistryLookup over any scope supporting `in` (set, dict, bpy collections)."""

    def exists(self, identifier: str, scope: Any) -> bool:
        return identifier in scope


def find_free_identifier(
    base: str,
    scope: Any,
    lookup: RegistryLookup | None = None,
    *,
    separator: str = DEFAULT_SEPARATOR,
    debug: bool = False,
) -> str:
    """Return the first identifier derived from base that is free in scope.

    The search starts at base's own numeric suffix (0 when absent) and counts
    upwards, so "Chair_5" checks "Chair_5", "Chair_6", ... When base itself is
    free it is returned unchanged. Halts within len(scope) + 1 checks for a
    finite scope.
    """
    if not base:
        raise ValueError("Base identifier must be a non-empty sanitized name")
    if scope is None:
        raise ValueError("A scope is required to resolve a free identifier")
    registry = lookup if lookup is not None else ContainerLookup()

    candidate = Identifier.parse(base, separator)
    text = base
    checks = 1
    while registry.exists(text, scope):
        candidate = candidate.next()
        text = candidate.text
        checks += 1

    if debug:
        print(f"[Name Bridge] Free identifier for '{base}': '{text}' ({checks} check(s))")
    return text


__all__ = [
    "RegistryLookup",
    "ContainerLookup",
    "find_free_identifier",
]
