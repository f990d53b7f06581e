"""
Blender Naming Host

Binds the Name Bridge core to Blender ID datablocks. Blender objects carry a
single unique `name`; the user-facing label lives in an ID custom property so
names sent from other applications can keep their original spelling next to
the sanitized identifier.

- Scope: any bpy collection of IDs (`bpy.data.objects` by default).
- Atomic rename: `ID.rename(name, mode='NEVER')`, which never renames the
  other holder of a colliding name and lets Blender adjust ours instead.
- Linked (library) data is read-only and always refuses a rename.
"""

from __future__ import annotations

from typing import Any, Optional


LABEL_PROP = "name_bridge_label"

_REFUSED_STATUSES = {"UNCHANGED", "UNCHANGED_COLLISION"}


def default_scope():
    import bpy  # local import so the host can be unit-tested outside Blender

    return bpy.data.objects


def find_object_by_name(name: str, scope=None) -> Optional[Any]:
    """Return the ID called name in scope, or None when missing or invalid."""
    if not name:
        return None
    collection = scope if scope is not None else default_scope()
    found = collection.get(name)
    if found is None:
        return None
    try:
        # Accessing a removed ID raises ReferenceError.
        found.name
    except ReferenceError:
        return None
    return found


class BlenderNamingHost:
    """NamingHost implementation over bpy ID datablocks."""

    def get_identifier(self, obj) -> str:
        return obj.name

    def get_label(self, obj) -> str:
        label = obj.get(LABEL_PROP)
        return str(label) if label is not None else obj.name

    def set_label(self, obj, text: str) -> None:
        obj[LABEL_PROP] = text

    def exists(self, identifier: str, scope) -> bool:
        return scope.get(identifier) is not None

    def try_commit_identifier(self, obj, candidate: str) -> Optional[str]:
        if getattr(obj, "library", None) is not None:
            return None
        status = obj.rename(candidate, mode='NEVER')
        if status in _REFUSED_STATUSES:
            return None
        return obj.name


__all__ = [
    "LABEL_PROP",
    "default_scope",
    "find_object_by_name",
    "BlenderNamingHost",
]
