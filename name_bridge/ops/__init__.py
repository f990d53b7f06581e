"""
Name Bridge Operators Package

Operator classes exposing the naming core inside Blender: renames that keep
labels in sync with identifiers, free-name previews, and helpers for the list
and transform strings sent by external tools.
"""

from .ops_naming import (
    NB_OT_rename_active,
    NB_OT_rename_named,
    NB_OT_preview_free_name,
    NB_OT_sync_labels,
    NB_OT_rename_from_list,
    NB_OT_apply_transform_text,
)

__all__ = [
    "NB_OT_rename_active",
    "NB_OT_rename_named",
    "NB_OT_preview_free_name",
    "NB_OT_sync_labels",
    "NB_OT_rename_from_list",
    "NB_OT_apply_transform_text",
]
