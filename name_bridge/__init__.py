"""
Name Bridge - Blender Addon for Identifier/Label Synchronization

Names sent from other authoring applications follow different rules than
Blender identifiers. This addon sanitizes them, finds free variants when a
name is taken, and keeps each object's user-facing label equal to the
identifier Blender actually committed.

Main features:
- Rename with illegal-character stripping and fallback for empty names
- Free-name search by numeric suffix
- Label/identifier re-sync for selected objects
- Batch rename from bracketed name lists
- Transform text (T/R/S) application

UI Location: View3D > Sidebar (N) > Name Bridge
"""

bl_info = {
    "name": "Name Bridge",
    "author": "Name Bridge",
    "version": (0, 1, 0),
    "blender": (4, 5, 0),
    "location": "View3D > Sidebar (N) > Name Bridge",
    "description": "Keep object identifiers and labels in sync with names from external tools",
    "category": "Object",
}

import bpy

from .prefs import NameBridgePrefs
from .props import register as register_props, unregister as unregister_props
from .ops import (
    NB_OT_rename_active,
    NB_OT_rename_named,
    NB_OT_preview_free_name,
    NB_OT_sync_labels,
    NB_OT_rename_from_list,
    NB_OT_apply_transform_text,
)
from .ui import NB_PT_naming


CLASSES = (
    NameBridgePrefs,
    NB_OT_rename_active,
    NB_OT_rename_named,
    NB_OT_preview_free_name,
    NB_OT_sync_labels,
    NB_OT_rename_from_list,
    NB_OT_apply_transform_text,
    NB_PT_naming,
)

# Global list to track registered classes for proper cleanup
REGISTERED_CLASSES = []


def register():
    """Register Name Bridge properties and classes.

    Called automatically by Blender when the addon is enabled.
    """
    global REGISTERED_CLASSES
    print(f"[Name Bridge] Loading addon from: {__file__}")

    register_props()
    REGISTERED_CLASSES = []
    for cls in CLASSES:
        bpy.utils.register_class(cls)
        REGISTERED_CLASSES.append(cls)


def unregister():
    """Unregister classes in reverse order, then the property groups."""
    global REGISTERED_CLASSES
    for cls in reversed(REGISTERED_CLASSES):
        try:
            bpy.utils.unregister_class(cls)
        except RuntimeError:
            pass
    REGISTERED_CLASSES = []
    unregister_props()
