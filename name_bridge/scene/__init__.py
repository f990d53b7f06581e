"""
Scene Naming Utilities

This package binds the Blender-agnostic naming core to live Blender data:
name lookup, atomic renames and label storage on ID datablocks.
"""

from . import naming_host

__all__ = ["naming_host"]
