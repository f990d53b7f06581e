"""
Naming Operators

Operators that apply names coming from external tools to Blender objects
through the Name Bridge identity synchronizer. Every rename keeps the
object's label equal to the identifier Blender actually committed.

Operators:
- Rename the active object (exact name, or first free variant)
- Rename an object looked up by its identifier
- Preview the free identifier for the requested name
- Re-sync labels of the selected objects to their identifiers
- Rename the selection from a bracketed name list
- Apply a T/R/S transform text to the active object
"""

import math

import bpy
from bpy.types import Operator

from ..core.list_parse import describe_length_mismatch, parse_list
from ..core.synchronizer import IdentitySynchronizer
from ..core.transform_text import parse_transform_text
from ..prefs import naming_config_from_prefs
from ..scene.naming_host import BlenderNamingHost, default_scope, find_object_by_name


def _synchronizer(context) -> IdentitySynchronizer:
    return IdentitySynchronizer(BlenderNamingHost(), naming_config_from_prefs(context))


def _state(context):
    return getattr(context.window_manager, "name_bridge", None)


def _rename_and_report(op, context, obj, st):
    sync = _synchronizer(context)
    before = obj.name
    try:
        if st.use_free_name:
            result = sync.rename_to_free_identifier(obj, st.requested_name, default_scope())
        else:
            result = sync.rename(obj, st.requested_name, default_scope())
    except ValueError as ex:
        op.report({'ERROR'}, str(ex))
        return {'CANCELLED'}

    if result == before:
        op.report({'WARNING'}, f"Name unchanged: '{before}'")
        return {'CANCELLED'}
    op.report({'INFO'}, f"Renamed '{before}' to '{result}'")
    return {'FINISHED'}


class NB_OT_rename_active(Operator):
    bl_idname = "name_bridge.rename_active"
    bl_label = "Rename Active"
    bl_description = "Rename the active object and set its label to the resulting identifier"
    bl_options = {'REGISTER', 'UNDO'}

    @classmethod
    def poll(cls, context):
        return context.active_object is not None

    def execute(self, context):
        st = _state(context)
        if st is None:
            self.report({'ERROR'}, "Name Bridge state is unavailable")
            return {'CANCELLED'}
        return _rename_and_report(self, context, context.active_object, st)


class NB_OT_rename_named(Operator):
    bl_idname = "name_bridge.rename_named"
    bl_label = "Rename Named"
    bl_description = "Find an object by its identifier and rename it to the requested name"
    bl_options = {'REGISTER', 'UNDO'}

    def execute(self, context):
        st = _state(context)
        if st is None:
            self.report({'ERROR'}, "Name Bridge state is unavailable")
            return {'CANCELLED'}
        obj = find_object_by_name((st.target_name or "").strip(), default_scope())
        if obj is None:
            self.report({'ERROR'}, f"No object named '{st.target_name}'")
            return {'CANCELLED'}
        return _rename_and_report(self, context, obj, st)


class NB_OT_preview_free_name(Operator):
    bl_idname = "name_bridge.preview_free_name"
    bl_label = "Preview Free Name"
    bl_description = "Show the first unused identifier based on the requested name"
    bl_options = {'INTERNAL'}

    def execute(self, context):
        st = _state(context)
        if st is None:
            self.report({'ERROR'}, "Name Bridge state is unavailable")
            return {'CANCELLED'}
        try:
            st.preview_name = _synchronizer(context).reserve_free_identifier(st.requested_name, default_scope())
        except ValueError as ex:
            self.report({'ERROR'}, str(ex))
            return {'CANCELLED'}
        return {'FINISHED'}


class NB_OT_sync_labels(Operator):
    bl_idname = "name_bridge.sync_labels"
    bl_label = "Sync Labels"
    bl_description = "Set the label of each selected object to its identifier"
    bl_options = {'REGISTER', 'UNDO'}

    @classmethod
    def poll(cls, context):
        return bool(context.selected_objects)

    def execute(self, context):
        sync = _synchronizer(context)
        changed = 0
        for obj in context.selected_objects:
            if not sync.identity_of(obj).is_synced:
                sync.sync_label(obj)
                changed += 1
        self.report({'INFO'}, f"Synced {changed} label(s)")
        return {'FINISHED'}


class NB_OT_rename_from_list(Operator):
    bl_idname = "name_bridge.rename_from_list"
    bl_label = "Rename From List"
    bl_description = "Rename the selected objects (sorted by name) from a bracketed name list"
    bl_options = {'REGISTER', 'UNDO'}

    @classmethod
    def poll(cls, context):
        return bool(context.selected_objects)

    def execute(self, context):
        st = _state(context)
        if st is None:
            self.report({'ERROR'}, "Name Bridge state is unavailable")
            return {'CANCELLED'}
        names = parse_list((st.name_list or "").strip())
        if not names:
            self.report({'WARNING'}, "Name list is empty")
            return {'CANCELLED'}

        objects = sorted(context.selected_objects, key=lambda o: o.name)
        mismatch = describe_length_mismatch(len(names), len(objects))
        if mismatch:
            self.report({'WARNING'}, mismatch)

        sync = _synchronizer(context)
        scope = default_scope()
        renamed = 0
        unchanged = []
        for obj, name in zip(objects, names):
            before = obj.name
            if sync.rename(obj, name, scope) != before:
                renamed += 1
            else:
                unchanged.append(before)

        if unchanged:
            preview = ", ".join(unchanged[:5])
            if len(unchanged) > 5:
                preview += ", ..."
            self.report({'WARNING'}, f"Unchanged: {preview}")
        self.report({'INFO'}, f"Renamed {renamed} object(s)")
        return {'FINISHED'}


class NB_OT_apply_transform_text(Operator):
    bl_idname = "name_bridge.apply_transform_text"
    bl_label = "Apply Transform Text"
    bl_description = "Set the active object's local location, rotation (degrees) and scale from T/R/S text"
    bl_options = {'REGISTER', 'UNDO'}

    @classmethod
    def poll(cls, context):
        return context.active_object is not None

    def execute(self, context):
        st = _state(context)
        if st is None:
            self.report({'ERROR'}, "Name Bridge state is unavailable")
            return {'CANCELLED'}
        try:
            parsed = parse_transform_text(st.transform_text)
        except ValueError as ex:
            self.report({'ERROR'}, str(ex))
            return {'CANCELLED'}
        if parsed.is_empty:
            self.report({'WARNING'}, "No T=, R= or S= block found")
            return {'CANCELLED'}

        obj = context.active_object
        if parsed.translation is not None:
            obj.location = parsed.translation
        if parsed.rotation is not None:
            obj.rotation_euler = tuple(math.radians(v) for v in parsed.rotation)
        if parsed.scale is not None:
            obj.scale = parsed.scale
        return {'FINISHED'}


__all__ = [
    "NB_OT_rename_active",
    "NB_OT_rename_named",
    "NB_OT_preview_free_name",
    "NB_OT_sync_labels",
    "NB_OT_rename_from_list",
    "NB_OT_apply_transform_text",
]
