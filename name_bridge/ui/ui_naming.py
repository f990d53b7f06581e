"""
UI for Name Bridge.

Sidebar panel showing the active object's identifier and label, the rename
field, and the list/transform helpers.
"""

import bpy
from bpy.types import Panel

from ..scene.naming_host import BlenderNamingHost


CAT = "Name Bridge"


class NB_PT_naming(Panel):
    bl_space_type = 'VIEW_3D'
    bl_region_type = 'UI'
    bl_category = CAT
    bl_label = "Name Bridge"
    bl_idname = "NB_PT_naming"

    def draw(self, ctx):
        layout = self.layout
        st = getattr(ctx.window_manager, "name_bridge", None)
        if st is None:
            layout.label(text="Name Bridge state is unavailable.", icon='ERROR')
            return

        obj = ctx.active_object
        box = layout.box()
        if obj is None:
            box.label(text="No active object", icon='INFO')
        else:
            host = BlenderNamingHost()
            label = host.get_label(obj)
            box.label(text=f"ID: {obj.name}", icon='OBJECT_DATA')
            row = box.row()
            row.alert = label != obj.name
            row.label(text=f"Label: {label}", icon='SORTALPHA')

        col = layout.column(align=True)
        col.prop(st, "requested_name")
        col.prop(st, "use_free_name")
        row = col.row(align=True)
        row.operator("name_bridge.rename_active", icon='GREASEPENCIL')
        row.operator("name_bridge.preview_free_name", text="", icon='VIEWZOOM')
        if st.preview_name:
            col.label(text=f"Free: {st.preview_name}")

        row = layout.row(align=True)
        row.prop(st, "target_name")
        row.operator("name_bridge.rename_named", text="", icon='GREASEPENCIL')

        layout.operator("name_bridge.sync_labels", icon='FILE_REFRESH')

        box = layout.box()
        box.prop(st, "name_list")
        box.operator("name_bridge.rename_from_list", icon='LINENUMBERS_ON')

        box = layout.box()
        box.prop(st, "transform_text")
        box.operator("name_bridge.apply_transform_text", icon='ORIENTATION_LOCAL')


__all__ = [
    "NB_PT_naming",
]
