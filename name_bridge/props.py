"""
Name Bridge UI State

WindowManager property group holding the text fields the Name Bridge panel
edits: the requested name, the previewed free name, and the list and
transform strings pasted from external tools.
"""

import bpy
from bpy.types import PropertyGroup
from bpy.props import StringProperty, BoolProperty, PointerProperty


class NameBridgeState(PropertyGroup):
    requested_name: StringProperty(
        name="Name",
        default="",
        description="Name to apply to the active object (illegal characters are stripped)",
    )
    target_name: StringProperty(
        name="Target",
        default="",
        description="Identifier of the object to rename when it is not the active one",
    )
    use_free_name: BoolProperty(
        name="Find Free Name",
        default=False,
        description="Append or bump a numeric suffix when the name is already taken",
    )
    preview_name: StringProperty(
        name="Preview",
        default="",
        description="Free identifier found for the requested name",
    )
    name_list: StringProperty(
        name="Name List",
        default="",
        description="Bracketed list such as [Chair,Table,Lamp] applied to the selection in name order",
    )
    transform_text: StringProperty(
        name="Transform",
        default="",
        description="Transform text such as T=(0 0 1) R=(0 90 0) S=(1 1 1)",
    )


def register():
    bpy.utils.register_class(NameBridgeState)
    bpy.types.WindowManager.name_bridge = PointerProperty(type=NameBridgeState)


def unregister():
    try:
        del bpy.types.WindowManager.name_bridge
    except AttributeError:
        pass
    bpy.utils.unregister_class(NameBridgeState)
