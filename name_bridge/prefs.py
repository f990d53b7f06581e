"""
Addon Preferences and Configuration

This module defines the Name Bridge addon preferences. They let a studio
tighten the identifier character rules, pick the fallback name used for names
that sanitize to "no name", and tune the free-name retry policy.

Preferences are layered over the NAME_BRIDGE_* environment settings read by
`core.config.load_naming_config`; a value set here wins.
"""

import bpy
from bpy.types import AddonPreferences
from bpy.props import StringProperty, IntProperty, BoolProperty

from .core.config import DEFAULT_MAX_COMMIT_ATTEMPTS, NamingConfig, load_naming_config
from .core.sanitize import FALLBACK_NAME


ADDON_PKG = __package__


class NameBridgePrefs(AddonPreferences):
    bl_idname = ADDON_PKG

    extra_illegal_characters: StringProperty(
        name="Extra Illegal Characters",
        default="",
        description="Characters stripped from incoming names on top of the built-in set",
    )
    fallback_name: StringProperty(
        name="Fallback Name",
        default=FALLBACK_NAME,
        description="Identifier used when an incoming name means 'no name'",
    )
    suffix_separator: StringProperty(
        name="Suffix Separator",
        default="_",
        maxlen=4,
        description="Separator placed before numeric suffixes of free names",
    )
    max_commit_attempts: IntProperty(
        name="Commit Attempts",
        default=DEFAULT_MAX_COMMIT_ATTEMPTS,
        min=1,
        max=20,
        description="How often a free-name rename re-searches after the host refuses it",
    )
    debug_logging: BoolProperty(
        name="Debug Logging",
        default=False,
        description="Print naming diagnostics to the system console",
    )

    def draw(self, context):
        layout = self.layout
        col = layout.column()
        col.prop(self, "extra_illegal_characters")
        col.prop(self, "fallback_name")
        col.prop(self, "suffix_separator")
        col.separator()
        col.prop(self, "max_commit_attempts")
        col.prop(self, "debug_logging")


def naming_config_from_prefs(context) -> NamingConfig:
    """Return the environment config with addon preferences applied on top."""
    base = load_naming_config()
    addon = context.preferences.addons.get(ADDON_PKG)
    prefs = getattr(addon, "preferences", None)
    if prefs is None:
        return base
    try:
        return base.with_overrides(
            illegal_characters=base.illegal_characters + (prefs.extra_illegal_characters or ""),
            fallback_name=(prefs.fallback_name or "").strip() or base.fallback_name,
            suffix_separator=prefs.suffix_separator or base.suffix_separator,
            max_commit_attempts=int(prefs.max_commit_attempts),
            debug=bool(prefs.debug_logging) or base.debug,
        )
    except ValueError as ex:
        print(f"[Name Bridge] Ignoring invalid preferences: {ex}")
        return base


__all__ = ["NameBridgePrefs", "naming_config_from_prefs"]
