from .ui_naming import NB_PT_naming

__all__ = [
    "NB_PT_naming",
]
