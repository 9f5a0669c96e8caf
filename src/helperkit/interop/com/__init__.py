"""COM reflection and activation helpers."""

from .activation import get_active_object
from .inspector import ComInspector, InspectionDepth, ObjectIdentifier

__all__ = [
    "ComInspector",
    "InspectionDepth",
    "ObjectIdentifier",
    "get_active_object",
]
