"""
Reflection over late-bound COM objects.

``ComInspector`` reads the type information an ``IDispatch`` object exposes
and reports its type name, interface identifier and member names. It accepts
comtypes ``IDispatch`` pointers, pywin32 dispatch wrappers (through their
``_oleobj_`` attribute) and anything else implementing ``GetTypeInfo``.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Protocol

from ...constants import LOCALE_USER_DEFAULT, MEMBER_ID_NIL
from ...logging import get_logger

NIL_IID = uuid.UUID(int=0)

logger = get_logger(__name__)


class TypeInfo(Protocol):
    """Subset of ``ITypeInfo`` used by the inspector."""

    def GetDocumentation(self, memid: int) -> tuple: ...

    def GetTypeAttr(self) -> Any: ...

    def GetFuncDesc(self, index: int) -> Any: ...

    def GetVarDesc(self, index: int) -> Any: ...


class InspectionDepth(str, Enum):
    """How much of an object's type information to read."""

    TYPE_ONLY = "type_only"
    TYPE_AND_IID = "type_and_iid"
    MEMBERS = "members"


@dataclass
class ObjectIdentifier:
    """Type name, IID and (optionally) member names of a COM object."""

    type_name: str = ""
    iid: uuid.UUID = NIL_IID
    methods: Optional[List[str]] = None
    properties: Optional[List[str]] = None


def _dispatch_of(com_object: Any) -> Optional[Any]:
    dispatch = getattr(com_object, "_oleobj_", com_object)
    if callable(getattr(dispatch, "GetTypeInfo", None)):
        return dispatch
    return None


def _iid_of(type_attr: Any) -> uuid.UUID:
    # comtypes exposes TYPEATTR.guid, pywin32 exposes PyTYPEATTR.iid
    guid = getattr(type_attr, "guid", None) or getattr(type_attr, "iid", None)
    if guid is None:
        return NIL_IID
    return uuid.UUID(str(guid))


def _member_name(type_info: TypeInfo, memid: int) -> str:
    return type_info.GetDocumentation(memid)[0]


class ComInspector:
    """Inspects COM objects for their type, IID, methods and properties."""

    def get_type_only(self, com_object: Any) -> ObjectIdentifier:
        return self.inspect(com_object, InspectionDepth.TYPE_ONLY)

    def get_type_and_iid(self, com_object: Any) -> ObjectIdentifier:
        return self.inspect(com_object, InspectionDepth.TYPE_AND_IID)

    def get_methods_and_properties(self, com_object: Any) -> ObjectIdentifier:
        return self.inspect(com_object, InspectionDepth.MEMBERS)

    def inspect(
        self, com_object: Any, depth: InspectionDepth = InspectionDepth.MEMBERS
    ) -> ObjectIdentifier:
        """Read type information from ``com_object`` down to ``depth``.

        ``None`` and objects without dispatch type information yield an empty
        ``ObjectIdentifier``. Errors raised by the COM runtime propagate.
        """
        identifier = ObjectIdentifier()
        if com_object is None:
            return identifier

        dispatch = _dispatch_of(com_object)
        if dispatch is None:
            logger.warning(
                "Object does not support IDispatch",
                object_type=type(com_object).__name__,
            )
            return identifier

        type_info: TypeInfo = dispatch.GetTypeInfo(LOCALE_USER_DEFAULT)
        identifier.type_name = _member_name(type_info, MEMBER_ID_NIL)
        if depth == InspectionDepth.TYPE_ONLY:
            return identifier

        type_attr = type_info.GetTypeAttr()
        identifier.iid = _iid_of(type_attr)
        if depth == InspectionDepth.TYPE_AND_IID:
            return identifier

        identifier.methods = self._list_methods(type_info, type_attr.cFuncs)
        identifier.properties = self._list_properties(type_info, type_attr.cVars)
        return identifier

    def _list_methods(self, type_info: TypeInfo, count: int) -> List[str]:
        methods = []
        for index in range(count):
            name = _member_name(type_info, type_info.GetFuncDesc(index).memid)
            logger.debug(f"Method: {name}")
            methods.append(name)
        return methods

    def _list_properties(self, type_info: TypeInfo, count: int) -> List[str]:
        properties = []
        for index in range(count):
            name = _member_name(type_info, type_info.GetVarDesc(index).memid)
            logger.debug(f"Property: {name}")
            properties.append(name)
        return properties
