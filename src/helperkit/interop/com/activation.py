"""
Resolve running COM server instances by ProgID.
"""

import sys
from types import ModuleType
from typing import Any

from ...exceptions import (
    ComObjectNotFoundError,
    InteropUnavailableError,
    InvalidArgumentError,
)
from ...logging import get_logger

logger = get_logger(__name__)


def _import_comtypes_client() -> ModuleType:
    if sys.platform != "win32":
        raise InteropUnavailableError(f"platform '{sys.platform}' has no COM runtime")
    try:
        import comtypes.client
    except ImportError as e:
        raise InteropUnavailableError("the 'comtypes' package is not installed") from e
    return comtypes.client


def get_active_object(prog_id: str) -> Any:
    """Return the running instance registered for ``prog_id``.

    The ProgID is resolved to its CLSID and looked up in the running object
    table; the result is a late-bound dispatch object.

    Raises:
        InvalidArgumentError: If ``prog_id`` is empty
        ComObjectNotFoundError: If the ProgID is unknown or no instance is running
        InteropUnavailableError: If COM is not available on this platform
    """
    if not prog_id:
        raise InvalidArgumentError("prog_id", "ProgID cannot be None or empty")

    client = _import_comtypes_client()
    try:
        instance = client.GetActiveObject(prog_id, dynamic=True)
    except OSError as e:
        logger.error(f"No active COM instance for {prog_id}", error=str(e))
        raise ComObjectNotFoundError(prog_id, str(e)) from e

    logger.debug(f"Attached to running COM instance for {prog_id}")
    return instance
