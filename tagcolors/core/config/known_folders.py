"""Windows known-folder lookup.

Only `local_app_data_path()` is meant to be called, and only on Windows. The
shell32/ole32 handles can be injected so the buffer handling is testable on
any platform.
"""

from __future__ import annotations

import ctypes
import logging
import uuid
from typing import Any, Optional


logger = logging.getLogger(__name__)

FOLDERID_LOCAL_APP_DATA = uuid.UUID("{F1B32785-6FBA-4FCF-9D55-7B8E7F157091}")

S_OK = 0


class GUID(ctypes.Structure):
    _fields_ = [
        ("Data1", ctypes.c_uint32),
        ("Data2", ctypes.c_uint16),
        ("Data3", ctypes.c_uint16),
        ("Data4", ctypes.c_ubyte * 8),
    ]

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "GUID":
        return cls.from_buffer_copy(value.bytes_le)


def known_folder_path(folder_id: uuid.UUID, *, shell32: Any = None, ole32: Any = None) -> Optional[str]:
    """Return the path of a known folder, or None if the query fails.

    The buffer allocated by SHGetKnownFolderPath is freed with CoTaskMemFree on
    every path out of this function, including failures.
    """

    if shell32 is None:
        shell32 = ctypes.windll.shell32  # type: ignore[attr-defined]
    if ole32 is None:
        ole32 = ctypes.windll.ole32  # type: ignore[attr-defined]

    guid = GUID.from_uuid(folder_id)
    buffer = ctypes.c_void_p()
    try:
        result = shell32.SHGetKnownFolderPath(ctypes.byref(guid), 0, None, ctypes.byref(buffer))
        if result != S_OK or not buffer.value:
            logger.debug("SHGetKnownFolderPath(%s) failed: 0x%08x", folder_id, result & 0xFFFFFFFF)
            return None
        return ctypes.wstring_at(buffer.value)
    finally:
        ole32.CoTaskMemFree(buffer)


def local_app_data_path(*, shell32: Any = None, ole32: Any = None) -> Optional[str]:
    return known_folder_path(FOLDERID_LOCAL_APP_DATA, shell32=shell32, ole32=ole32) or None
