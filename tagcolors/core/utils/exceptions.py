from __future__ import annotations

import errno as _errno


def is_file_missing(exc: BaseException) -> bool:
    """Best-effort check for a file or directory that does not exist."""

    if isinstance(exc, FileNotFoundError):
        return True

    return getattr(exc, "errno", None) in (_errno.ENOENT, _errno.ENOTDIR)


def is_permission_denied(exc: BaseException) -> bool:
    """Best-effort check for permission/authorization failures.

    Reads can fail with PermissionError, or with a plain OSError carrying
    EPERM/EACCES when raised from lower layers.
    """

    if isinstance(exc, PermissionError):
        return True

    if getattr(exc, "errno", None) in (_errno.EPERM, _errno.EACCES):
        return True

    try:
        msg = str(exc).lower()
    except Exception:
        return False

    return "permission denied" in msg or "access denied" in msg
