"""Location of the per-user `.swift-testing` directory.

On Apple platforms and Linux the directory is `~/.swift-testing`. On Windows
it is `%LOCALAPPDATA%\\.swift-testing`. Elsewhere no location is known and the
resolved path is the empty string.
"""

from __future__ import annotations

import logging
import os
import posixpath
import sys
from enum import Enum
from typing import Optional

from . import known_folders


logger = logging.getLogger(__name__)

SWIFT_TESTING_DIRECTORY_NAME = ".swift-testing"

# Test hook / user override for the whole directory.
SWIFT_TESTING_DIR_ENV = "SWT_TESTING_DIR"


class HomePlatform(str, Enum):
    POSIX = "posix"
    WINDOWS = "windows"
    UNSUPPORTED = "unsupported"

    @property
    def separator(self) -> str:
        return "\\" if self is HomePlatform.WINDOWS else "/"


def detect_platform(platform: str | None = None, os_name: str | None = None) -> HomePlatform:
    platform = sys.platform if platform is None else platform
    os_name = os.name if os_name is None else os_name

    if platform == "win32" or os_name == "nt":
        return HomePlatform.WINDOWS
    if platform == "darwin" or platform.startswith("linux") or os_name == "posix":
        return HomePlatform.POSIX
    return HomePlatform.UNSUPPORTED


CURRENT_PLATFORM = detect_platform()


def _native_home_directory() -> Optional[str]:
    # expanduser turns an empty HOME into "/".
    if "HOME" in os.environ and not os.environ["HOME"]:
        return None
    home = posixpath.expanduser("~")
    if not home or home == "~":
        return None
    return home


def _home_from_environment() -> Optional[str]:
    return os.environ.get("HOME") or None


def _home_from_user_database() -> Optional[str]:
    try:
        import pwd

        return pwd.getpwuid(os.geteuid()).pw_dir or None
    except (ImportError, KeyError, AttributeError) as exc:
        logger.debug("No user database entry for the effective user: %s", exc)
        return None


def _posix_home_directory_path() -> Optional[str]:
    """Return the current user's home directory, if known.

    Priority:
    - the native home-directory lookup
    - HOME
    - the user database entry for the effective uid
    """

    for source in (_native_home_directory, _home_from_environment, _home_from_user_database):
        home = source()
        if home:
            return home
        logger.debug("Home directory source %s gave no result", source.__name__)
    return None


def _windows_app_data_directory_path() -> Optional[str]:
    try:
        return known_folders.local_app_data_path()
    except (OSError, AttributeError) as exc:
        logger.debug("Local app data lookup failed: %s", exc)
        return None


def _platform_home_path(platform: HomePlatform) -> Optional[str]:
    if platform is HomePlatform.POSIX:
        return _posix_home_directory_path()
    if platform is HomePlatform.WINDOWS:
        return _windows_app_data_directory_path()

    logger.debug("No %s location is known for platform %r", SWIFT_TESTING_DIRECTORY_NAME, sys.platform)
    return None


def resolve_config_directory_path(*, platform: HomePlatform | None = None) -> str:
    """Return the path to the user-specific `.swift-testing` directory.

    Returns "" when no home/app data directory could be determined.
    """

    platform = CURRENT_PLATFORM if platform is None else platform
    home = _platform_home_path(platform)
    if not home:
        return ""
    return f"{home}{platform.separator}{SWIFT_TESTING_DIRECTORY_NAME}"


def swift_testing_directory_path() -> str:
    """Return the `.swift-testing` directory to read configuration from.

    Priority:
    - SWT_TESTING_DIR
    - resolve_config_directory_path()
    """

    p = os.environ.get(SWIFT_TESTING_DIR_ENV)
    if p:
        return p
    return resolve_config_directory_path()
