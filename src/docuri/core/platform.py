"""
Platform detection for path mapping.

URIs map to filesystem paths differently on Windows (drive letters, backslash
separators, case-insensitive names) than on POSIX systems. This module decides
which convention applies.
"""

import os
import sys
from typing import Optional

from ..config import PLATFORM_ENV_VAR

WINDOWS = "windows"
POSIX = "posix"
AUTO = "auto"

PLATFORM_CHOICES = (AUTO, POSIX, WINDOWS)


def is_windows(override: Optional[bool] = None) -> bool:
    """
    Decide whether Windows path conventions apply.

    Resolution order:
    1. An explicit ``override`` from the caller.
    2. The ``DOCURI_PLATFORM`` environment variable (``windows`` / ``posix``).
    3. The host interpreter's ``sys.platform``.

    Args:
        override: Force Windows (True) or POSIX (False) semantics.

    Returns:
        bool: True when paths should be treated the Windows way.
    """
    if override is not None:
        return override

    forced = os.getenv(PLATFORM_ENV_VAR, "").strip().lower()
    if forced == WINDOWS:
        return True
    if forced == POSIX:
        return False

    return sys.platform.startswith("win")


def resolve_platform(choice: str) -> Optional[bool]:
    """Translate a ``auto|posix|windows`` choice into an ``is_windows`` override."""
    choice = choice.lower()
    if choice not in PLATFORM_CHOICES:
        raise ValueError(f"Unknown platform: {choice!r}")
    if choice == AUTO:
        return None
    return choice == WINDOWS
