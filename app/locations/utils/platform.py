from __future__ import annotations

import sys

PLATFORM_CHOICES = ("auto", "windows", "posix")


def is_windows_host() -> bool:
    return sys.platform == "win32"


def resolve_windows(value: bool | str | None = None) -> bool:
    """Turn an explicit platform choice into the Windows flag.

    `None` and "auto" read the host at call time; a bool is returned as is.
    """
    if isinstance(value, bool):
        return value
    if value is None or value == "auto":
        return is_windows_host()
    if value == "windows":
        return True
    if value == "posix":
        return False
    raise ValueError(f"unknown platform: {value!r}")
