from __future__ import annotations

import re
from pathlib import PureWindowsPath

_DRIVE_PATH = re.compile(r"^/?([A-Za-z]):")


def to_uri_path(native_path: str, windows: bool) -> tuple[str, str]:
    """Convert a native file path into an (authority, path) pair.

    - Backslashes become slashes on Windows
    - `\\\\server\\share` UNC paths move the server into the authority
    - A missing leading slash is added, so `c:/x` becomes `/c:/x`
    """
    path = native_path
    if windows and path:
        trailing = path.endswith(("\\", "/")) and len(path) > 1
        path = PureWindowsPath(path).as_posix()
        if trailing and not path.endswith("/"):
            path += "/"

    authority = ""
    if path.startswith("//"):
        end = path.find("/", 2)
        if end == -1:
            authority, path = path[2:], "/"
        else:
            authority, path = path[2:end], path[end:] or "/"

    if not path.startswith("/"):
        path = "/" + path
    return authority, path


def to_native_path(authority: str, path: str, windows: bool) -> str:
    """Inverse of `to_uri_path`, used for `file` locations."""
    if authority and len(path) > 1:
        native = f"//{authority}{path}"
    elif _DRIVE_PATH.match(path) and path.startswith("/"):
        native = path[1:]
    else:
        native = path

    if windows:
        native = native.replace("/", "\\")
    return native
