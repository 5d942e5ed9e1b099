from __future__ import annotations

from app.locations.uri import FILE_SCHEME, Location
from app.locations.utils.platform import resolve_windows

# Schemes whose paths never distinguish case, whatever the host.
CASE_INSENSITIVE_SCHEMES = frozenset({"mailto", "urn"})


def has_to_ignore_case(location: Location, windows: bool | None = None) -> bool:
    """Whether paths of `location` should be compared case-insensitively.

    `file` locations follow the host: Windows-like hosts ignore case, others
    do not. The host flag is read on every call unless `windows` is given.
    """
    scheme = location.scheme.casefold()
    if scheme == FILE_SCHEME:
        return resolve_windows(windows)
    return scheme in CASE_INSENSITIVE_SCHEMES


def uses_drive_letters(location: Location, windows: bool | None = None) -> bool:
    return location.scheme.casefold() == FILE_SCHEME and resolve_windows(windows)
