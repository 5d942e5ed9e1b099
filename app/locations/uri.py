from __future__ import annotations

import re
from dataclasses import dataclass, replace
from urllib.parse import quote, unquote, urlsplit

from app.locations.utils.pathing import to_native_path, to_uri_path
from app.locations.utils.platform import resolve_windows

FILE_SCHEME = "file"

_UPPER_DRIVE = re.compile(r"^(/?)([A-Z]):")


@dataclass(frozen=True)
class Location:
    """An immutable URI value: `scheme://authority/path?query#fragment`.

    Fields hold decoded text. Two locations with the same fields are
    interchangeable; nothing in this package mutates one in place.
    """

    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    def with_(self, **changes: str) -> "Location":
        return replace(self, **changes)

    def __str__(self) -> str:
        return to_string(self)


def from_components(
    scheme: str = "",
    authority: str = "",
    path: str = "",
    query: str = "",
    fragment: str = "",
) -> Location:
    return Location(scheme, authority, path, query, fragment)


def from_file_path(native_path: str, windows: bool | None = None) -> Location:
    authority, path = to_uri_path(native_path, resolve_windows(windows))
    return Location(FILE_SCHEME, authority, path)


def parse(text: str) -> Location:
    """Parse a serialized URI, percent-decoding each component.

    Raises ValueError only where `urllib.parse.urlsplit` does (bad IPv6 hosts).
    """
    parts = urlsplit(text)
    return Location(
        scheme=parts.scheme,
        authority=unquote(parts.netloc),
        path=unquote(parts.path),
        query=unquote(parts.query),
        fragment=unquote(parts.fragment),
    )


def _encode_authority(authority: str) -> str:
    userinfo, sep, hostport = authority.rpartition("@")
    host, colon, port = hostport.rpartition(":")
    if not colon or not port.isdigit():
        host, colon, port = hostport, "", ""

    encoded = quote(host, safe="") + colon + port
    if sep:
        encoded = quote(userinfo, safe=":") + "@" + encoded
    return encoded


def to_string(location: Location) -> str:
    out = []
    if location.scheme:
        out.append(f"{location.scheme}:")
    if location.authority or location.scheme == FILE_SCHEME:
        out.append("//")
    if location.authority:
        out.append(_encode_authority(location.authority))
    if location.path:
        # drive letters are serialized lower-case: /C:/x -> /c%3A/x
        path = _UPPER_DRIVE.sub(lambda m: m.group(1) + m.group(2).lower() + ":", location.path)
        out.append(quote(path, safe="/"))
    if location.query:
        out.append("?" + quote(location.query, safe=""))
    if location.fragment:
        out.append("#" + quote(location.fragment, safe=""))
    return "".join(out)


def fs_path(location: Location, windows: bool | None = None) -> str:
    """Native path for a `file` location; other schemes give their path."""
    if location.scheme != FILE_SCHEME:
        return location.path
    return to_native_path(location.authority, location.path, resolve_windows(windows))
