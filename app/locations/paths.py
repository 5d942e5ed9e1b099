from __future__ import annotations

from app.locations.policy import uses_drive_letters
from app.locations.uri import Location
from app.locations.utils.segments import ROOT, Drive, Segment, collapse, is_root, join_segments, segments


def _segments_of(location: Location, windows: bool | None) -> list[Segment]:
    return segments(location.path, uses_drive_letters(location, windows))


def _trailing_trimmed(location: Location, windows: bool | None) -> list[Segment]:
    # `/a/b//` leaves empty segments after the one stripped slash
    segs = _segments_of(location, windows)
    while len(segs) > 1 and segs[-1] == ROOT:
        segs.pop()
    return segs


def dirname(location: Location, windows: bool | None = None) -> Location:
    """Location of the parent folder.

    Roots, including a drive root such as `/c:/`, are their own parent.
    Only `path` changes; a relative single segment has the empty path as
    its parent.
    """
    segs = _trailing_trimmed(location, windows)
    if is_root(segs):
        return location
    return location.with_(path=join_segments(segs[:-1]))


def basename(location: Location, windows: bool | None = None) -> str:
    segs = _trailing_trimmed(location, windows)
    if is_root(segs):
        return ""
    return str(segs[-1])


def basename_or_authority(location: Location, windows: bool | None = None) -> str:
    return basename(location, windows) or location.authority


def join_path(location: Location, *fragments: str | None, windows: bool | None = None) -> Location:
    """Append relative path fragments to `location`.

    A leading `/` on a fragment does not make it absolute, and `None`
    fragments are skipped. Empty segments are collapsed; scheme, authority,
    query and fragment all come from `location`.
    """
    segs = _segments_of(location, windows)
    for fragment in fragments:
        if fragment is None:
            continue
        segs.extend(s for s in segments(fragment) if s != ROOT)
    return location.with_(path=join_segments(collapse(segs)))


def normalize_path(location: Location, windows: bool | None = None) -> Location:
    """Resolve `.` and `..` segments without climbing above the root."""
    if not location.path:
        return location
    segs = collapse(_segments_of(location, windows))
    prefix: list[Segment] = []
    if segs and segs[0] == ROOT:
        prefix.append(segs.pop(0))
    if segs and isinstance(segs[0], Drive):
        prefix.append(segs.pop(0))

    stack: list[Segment] = []
    for seg in segs:
        if str(seg) == ".":
            continue
        if str(seg) == "..":
            if stack and str(stack[-1]) != "..":
                stack.pop()
            elif not prefix:
                stack.append(seg)
            continue
        stack.append(seg)

    resolved = prefix + stack
    path = join_segments(resolved)
    if stack and location.path.endswith("/"):
        path += "/"
    if not resolved and location.path and not location.path.startswith("/"):
        path = "."
    return location.with_(path=path)
