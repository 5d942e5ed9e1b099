from __future__ import annotations

from typing import Callable, Iterable, List, Optional, TypeVar

from app.locations.policy import has_to_ignore_case
from app.locations.uri import Location, from_file_path
from app.locations.utils.platform import resolve_windows

T = TypeVar("T")


def _fold(text: str, ignore_case: bool) -> str:
    return text.casefold() if ignore_case else text


def _same_origin(a: Location, b: Location) -> bool:
    return (
        a.scheme.casefold() == b.scheme.casefold()
        and a.authority.casefold() == b.authority.casefold()
    )


def _as_folder(path: str) -> str:
    return path if path.endswith("/") else path + "/"


def is_equal(first: Location, second: Location, ignore_case: bool = False) -> bool:
    """Compare scheme, authority and path. Query and fragment are ignored."""
    if not _same_origin(first, second):
        return False
    return _fold(first.path, ignore_case) == _fold(second.path, ignore_case)


def is_equal_or_parent(location: Location, candidate: Location, ignore_case: bool = False) -> bool:
    """True when `candidate` is `location` itself or one of its folders.

    Both paths get a trailing slash before the prefix test, so `/foo/barX`
    is not under `/foo/bar`.
    """
    if not _same_origin(location, candidate):
        return False
    child = _fold(_as_folder(location.path), ignore_case)
    parent = _fold(_as_folder(candidate.path), ignore_case)
    return child.startswith(parent)


def distinct_parents(
    items: Iterable[T],
    to_location: Callable[[T], Location],
    windows: bool | None = None,
) -> List[T]:
    """Keep the items whose location is not inside another item's location.

    Of several items with equal locations only the first survives. The
    survivors keep their input order.
    """
    items = list(items)
    locations = [to_location(item) for item in items]

    distinct: List[T] = []
    for i, candidate in enumerate(locations):
        ignore_case = has_to_ignore_case(candidate, windows)
        covered = False
        for j, other in enumerate(locations):
            if j == i or not is_equal_or_parent(candidate, other, ignore_case):
                continue
            if j < i or not is_equal_or_parent(other, candidate, ignore_case):
                covered = True
                break
        if not covered:
            distinct.append(items[i])
    return distinct


def is_malformed_file_uri(candidate: Location, windows: bool | None = None) -> Optional[Location]:
    """Return the `file` location a scheme-less (or drive-as-scheme) value meant.

    `parse("c:/foo")` reads `c` as the scheme; on Windows that is a drive.
    """
    windows = resolve_windows(windows)
    if not candidate.scheme:
        return from_file_path(candidate.path, windows)
    if windows and len(candidate.scheme) == 1 and candidate.scheme.isalpha():
        return from_file_path(f"{candidate.scheme}:{candidate.path}", windows)
    return None
