from __future__ import annotations

from typing import Iterable, Optional

from app.locations.compare import distinct_parents, is_equal_or_parent
from app.locations.policy import has_to_ignore_case
from app.locations.uri import Location


def normalize_roots(
    selected_roots: Iterable[Optional[Location]],
    windows: bool | None = None,
) -> list[Location]:
    """Reduce a folder selection to its topmost roots.

    Behavior:
    - Missing entries and locations with neither a path nor an authority are skipped
    - A root inside another selected root is dropped
    - Repeated roots are kept once, first occurrence wins
    """
    roots = [r for r in selected_roots if r is not None and (r.path.strip() or r.authority.strip())]
    return distinct_parents(roots, lambda r: r, windows)


def is_in_scope(
    location: Location,
    selected_roots: Iterable[Optional[Location]],
    windows: bool | None = None,
) -> bool:
    for root in normalize_roots(selected_roots, windows):
        if is_equal_or_parent(location, root, has_to_ignore_case(root, windows)):
            return True
    return False
