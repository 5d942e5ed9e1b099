from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence, Union

_DRIVE = re.compile(r"^([A-Za-z]):$")


@dataclass(frozen=True)
class Plain:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Drive:
    letter: str

    def __str__(self) -> str:
        return f"{self.letter}:"


Segment = Union[Plain, Drive]

ROOT = Plain("")


def segments(path: str, detect_drive: bool = False) -> list[Segment]:
    """Split a URI path on `/`.

    A leading `/` shows up as the empty root marker. With `detect_drive`,
    a first segment like `c:` becomes a `Drive` so that parent/child
    walks stop at the drive root.
    """
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    if path in ("", "/"):
        return [ROOT]

    result: list[Segment] = [Plain(part) for part in path.split("/")]
    if detect_drive:
        index = 1 if result[0] == ROOT else 0
        if index < len(result):
            match = _DRIVE.match(result[index].text)
            if match:
                result[index] = Drive(match.group(1))
    return result


def join_segments(segs: Sequence[Segment]) -> str:
    if not segs:
        return ""
    text = "/".join(str(s) for s in segs)
    if list(segs) == [ROOT] or isinstance(segs[-1], Drive):
        text += "/"
    return text


def is_root(segs: Sequence[Segment]) -> bool:
    if not segs:
        return True
    rest = list(segs[1:]) if segs[0] == ROOT else list(segs)
    return not rest or (len(rest) == 1 and isinstance(rest[0], Drive))


def collapse(segs: Sequence[Segment]) -> list[Segment]:
    """Drop empty segments, keeping a leading root marker."""
    kept: list[Segment] = [ROOT] if segs and segs[0] == ROOT else []
    kept.extend(s for s in segs if str(s))
    return kept
