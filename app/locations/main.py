from __future__ import annotations

import argparse
import re

from app.locations.compare import distinct_parents, is_equal, is_equal_or_parent
from app.locations.paths import basename, dirname, join_path, normalize_path
from app.locations.policy import has_to_ignore_case
from app.locations.uri import Location, from_file_path, parse
from app.locations.utils.platform import PLATFORM_CHOICES, resolve_windows

# two or more characters, so a drive like `c:` is read as a file path
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


def to_location(text: str, windows: bool) -> Location:
    if _SCHEME.match(text):
        return parse(text)
    return from_file_path(text, windows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Navigate and compare resource locations")
    parser.add_argument("--platform", choices=PLATFORM_CHOICES, default="auto", help="Host rules for file locations")
    case = parser.add_mutually_exclusive_group()
    case.add_argument("--ignore-case", dest="ignore_case", action="store_true", help="Compare paths case-insensitively")
    case.add_argument("--match-case", dest="ignore_case", action="store_false", help="Compare paths case-sensitively")
    parser.set_defaults(ignore_case=None)

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("dirname", help="Parent location").add_argument("location")
    commands.add_parser("basename", help="Last path segment").add_argument("location")
    commands.add_parser("normalize", help="Resolve . and .. segments").add_argument("location")

    join = commands.add_parser("join", help="Append path fragments")
    join.add_argument("location")
    join.add_argument("fragments", nargs="+")

    equal = commands.add_parser("equal", help="Whether two locations are equal")
    equal.add_argument("first")
    equal.add_argument("second")

    parent = commands.add_parser("parent", help="Whether CANDIDATE is LOCATION or one of its folders")
    parent.add_argument("location")
    parent.add_argument("candidate")

    distinct = commands.add_parser("distinct", help="Topmost locations of a set")
    distinct.add_argument("locations", nargs="+")
    return parser


def run_command(args: argparse.Namespace) -> list[str]:
    windows = resolve_windows(args.platform)

    def loc(text: str) -> Location:
        return to_location(text, windows)

    def ignore_case(location: Location) -> bool:
        if args.ignore_case is None:
            return has_to_ignore_case(location, windows)
        return args.ignore_case

    if args.command == "dirname":
        return [str(dirname(loc(args.location), windows))]
    if args.command == "basename":
        return [basename(loc(args.location), windows)]
    if args.command == "normalize":
        return [str(normalize_path(loc(args.location), windows))]
    if args.command == "join":
        return [str(join_path(loc(args.location), *args.fragments, windows=windows))]
    if args.command == "equal":
        first = loc(args.first)
        return [str(is_equal(first, loc(args.second), ignore_case(first))).lower()]
    if args.command == "parent":
        location = loc(args.location)
        return [str(is_equal_or_parent(location, loc(args.candidate), ignore_case(location))).lower()]
    if args.command == "distinct":
        locations = [loc(text) for text in args.locations]
        return [str(item) for item in distinct_parents(locations, lambda item: item, windows)]
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    for line in run_command(args):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
