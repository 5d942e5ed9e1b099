#!/usr/bin/env python3
from __future__ import annotations

import subprocess
import sys


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd, check=False).returncode


def main() -> int:
    checks = [
        [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_*.py"],
        [sys.executable, "-m", "app.locations.main", "--platform", "posix", "dirname", "/some/file/test.txt"],
        [sys.executable, "-m", "app.locations.main", "--platform", "windows", "join", r"c:\foo\bar", "/file.js"],
    ]
    for cmd in checks:
        code = run(cmd)
        if code != 0:
            print("\n❌ dev_check failed")
            return code

    print("\n✅ dev_check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
