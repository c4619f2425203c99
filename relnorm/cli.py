#!/usr/bin/env python
"""Normalize relative path strings from the command line.

    relnorm foo//bar ./baz/.            # ./foo/bar, ./baz
    relnorm --file paths.txt --json     # one JSON object per line
    relnorm --base /srv/data foo/       # /srv/data/foo
"""
import argparse
import json
import sys
from pathlib import PurePosixPath
from typing import Iterable, Optional, Sequence
from relnorm.errors import RelativePathError
from relnorm.normalize import normalize
from relnorm.utils.paths import append
from relnorm.config.settings import settings


def _read_paths(source: str) -> list[str]:
    """Non-blank lines of *source* (``-`` reads stdin), without the line ending."""
    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        with open(source, encoding="utf-8") as f:
            lines = f.read().splitlines()
    return [line for line in lines if line.strip()]


def process(paths: Iterable[str], context: str, base: Optional[PurePosixPath] = None, as_json: bool = False) -> int:
    """Normalize each path, print the results and return the number rejected."""
    rejected = 0
    for path in paths:
        try:
            if base is not None:
                result = str(append(base, path, context))
            else:
                result = normalize(path, context)
        except RelativePathError as exc:
            rejected += 1
            if as_json:
                print(json.dumps({"path": path, "error": exc.to_dict()}))
            print(f"⚠️  Rejected {path!r} - {exc}", file=sys.stderr)
            continue
        if as_json:
            print(json.dumps({"path": path, "normalized": result}))
        else:
            print(result)
    return rejected


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Normalize relative path strings to their canonical ./a/b form.")
    parser.add_argument("paths", nargs="*", help="Relative paths to normalize")
    parser.add_argument("--file", default=None, help="Read additional paths from FILE, one per line (- for stdin)")
    parser.add_argument("--context", default=None, help="Label to prefix error messages with (defaults to the configured context_label)")
    parser.add_argument("--base", default=None, help="Absolute path to append every normalized path to")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per input")
    args = parser.parse_args(argv)

    paths = list(args.paths)
    if args.file:
        try:
            paths.extend(_read_paths(args.file))
        except OSError as exc:
            parser.error(f"cannot read {args.file}: {exc}")
    if not paths:
        parser.error("no paths given")

    base = None
    if args.base is not None:
        base = PurePosixPath(args.base)
        if not base.is_absolute():
            parser.error(f"--base must be an absolute path, got {args.base!r}")

    context = args.context or f"{settings.context_label}.cli"
    rejected = process(paths, context, base=base, as_json=args.json)
    if rejected:
        print(f"\n✘ Rejected {rejected} of {len(paths)} path(s)", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
