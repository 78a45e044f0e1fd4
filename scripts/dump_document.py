#!/usr/bin/env python
"""Parse a Gura file and write its data as JSON, or its diagnostics on failure."""

import argparse
import json
import logging
from pathlib import Path
import sys

from gurapy import GuraError, parse_file


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump a parsed Gura document as JSON")
    parser.add_argument("input", type=Path, help="Gura file to parse")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Log parser DEBUG records")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        data = parse_file(args.input)
    except GuraError as error:
        diagnostic = error.to_diagnostic()
        print(f"{args.input}:{diagnostic.line}: {diagnostic.code}: {diagnostic.message}", file=sys.stderr)
        if diagnostic.hint:
            print(f"  hint: {diagnostic.hint}", file=sys.stderr)
        return 1

    # inf/nan are written as JSON's non-standard Infinity/NaN literals.
    rendered = json.dumps(data, indent=2, ensure_ascii=False)
    if args.output is None:
        print(rendered)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(rendered + "\n", encoding="utf-8")
    print(f"Wrote {len(data)} top-level keys to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
