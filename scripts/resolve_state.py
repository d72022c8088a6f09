#!/usr/bin/env python3
"""Resolve an exported feature snapshot and print each feature's status.

Reads the same JSON the admin export produces (a list of feature objects),
or the code catalog when no input is given.

  python scripts/resolve_state.py --input exported.json
  python scripts/resolve_state.py --format json < exported.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.catalog import default_features  # noqa: E402
from core.models import ComputedFeature  # noqa: E402
from core.portability import ImportStateError, parse_state  # noqa: E402
from core.resolver import resolve  # noqa: E402
from core.views import status_counts  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve feature statuses from an exported state file.")
    parser.add_argument("--input", help="Exported state JSON path ('-' for stdin). Default: code catalog")
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--only-blocked",
        action="store_true",
        help="Only print features that are not active",
    )
    return parser.parse_args(argv)


def render_table(features: list[ComputedFeature]) -> str:
    width = max([len(f.id) for f in features] + [2])
    lines = [f"{'ID'.ljust(width)}  {'STATUS'.ljust(19)}  BLOCKED BY"]
    for f in features:
        lines.append(f"{f.id.ljust(width)}  {f.status.value.ljust(19)}  {', '.join(f.blocked_by) or '-'}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.input is None:
        features = default_features()
    else:
        try:
            text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text(encoding="utf-8")
            features = parse_state(text)
        except (ImportStateError, OSError, UnicodeDecodeError) as e:
            print(f"RESOLVE_FAIL: {e}", file=sys.stderr)
            return 1

    computed = resolve(features)
    shown = [f for f in computed if not f.is_active] if args.only_blocked else computed

    if args.format == "json":
        print(
            json.dumps(
                {
                    "stats": status_counts(computed),
                    "features": [
                        {"id": f.id, "status": f.status.value, "blockedBy": list(f.blocked_by)} for f in shown
                    ],
                },
                indent=2,
            )
        )
    else:
        print(render_table(shown))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
