#!/usr/bin/env python3
"""Build method-manifest.json from the facade method registries."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from client_factory import CLIENT_CLASSES  # noqa: E402
from method_registry import DEFAULT_MANIFEST  # noqa: E402
from rpc_dispatch import facade_methods  # noqa: E402

# Node-stopping and wallet-exporting calls stay out of the CLI unless enabled by hand.
DISABLED_METHODS = {
    "dumpprivkey",
    "dumpwallet",
    "stop",
}


def facade_entries() -> list[dict[str, Any]]:
    entries: list[dict[str, Any]] = []
    for cls in CLIENT_CLASSES:
        for method, attr in facade_methods(cls).items():
            entries.append(
                {
                    "method": method,
                    "category": cls.category,
                    "facade": attr,
                    "enabled": method not in DISABLED_METHODS,
                }
            )
    return entries


def build_manifest(entries: list[dict[str, Any]]) -> dict[str, Any]:
    entries = sorted(entries, key=lambda e: e["method"])
    category_counts: dict[str, int] = {}
    for entry in entries:
        category = entry["category"]
        category_counts[category] = category_counts.get(category, 0) + 1

    return {
        "count": len(entries),
        "category_counts": category_counts,
        "entries": entries,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", default=str(DEFAULT_MANIFEST), help="Output path for method-manifest.json")
    args = parser.parse_args()

    output_path = Path(args.output).resolve()
    manifest = build_manifest(facade_entries())

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    print(
        json.dumps(
            {
                "output": str(output_path),
                "count": manifest["count"],
                "category_counts": manifest["category_counts"],
            },
            indent=2,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
