#!/usr/bin/env python3
"""Check method coverage between the facade clients and the manifest."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from build_method_manifest import facade_entries  # noqa: E402
from method_registry import DEFAULT_MANIFEST, load_json  # noqa: E402


def compare(manifest: dict[str, Any]) -> dict[str, Any]:
    facade_methods = {e["method"] for e in facade_entries()}
    manifest_methods = {e["method"] for e in manifest.get("entries", [])}

    missing_in_manifest = sorted(facade_methods - manifest_methods)
    missing_in_facade = sorted(manifest_methods - facade_methods)
    return {
        "ok": not missing_in_manifest and not missing_in_facade,
        "facade_count": len(facade_methods),
        "manifest_count": len(manifest_methods),
        "missing_in_manifest": missing_in_manifest,
        "missing_in_facade": missing_in_facade,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--manifest", default=str(DEFAULT_MANIFEST))
    args = parser.parse_args()

    payload = compare(load_json(Path(args.manifest)))
    print(json.dumps(payload, indent=2))
    return 0 if payload["ok"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
