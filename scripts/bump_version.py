#!/usr/bin/env python3
"""Bump the integration version in manifest.json and pyproject.toml."""

from __future__ import annotations

import argparse
import json
import re
from pathlib import Path

MANIFEST = Path("custom_components/health_tracker/manifest.json")
PYPROJECT = Path("pyproject.toml")
_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+$")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--version", required=True, help="New version, e.g. 0.1.1")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    version = str(args.version).strip()
    if not _VERSION_RE.match(version):
        raise SystemExit(f"Invalid --version {version!r}, expected X.Y.Z")

    manifest = json.loads(MANIFEST.read_text(encoding="utf-8"))
    manifest["version"] = version
    MANIFEST.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    raw = PYPROJECT.read_text(encoding="utf-8")
    PYPROJECT.write_text(re.sub(r'(?m)^version = ".*"$', f'version = "{version}"', raw, count=1), encoding="utf-8")
    print("Updated version to", version)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
