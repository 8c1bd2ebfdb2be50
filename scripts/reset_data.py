#!/usr/bin/env python3
"""
Reset live JSON documents to their bundled defaults.

Runs with file-system access, so no reset password is asked for.

Usage:
  python scripts/reset_data.py [--quotes] [--planner]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from miniapis.core.config import get_settings
from miniapis.core.logging import configure_logging
from miniapis.repositories.json_storage import JsonDocumentStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset mini-apis data to defaults")
    ap.add_argument("--quotes", action="store_true", help="Reset the quotemaster document")
    ap.add_argument("--planner", action="store_true", help="Reset the myPlanner document")
    args = ap.parse_args()
    if not (args.quotes or args.planner):
        raise SystemExit("Nothing to reset: pass --quotes and/or --planner")

    configure_logging()
    settings = get_settings()
    targets = []
    if args.quotes:
        targets.append(JsonDocumentStore(settings.quotes_file, settings.quotes_default_file))
    if args.planner:
        targets.append(JsonDocumentStore(settings.planner_file, settings.planner_default_file))
    for store in targets:
        store.reset()
        print(f"OK: {store.path} reset from {store.default_path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
