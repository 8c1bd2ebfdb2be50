#!/usr/bin/env python3
"""
Append a quote to the live quotemaster document.

Usage:
  python scripts/add_quote.py --quote "Talk is cheap." --name "Linus Torvalds"
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the miniapis package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from miniapis.core.logging import configure_logging
from miniapis.services.quote_service import InvalidNameError, InvalidQuoteError, QuoteService


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a quote to quotemaster")
    ap.add_argument("--quote", required=True, help="Quote text (1-400 characters)")
    ap.add_argument("--name", required=True, help="Author name (1-40 characters)")
    args = ap.parse_args()

    configure_logging()
    svc = QuoteService()
    try:
        new_id = svc.new_quote(args.quote, args.name)
    except (InvalidQuoteError, InvalidNameError) as exc:
        raise SystemExit(str(exc))
    print("OK: quote added")
    print(f"  ID: {new_id}")
    print(f"  File: {svc.store.path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
