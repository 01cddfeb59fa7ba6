"""
CLI for the response structurer: parse a saved model reply.
  python -m autopilot.structurer reply.txt [--trace]
  python -m autopilot.structurer - < reply.txt
"""

import argparse
import json
import sys
from pathlib import Path

from .parser import parse_response, ParseTrace


def main() -> None:
    ap = argparse.ArgumentParser(description="Parse a model reply into a structured analysis record")
    ap.add_argument("reply", help="Reply text file, or '-' for stdin")
    ap.add_argument("--trace", action="store_true", help="Also print which sections matched, were dropped or overwritten")
    args = ap.parse_args()

    if args.reply == "-":
        raw = sys.stdin.read()
    else:
        path = Path(args.reply)
        if not path.is_file():
            print(f"Error: not a file: {path}")
            raise SystemExit(1)
        raw = path.read_text(encoding="utf-8")

    trace = ParseTrace() if args.trace else None
    record = parse_response(raw, trace=trace)
    print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))

    if trace is not None:
        print("\n=== SECTIONS ===")
        for event in trace.events:
            target = f" -> {event.field}" if event.field else ""
            print(f"  [{event.kind}] {event.heading!r}{target}")


if __name__ == "__main__":
    main()
