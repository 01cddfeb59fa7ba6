"""
CLI for the workspace scanner.
  python -m autopilot.workspace --root /path/to/project [--skip-common] [--json] [--output scan.json]
"""

import argparse
import json
from pathlib import Path

from .scanner import DEFAULT_IGNORE
from .snapshot import scan_workspace


def main() -> None:
    ap = argparse.ArgumentParser(description="Scan a workspace and list its structure and key files")
    ap.add_argument("--root", "-r", default=".", help="Workspace root directory")
    ap.add_argument("--skip-common", action="store_true", help="Skip node_modules, .git, venv, build output, etc.")
    ap.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    ap.add_argument("--output", "-o", help="Write snapshot JSON to file")
    args = ap.parse_args()
    root = Path(args.root).resolve()
    if not root.is_dir():
        print(f"Error: not a directory: {root}")
        raise SystemExit(1)
    snapshot = scan_workspace(root, DEFAULT_IGNORE if args.skip_common else None)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(snapshot.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"Wrote snapshot ({snapshot.entry_count} entries) to {out_path}")
    if args.json:
        print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))
        return
    if not args.output:
        print("=== Project structure ===")
        print(snapshot.structure, end="")
        print("\n=== Key files ===")
        for name in snapshot.key_files:
            print(f"  {name}")
        if not snapshot.key_files:
            print("  (none found)")


if __name__ == "__main__":
    main()
