"""
CLI for the presenter: render a saved model reply (or parsed JSON record) as HTML.
  python -m autopilot.presenter reply.txt [--output report.html] [--open]
  python -m autopilot.presenter record.json --json
"""

import argparse
import json
from pathlib import Path

from autopilot.structurer import AnalysisRecord, parse_response
from .html_report import show_report, write_report


def _record_from_json(data: dict) -> AnalysisRecord:
    return AnalysisRecord(
        project_name=data.get("projectName", ""),
        tech_stack=tuple(data.get("techStack", ())),
        project_ideas=tuple(data.get("projectIdeas", ())),
        folder_structure_analysis=data.get("folderStructureAnalysis", ""),
        summary=data.get("summary", ""),
    )


def main() -> None:
    ap = argparse.ArgumentParser(description="Render a project analysis as HTML")
    ap.add_argument("source", help="Raw reply text file (or JSON record with --json)")
    ap.add_argument("--json", action="store_true", help="Source is a JSON record with camelCase keys")
    ap.add_argument("--output", "-o", help="HTML file to write")
    ap.add_argument("--open", action="store_true", help="Open the report in the browser")
    args = ap.parse_args()
    source = Path(args.source)
    if not source.is_file():
        print(f"Error: not a file: {source}")
        raise SystemExit(1)
    text = source.read_text(encoding="utf-8")
    record = _record_from_json(json.loads(text)) if args.json else parse_response(text)
    path = show_report(record, args.output) if args.open else write_report(record, args.output)
    print(f"Wrote report to {path}")


if __name__ == "__main__":
    main()
