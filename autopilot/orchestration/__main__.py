"""
CLI for the full pipeline (scan → DeepSeek/Ollama → parse → HTML report).
  python -m autopilot.orchestration --root . [--open]
  python -m autopilot.orchestration --root . --provider ollama --model llama3 --json
"""

import argparse
import json
import logging
from pathlib import Path

from autopilot.analysis import load_config
from autopilot.analysis.config import PROVIDERS
from autopilot.workspace import DEFAULT_IGNORE
from .pipeline import run_analysis


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Autopilot: scan a project → ask an LLM to analyze it → render an HTML report"
    )
    ap.add_argument("--root", "-r", default=".", type=Path, help="Workspace root to analyze")
    ap.add_argument("--output", "-o", help="HTML report path (default: autopilot_outputs/...)")
    ap.add_argument("--open", action="store_true", help="Open the report in the browser")
    ap.add_argument("--json", action="store_true", help="Print the parsed analysis as JSON instead of writing HTML")
    ap.add_argument("--provider", "-p", choices=PROVIDERS, help="Analysis service (default: deepseek)")
    ap.add_argument("--model", "-m", help="Model name (default: deepseek-chat / llama3)")
    ap.add_argument("--api-key", help="DeepSeek API key (default: DEEPSEEK_API_KEY)")
    ap.add_argument("--ollama-host", help="Ollama host (default: localhost:11434)")
    ap.add_argument("--skip-common", action="store_true", help="Skip node_modules, .git, venv, build output, etc.")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    root = args.root.resolve()
    config = load_config(
        root if root.is_dir() else None,
        api_key=args.api_key,
        provider=args.provider,
        model=args.model,
        ollama_host=args.ollama_host,
    )
    result = run_analysis(
        root,
        config,
        progress=None if args.json else (lambda message: print(f"Analyzing project... {message}")),
        output_path=args.output,
        open_browser=args.open,
        render=not args.json,
        ignore_patterns=DEFAULT_IGNORE if args.skip_common else None,
    )

    if result.error:
        if args.json:
            print(json.dumps({"error": result.error, "root": str(result.root or root)}, indent=2))
        else:
            print(f"Error: {result.error}")
        raise SystemExit(1)

    if args.json:
        print(json.dumps(result.record.to_dict(), indent=2, ensure_ascii=False))
        return

    record = result.record
    print()
    print(f"Project: {record.project_name or '(unnamed)'}")
    print(f"Tech stack: {', '.join(t for t in record.tech_stack if t) or '(none parsed)'}")
    print(f"Report: {result.html_path}")


if __name__ == "__main__":
    main()
