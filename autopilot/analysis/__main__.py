"""
CLI for the analysis service: scan a workspace and print the model's reply.
  python -m autopilot.analysis --root /path/to/project [--provider ollama --model llama3]
  python -m autopilot.analysis --root . --prompt-only     # print the prompt, no request
"""

import argparse
import json
import logging
from pathlib import Path

from autopilot.errors import AutopilotError
from autopilot.workspace import DEFAULT_IGNORE, scan_workspace
from .config import PROVIDERS, load_config
from .prompt import build_prompt
from .service import analyze_workspace


def main() -> None:
    ap = argparse.ArgumentParser(description="Ask an LLM to analyze a workspace")
    ap.add_argument("--root", "-r", default=".", type=Path, help="Workspace root directory")
    ap.add_argument("--provider", "-p", choices=PROVIDERS, help="Analysis service (default: deepseek)")
    ap.add_argument("--model", "-m", help="Model name (default: deepseek-chat / llama3)")
    ap.add_argument("--api-key", help="DeepSeek API key (default: DEEPSEEK_API_KEY)")
    ap.add_argument("--ollama-host", help="Ollama host (default: localhost:11434)")
    ap.add_argument("--skip-common", action="store_true", help="Skip node_modules, .git, venv, build output, etc.")
    ap.add_argument("--prompt-only", action="store_true", help="Print the prompt and exit without calling the service")
    ap.add_argument("--raw", action="store_true", help="Print only the raw reply")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    root = args.root.resolve()
    if not root.is_dir():
        print(f"Not a directory: {root}")
        raise SystemExit(1)
    snapshot = scan_workspace(root, DEFAULT_IGNORE if args.skip_common else None)

    if args.prompt_only:
        print(build_prompt(snapshot.structure, snapshot.key_files))
        return

    config = load_config(
        root,
        api_key=args.api_key,
        provider=args.provider,
        model=args.model,
        ollama_host=args.ollama_host,
    )
    print(f"Consulting {config.provider_label} (this may take a moment)...\n")
    try:
        raw, record = analyze_workspace(snapshot, config)
    except AutopilotError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    if args.raw:
        print(raw)
        return
    print("=== RAW RESPONSE ===")
    print(raw)
    print("\n=== PARSED ===")
    print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
