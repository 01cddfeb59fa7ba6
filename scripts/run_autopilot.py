#!/usr/bin/env python3
"""
One-command entry point for Autopilot: scan project → DeepSeek → HTML report.
Usage:
  python scripts/run_autopilot.py                    # analyze the current directory
  python scripts/run_autopilot.py /path/to/project   # analyze that project
Requires: DEEPSEEK_API_KEY in the environment or in the project's .env file.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


def main():
    workspace = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else Path.cwd()

    from autopilot.analysis import load_config
    from autopilot.orchestration import run_analysis

    config = load_config(workspace if workspace.is_dir() else None)
    if config.provider == "deepseek" and not config.api_key:
        print("DeepSeek API key not configured. Set DEEPSEEK_API_KEY or add it to .env.")
        return 1

    print(f"Analyzing project: {workspace}\n")
    result = run_analysis(
        workspace,
        config,
        progress=print,
        open_browser=True,
    )

    if result.error:
        print(f"Error: {result.error}")
        return 1

    print(f"\nProject: {result.record.project_name or '(unnamed)'}")
    print(f"Report: {result.html_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
