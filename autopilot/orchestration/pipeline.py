"""
End-to-end pipeline: scan workspace → identify key files → ask the model → parse → render.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from autopilot.analysis import AnalysisConfig, load_config
from autopilot.analysis.service import analyze_workspace
from autopilot.errors import AutopilotError, WorkspaceNotFoundError
from autopilot.presenter import show_report, write_report
from autopilot.structurer import AnalysisRecord
from autopilot.workspace import WorkspaceSnapshot, get_directory_structure, identify_key_files

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of one analysis run. Exactly one of record/error is set."""
    root: Path | None
    record: AnalysisRecord | None = None
    raw_response: str = ""
    html_path: Path | None = None
    error: str | None = None


def _resolve_root(workspace_root: str | Path | None) -> Path:
    if workspace_root is None:
        raise WorkspaceNotFoundError("No workspace folder found!")
    root = Path(workspace_root).resolve()
    if not root.is_dir():
        raise WorkspaceNotFoundError("No workspace folder found!")
    return root


def run_analysis(
    workspace_root: str | Path | None,
    config: AnalysisConfig | None = None,
    *,
    progress: Callable[[str], None] | None = None,
    output_path: str | Path | None = None,
    open_browser: bool = False,
    render: bool = True,
    ignore_patterns: list[str] | None = None,
) -> PipelineResult:
    """
    Run the full flow and report progress text at each stage.
    Errors are not raised; they come back as PipelineResult.error.
    """
    report = progress or (lambda message: None)

    # 0. Workspace
    try:
        root = _resolve_root(workspace_root)
    except WorkspaceNotFoundError as e:
        return PipelineResult(root=None, error=str(e))

    raw = ""
    try:
        # 1. Directory structure
        report("Scanning project structure...")
        structure = get_directory_structure(root, ignore_patterns)

        # 2. Key files
        report("Identifying key files...")
        key_files = identify_key_files(root)
        snapshot = WorkspaceSnapshot(root=root, structure=structure, key_files=key_files)

        # 3. Model
        if config is None:
            config = load_config(root)
        report(f"Consulting {config.provider_label}...")
        raw, record = analyze_workspace(snapshot, config)

        # 4. Results
        html_path = None
        if render:
            report("Rendering results...")
            html_path = show_report(record, output_path) if open_browser else write_report(record, output_path)
    except (AutopilotError, OSError) as e:
        logger.debug("Analysis of %s failed", root, exc_info=True)
        return PipelineResult(root=root, raw_response=raw, error=f"Analysis failed: {e}")

    return PipelineResult(root=root, record=record, raw_response=raw, html_path=html_path)
