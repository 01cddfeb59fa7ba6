"""
Workspace snapshot -> prompt -> model reply -> AnalysisRecord.
"""

import logging

from autopilot.structurer import AnalysisRecord, ParseTrace, parse_response
from autopilot.workspace.snapshot import WorkspaceSnapshot
from .client import request_analysis
from .config import AnalysisConfig
from .prompt import build_prompt

logger = logging.getLogger(__name__)


def analyze_workspace(
    snapshot: WorkspaceSnapshot,
    config: AnalysisConfig,
    trace: ParseTrace | None = None,
) -> tuple[str, AnalysisRecord]:
    """Ask the service about the snapshot. Returns the raw reply and the parsed record."""
    prompt = build_prompt(snapshot.structure, snapshot.key_files)
    raw = request_analysis(prompt, config)
    logger.info("Received %d chars from %s", len(raw), config.provider)
    return raw, parse_response(raw, trace=trace)
