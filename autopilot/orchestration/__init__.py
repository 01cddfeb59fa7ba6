"""
Orchestration.
Single command: workspace scan → analysis service → structurer → HTML report.
"""

from .pipeline import run_analysis, PipelineResult

__all__ = ["run_analysis", "PipelineResult"]
