"""
Analysis service.
Builds the prompt from a workspace snapshot and calls DeepSeek (or Ollama).
"""

from .config import AnalysisConfig, load_config
from .prompt import build_prompt
from .client import request_analysis
from .service import analyze_workspace

__all__ = ["AnalysisConfig", "load_config", "build_prompt", "request_analysis", "analyze_workspace"]
