"""
Autopilot: project analysis.
Scans a workspace, asks an LLM to describe it, parses the reply into a
structured record and renders it as an HTML report.
"""

__version__ = "0.1.0"
