"""
Response structurer.
Turns the model's free-text reply into an AnalysisRecord.
"""

from .record import AnalysisRecord
from .parser import parse_response, ParseTrace, SectionRule, DEFAULT_RULES

__all__ = ["AnalysisRecord", "parse_response", "ParseTrace", "SectionRule", "DEFAULT_RULES"]
