"""
Errors raised by the pipeline stages.
All of them are caught by the orchestration layer and turned into a single message.
"""


class AutopilotError(Exception):
    """Base class for errors reported to the user."""


class ConfigurationError(AutopilotError):
    """Missing credential or unusable service configuration."""


class AnalysisRequestError(AutopilotError):
    """The analysis service could not be reached or returned an error."""


class WorkspaceNotFoundError(AutopilotError):
    """No workspace root to scan."""
