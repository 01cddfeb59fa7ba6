"""
Workspace scanner.
Produces the directory listing and key-file contents sent to the analysis service.
"""

from .scanner import get_directory_structure, identify_key_files, DEFAULT_IGNORE, KEY_FILES
from .snapshot import WorkspaceSnapshot, scan_workspace, format_key_files

__all__ = [
    "get_directory_structure",
    "identify_key_files",
    "DEFAULT_IGNORE",
    "KEY_FILES",
    "WorkspaceSnapshot",
    "scan_workspace",
    "format_key_files",
]
