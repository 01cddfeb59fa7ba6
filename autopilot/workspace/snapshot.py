"""
Bundles scan results into the snapshot handed to the analysis service.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .scanner import get_directory_structure, identify_key_files

logger = logging.getLogger(__name__)


@dataclass
class WorkspaceSnapshot:
    """Directory listing and key-file contents of one workspace."""
    root: Path
    structure: str
    key_files: dict[str, str] = field(default_factory=dict)

    @property
    def entry_count(self) -> int:
        return len(self.structure.splitlines())

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "structure": self.structure,
            "key_files": self.key_files,
        }


def scan_workspace(
    root: str | Path,
    ignore_patterns: list[str] | None = None,
) -> WorkspaceSnapshot:
    """
    Scan the workspace root: listing first, then key files.
    Raises NotADirectoryError if the root is not a directory.
    """
    root = Path(root).resolve()
    structure = get_directory_structure(root, ignore_patterns)
    key_files = identify_key_files(root)
    snapshot = WorkspaceSnapshot(root=root, structure=structure, key_files=key_files)
    logger.info("Scanned %s: %d entries, %d key files", root, snapshot.entry_count, len(key_files))
    return snapshot


def format_key_files(key_files: dict[str, str]) -> str:
    """Encode the key-file map as indented JSON for the prompt."""
    return json.dumps(key_files, indent=2, ensure_ascii=False)
